# photo_api/core/security.py
from datetime import datetime, timedelta, timezone
from typing import Any

from passlib.context import CryptContext
from jose import jwt

# argon2: hash con sal y costo configurable
pwd_context = CryptContext(
    schemes=["argon2"],
    default="argon2",
    deprecated="auto",
)


class PasswordMismatch(ValueError):
    pass


class MissingSecretError(RuntimeError):
    """JWT_SECRET_KEY no está configurado."""


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def check_password(hashed: str, password: str) -> None:
    """
    Lanza PasswordMismatch si no coincide (o si el hash no es reconocible).
    """
    try:
        ok = pwd_context.verify(password, hashed)
    except ValueError as e:
        raise PasswordMismatch("unrecognized password hash") from e
    if not ok:
        raise PasswordMismatch("password mismatch")


def create_access_token(
    sub: str,
    secret: str,
    *,
    algorithm: str = "HS256",
    expires_minutes: int = 1440,
) -> str:
    expire = datetime.now(timezone.utc) + timedelta(minutes=expires_minutes)
    payload = {"sub": sub, "exp": expire}
    return jwt.encode(payload, secret, algorithm=algorithm)


class TokenVerifier:
    """
    Valida la firma (y `exp`, si viene) de un bearer token.
    No extrae identidad: solo deja pasar o no.
    """

    def __init__(self, secret: str | None, algorithm: str = "HS256"):
        self.secret = secret
        self.algorithm = algorithm

    def verify(self, token: str) -> dict[str, Any]:
        if not self.secret:
            raise MissingSecretError("JWT_SECRET_KEY is not set")
        # jose.JWTError si la firma no cuadra, está vencido o mal formado
        return jwt.decode(token, self.secret, algorithms=[self.algorithm])
