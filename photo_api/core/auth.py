# photo_api/core/auth.py
import logging

from fastapi import Header, HTTPException, Request, status
from jose import JWTError

from photo_api.core.security import MissingSecretError, TokenVerifier

log = logging.getLogger("uvicorn")


def _extract_token(authorization: str) -> str:
    # acepta "Bearer XXX" o el token pelado
    if authorization.lower().startswith("bearer "):
        return authorization.split(" ", 1)[1].strip()
    return authorization.strip()


async def require_token(
    request: Request,
    authorization: str | None = Header(None),
) -> None:
    if not authorization:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authorization header required",
        )

    verifier: TokenVerifier = request.app.state.token_verifier
    try:
        verifier.verify(_extract_token(authorization))
    except MissingSecretError:
        log.error("❌ JWT_SECRET_KEY no configurado; no se pueden validar tokens")
        raise HTTPException(status_code=500, detail="Internal server error")
    except JWTError:
        raise HTTPException(status_code=401, detail="Invalid token")
