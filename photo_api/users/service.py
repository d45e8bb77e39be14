# photo_api/users/service.py
from __future__ import annotations
from email_validator import validate_email, EmailNotValidError
from sqlalchemy.ext.asyncio import AsyncSession
from photo_api.core.security import hash_password, check_password
from photo_api.db.repository import merge_values
from photo_api.users import repository as repo
from photo_api.users.models import User
from photo_api.users.schemas import UserCreate, UserUpdate

MIN_PASSWORD_LEN = 6


class InvalidUserData(ValueError):
    pass


class PasswordHashError(RuntimeError):
    pass


class UserNotFound(LookupError):
    pass


def validate_new_user(data: UserCreate) -> None:
    try:
        validate_email(data.email, check_deliverability=False)
    except EmailNotValidError:
        raise InvalidUserData("Invalid email format")
    if len(data.password) < MIN_PASSWORD_LEN:
        raise InvalidUserData(
            f"Password must be at least {MIN_PASSWORD_LEN} characters long"
        )


async def register_user(db: AsyncSession, data: UserCreate) -> User:
    """
    Valida, hashea y crea el usuario. El commit lo hace el router.
    Un email repetido sale como IntegrityError del store.
    """
    validate_new_user(data)
    try:
        hashed = hash_password(data.password)
    except Exception as e:
        raise PasswordHashError("failed to hash password") from e
    return await repo.create_user(db, data.username, data.email, hashed)


async def login_user(db: AsyncSession, email: str, password: str) -> User:
    user = await repo.get_by_email(db, email)
    if not user:
        raise UserNotFound(email)
    # PasswordMismatch (ValueError) si no coincide
    check_password(user.password, password)
    return user


async def update_user(db: AsyncSession, user_id: int, data: UserUpdate) -> int:
    values = merge_values(data)
    if "password" in values:
        values["password"] = hash_password(values["password"])
    return await repo.update_user(db, user_id, values)


async def delete_user(db: AsyncSession, user_id: int) -> int:
    return await repo.delete_user(db, user_id)
