# photo_api/users/repository.py
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from photo_api.db.repository import update_by_id, soft_delete_by_id
from photo_api.users.models import User

async def get_by_email(db: AsyncSession, email: str) -> User | None:
    res = await db.execute(
        select(User).where(User.email == email, User.deleted_at.is_(None))
    )
    return res.scalars().first()

async def create_user(db: AsyncSession, username: str, email: str, hashed_password: str) -> User:
    user = User(username=username, email=email, password=hashed_password)
    db.add(user)
    await db.flush()
    await db.refresh(user)
    return user

async def update_user(db: AsyncSession, user_id: int, values: dict) -> int:
    return await update_by_id(db, User, user_id, values)

async def delete_user(db: AsyncSession, user_id: int) -> int:
    return await soft_delete_by_id(db, User, user_id)
