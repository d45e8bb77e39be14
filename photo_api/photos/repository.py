# photo_api/photos/repository.py
from __future__ import annotations

from typing import List
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from photo_api.db.repository import update_by_id, soft_delete_by_id
from photo_api.photos.models import Photo


async def create_photo(
    db: AsyncSession,
    *,
    title: str | None = None,
    caption: str | None = None,
    photo_url: str | None = None,
    user_id: int | None = None,
) -> Photo:
    p = Photo(title=title, caption=caption, photo_url=photo_url, user_id=user_id)
    db.add(p)
    await db.flush()
    await db.refresh(p)
    return p


async def list_photos(db: AsyncSession) -> List[Photo]:
    res = await db.execute(
        select(Photo).where(Photo.deleted_at.is_(None)).order_by(Photo.id.asc())
    )
    return list(res.scalars())


async def update_photo(db: AsyncSession, photo_id: int, values: dict) -> int:
    return await update_by_id(db, Photo, photo_id, values)


async def delete_photo(db: AsyncSession, photo_id: int) -> int:
    return await soft_delete_by_id(db, Photo, photo_id)
