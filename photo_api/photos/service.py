# photo_api/photos/service.py
from __future__ import annotations

from sqlalchemy.ext.asyncio import AsyncSession

from photo_api.db.repository import merge_values
from photo_api.photos import repository as repo
from photo_api.photos.models import Photo
from photo_api.photos.schemas import PhotoIn


async def upload_photo(db: AsyncSession, data: PhotoIn) -> Photo:
    # user_id no se contrasta con quien manda el token
    return await repo.create_photo(
        db,
        title=data.title,
        caption=data.caption,
        photo_url=data.photo_url,
        user_id=data.user_id,
    )


async def update_photo(db: AsyncSession, photo_id: int, data: PhotoIn) -> int:
    return await repo.update_photo(db, photo_id, merge_values(data))


async def delete_photo(db: AsyncSession, photo_id: int) -> int:
    return await repo.delete_photo(db, photo_id)
