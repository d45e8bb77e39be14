# photo_api/photos/router.py
from __future__ import annotations

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.ext.asyncio import AsyncSession

from photo_api.core.auth import require_token
from photo_api.db.session import get_session
from photo_api.photos import repository as repo
from photo_api.photos import service as svc
from photo_api.photos.schemas import PhotoIn, PhotoOut
from photo_api.users.schemas import MessageOut

log = logging.getLogger("uvicorn")

router = APIRouter(prefix="/photo", tags=["photos"])


@router.post("", response_model=MessageOut, dependencies=[Depends(require_token)])
async def upload_photo(payload: PhotoIn, db: AsyncSession = Depends(get_session)):
    try:
        photo = await svc.upload_photo(db, payload)
        await db.commit()
    except Exception:
        await db.rollback()
        log.exception("upload_photo falló")
        raise HTTPException(status_code=500, detail="Failed to upload photo")
    log.info(f"📷 foto creada id={photo.id}")
    return {"message": "Photo uploaded successfully"}


@router.get("", response_model=List[PhotoOut])
async def get_photos(db: AsyncSession = Depends(get_session)):
    try:
        return await repo.list_photos(db)
    except Exception:
        log.exception("get_photos falló")
        raise HTTPException(status_code=500, detail="Failed to retrieve photo")


@router.put("/{photo_id}", response_model=MessageOut, dependencies=[Depends(require_token)])
async def update_photo(
    photo_id: int,
    payload: PhotoIn,
    db: AsyncSession = Depends(get_session),
):
    try:
        await svc.update_photo(db, photo_id, payload)
        await db.commit()
    except Exception:
        await db.rollback()
        log.exception(f"update_photo {photo_id} falló")
        raise HTTPException(status_code=500, detail="Failed to update photo")
    return {"message": "Photo updated successfully"}


@router.delete("/{photo_id}", response_model=MessageOut, dependencies=[Depends(require_token)])
async def delete_photo(photo_id: int, db: AsyncSession = Depends(get_session)):
    try:
        await svc.delete_photo(db, photo_id)
        await db.commit()
    except Exception:
        await db.rollback()
        log.exception(f"delete_photo {photo_id} falló")
        raise HTTPException(status_code=500, detail="Failed to delete photo")
    return {"message": "Photo deleted successfully"}
