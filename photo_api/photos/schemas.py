# photo_api/photos/schemas.py
from pydantic import BaseModel
from datetime import datetime


class PhotoIn(BaseModel):
    title: str | None = None
    caption: str | None = None
    photo_url: str | None = None
    user_id: int | None = None


class PhotoOut(BaseModel):
    id: int
    title: str | None = None
    caption: str | None = None
    photo_url: str | None = None
    user_id: int | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None

    class Config:
        from_attributes = True
