# photo_api/photos/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import Integer, String
from photo_api.db.base import Base, TimestampMixin


class Photo(TimestampMixin, Base):
    __tablename__ = "photos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)

    title: Mapped[str | None] = mapped_column(String(255), nullable=True)
    caption: Mapped[str | None] = mapped_column(String(255), nullable=True)
    photo_url: Mapped[str | None] = mapped_column(String(255), nullable=True)

    # dueño informativo: sin ForeignKey, se guarda lo que manda el cliente
    user_id: Mapped[int | None] = mapped_column(Integer, nullable=True, index=True)
