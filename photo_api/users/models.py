# photo_api/users/models.py
from sqlalchemy.orm import Mapped, mapped_column
from sqlalchemy import String, Integer
from photo_api.db.base import Base, TimestampMixin

class User(TimestampMixin, Base):
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    username: Mapped[str] = mapped_column(String(255), nullable=False)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False, index=True)
    # siempre hash (argon2), nunca texto plano
    password: Mapped[str] = mapped_column(String(255), nullable=False)
