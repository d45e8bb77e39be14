# photo_api/users/schemas.py
from pydantic import BaseModel


# campos ausentes llegan como "" (la validación de email/password decide)
class UserCreate(BaseModel):
    username: str = ""
    email: str = ""
    password: str = ""


class UserLogin(BaseModel):
    email: str = ""
    password: str = ""


class UserUpdate(BaseModel):
    # parcial: solo se escriben los campos que llegan y no vienen vacíos
    username: str | None = None
    email: str | None = None
    password: str | None = None


class MessageOut(BaseModel):
    message: str
