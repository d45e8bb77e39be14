# photo_api/users/router.py
import logging

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from photo_api.core.security import PasswordMismatch
from photo_api.db.session import get_session
from photo_api.users.schemas import UserCreate, UserLogin, UserUpdate, MessageOut
from photo_api.users import service as svc

log = logging.getLogger("uvicorn")

# ⚠️ rutas de usuario sin token (igual que el servicio original)
router = APIRouter(prefix="/user", tags=["users"])


@router.post("/register", response_model=MessageOut)
async def register(payload: UserCreate, db: AsyncSession = Depends(get_session)):
    try:
        user = await svc.register_user(db, payload)
        await db.commit()
    except svc.InvalidUserData as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e))
    except svc.PasswordHashError:
        log.exception("register: hash falló")
        raise HTTPException(status_code=500, detail="Failed to set password")
    except Exception:
        await db.rollback()
        log.exception("register: no se pudo guardar el usuario")
        raise HTTPException(status_code=500, detail="Failed to register user")
    log.info(f"👤 usuario registrado id={user.id}")
    return {"message": "User registered successfully"}


@router.post("/login", response_model=MessageOut)
async def login(payload: UserLogin, db: AsyncSession = Depends(get_session)):
    try:
        await svc.login_user(db, payload.email, payload.password)
    except svc.UserNotFound:
        raise HTTPException(status_code=401, detail="User not found")
    except PasswordMismatch:
        raise HTTPException(status_code=401, detail="Invalid password")
    return {"message": "Login successful"}


@router.put("/{user_id}", response_model=MessageOut)
async def update_user(
    user_id: int,
    payload: UserUpdate,
    db: AsyncSession = Depends(get_session),
):
    try:
        await svc.update_user(db, user_id, payload)
        await db.commit()
    except Exception:
        await db.rollback()
        log.exception(f"update_user {user_id} falló")
        raise HTTPException(status_code=500, detail="Failed to update user")
    return {"message": "User updated successfully"}


@router.delete("/{user_id}", response_model=MessageOut)
async def delete_user(user_id: int, db: AsyncSession = Depends(get_session)):
    try:
        await svc.delete_user(db, user_id)
        await db.commit()
    except Exception:
        await db.rollback()
        log.exception(f"delete_user {user_id} falló")
        raise HTTPException(status_code=500, detail="Failed to delete user")
    return {"message": "User deleted successfully"}
