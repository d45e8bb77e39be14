# photo_api/db/repository.py
"""
Operaciones genéricas por id para modelos con TimestampMixin.
Las filas con deleted_at no se tocan.
"""
from typing import Any

from pydantic import BaseModel
from sqlalchemy import func, update
from sqlalchemy.ext.asyncio import AsyncSession


def _is_zero(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, bool):
        return value is False
    if isinstance(value, (int, float)):
        return value == 0
    if isinstance(value, str):
        return value == ""
    return False


def merge_values(payload: BaseModel) -> dict[str, Any]:
    """
    Solo los campos que vinieron en el JSON y no son "cero"
    (None, "", 0). Nunca se limpia una columna desde un update.
    """
    data = payload.model_dump(exclude_unset=True)
    return {k: v for k, v in data.items() if not _is_zero(v)}


async def update_by_id(db: AsyncSession, model, obj_id: int, values: dict[str, Any]) -> int:
    if not values:
        return 0
    res = await db.execute(
        update(model)
        .where(model.id == obj_id, model.deleted_at.is_(None))
        .values(**values)
        .execution_options(synchronize_session=False)
    )
    return res.rowcount


async def soft_delete_by_id(db: AsyncSession, model, obj_id: int) -> int:
    # borrar algo ya borrado (o inexistente) no es error: 0 filas
    res = await db.execute(
        update(model)
        .where(model.id == obj_id, model.deleted_at.is_(None))
        .values(deleted_at=func.now())
        .execution_options(synchronize_session=False)
    )
    return res.rowcount
