import logging

from photo_api.db.base import Base
from photo_api.db.session import Database

# 👇 importa todos los modelos que deben existir en la DB
from photo_api.users.models import User  # noqa: F401
from photo_api.photos.models import Photo  # noqa: F401

log = logging.getLogger("uvicorn")


async def init_models(db: Database) -> None:
    """
    Conecta y crea/verifica las tablas de Base.metadata.
    Si falla, el arranque se aborta.
    """
    try:
        async with db.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)
    except Exception as e:
        log.error(f"❌ DB init falló: {e!r}")
        raise RuntimeError("failed to initialize database") from e
    log.info("✅ DB init: tablas creadas/verificadas.")
