# photo_api/db/session.py
from typing import AsyncIterator

from fastapi import Request
from sqlalchemy.ext.asyncio import create_async_engine, async_sessionmaker, AsyncSession


def _engine_kwargs(db_url: str) -> dict:
    # Timeouts cortos: si la DB no responde → falla rápido (5s)
    if db_url.startswith("mysql+aiomysql"):
        connect_args = {"connect_timeout": 5, "charset": "utf8mb4"}
    elif db_url.startswith("postgresql+asyncpg"):
        connect_args = {
            "timeout": 5,
            "server_settings": {"client_encoding": "UTF8"},
        }
    elif db_url.startswith("sqlite+aiosqlite"):
        # sqlite no usa pool_size/max_overflow
        return {"connect_args": {}}
    else:
        connect_args = {}

    return {
        "pool_pre_ping": True,
        "pool_recycle": 300,
        "pool_size": 5,
        "max_overflow": 10,
        "connect_args": connect_args,
    }


class Database:
    """
    Un engine (con su pool) por proceso; cada request abre su propia sesión.
    Se crea en create_app() y vive en app.state.db.
    """

    def __init__(self, url: str, *, echo: bool = False):
        self.url = url
        self.engine = create_async_engine(url, echo=echo, **_engine_kwargs(url))
        self.sessionmaker = async_sessionmaker(
            self.engine,
            class_=AsyncSession,
            expire_on_commit=False,
        )

    def session(self) -> AsyncSession:
        return self.sessionmaker()

    async def dispose(self) -> None:
        await self.engine.dispose()


async def get_session(request: Request) -> AsyncIterator[AsyncSession]:
    db: Database = request.app.state.db
    async with db.session() as session:
        try:
            yield session
        finally:
            await session.close()
