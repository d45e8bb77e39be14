"""
Fixtures compartidos: una app nueva por test sobre un SQLite temporal.
"""

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import select, text

from photo_api.core.config import Settings
from photo_api.core.security import create_access_token
from photo_api.main import create_app
from photo_api.photos.models import Photo
from photo_api.users.models import User

SECRET = "test-secret"


def make_settings(tmp_path, **overrides) -> Settings:
    values = {
        "DATABASE_URL": f"sqlite+aiosqlite:///{tmp_path / 'test.db'}",
        "JWT_SECRET_KEY": SECRET,
    }
    values.update(overrides)
    return Settings(_env_file=None, **values)


@pytest.fixture
def settings(tmp_path):
    return make_settings(tmp_path)


@pytest.fixture
def app(settings):
    return create_app(settings)


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture
def auth_headers():
    token = create_access_token("1", SECRET, expires_minutes=5)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def fetch_all(app, client):
    """Lee todas las filas de un modelo (incluidas las soft-deleted)."""

    def _fetch(model):
        async def _run():
            async with app.state.db.session() as session:
                res = await session.execute(select(model).order_by(model.id))
                return list(res.scalars())

        return client.portal.call(_run)

    return _fetch


@pytest.fixture
def fetch_users(fetch_all):
    return lambda: fetch_all(User)


@pytest.fixture
def fetch_photos(fetch_all):
    return lambda: fetch_all(Photo)


@pytest.fixture
def register(client):
    def _register(email="ana@photos.io", password="secret123", username="ana"):
        return client.post(
            "/user/register",
            json={"username": username, "email": email, "password": password},
        )

    return _register


@pytest.fixture
def drop_table(app, client):
    """Tira una tabla para que el store falle en el próximo request."""

    def _drop(name):
        async def _run():
            async with app.state.db.engine.begin() as conn:
                await conn.execute(text(f"DROP TABLE {name}"))

        client.portal.call(_run)

    return _drop
