import os
import tempfile

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key-that-is-long-enough-for-hs256")
os.environ.setdefault("IMAGES_FOLDER", tempfile.mkdtemp(prefix="compete-images-"))

import pytest
from httpx import AsyncClient, ASGITransport
from sqlalchemy.pool import StaticPool

from compete_api.database import DatabaseSessionManager
from compete_api.models.tables import Base
from compete_api.storage import LocalObjectStorage
from compete_api.utils.token import generate_access_token

from tests.helpers import ADMIN_DATA, USER_DATA


@pytest.fixture()
async def db_manager():
    manager = DatabaseSessionManager()
    manager.init(
        "sqlite+aiosqlite://",
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )
    async with manager.connect() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield manager
    await manager.close()


@pytest.fixture()
def storage(tmp_path):
    return LocalObjectStorage(tmp_path, "/image")


@pytest.fixture()
def app(db_manager, storage):
    from main import app
    app.state.db_manager = db_manager
    app.state.storage = storage
    yield app


@pytest.fixture()
async def client(app):
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client


@pytest.fixture()
async def user(client) -> dict:
    response = await client.post("/api/v1/users/register", json=USER_DATA)
    assert response.status_code == 201
    return {**USER_DATA, "user_id": response.json()["user_id"]}


@pytest.fixture()
async def admin(client) -> dict:
    response = await client.post("/api/v1/users/register", json=ADMIN_DATA)
    assert response.status_code == 201
    return {**ADMIN_DATA, "user_id": response.json()["user_id"]}


@pytest.fixture()
def user_token(user) -> str:
    return generate_access_token(user["user_id"], False)


@pytest.fixture()
def admin_token(admin) -> str:
    return generate_access_token(admin["user_id"], True)
