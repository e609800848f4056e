import pytest
from fastapi import status
from httpx import AsyncClient, ASGITransport
from sqlalchemy.exc import OperationalError

from compete_api.database import get_async_session


class FailingSession:
    """Session whose every query fails with ``error``."""

    def __init__(self, error: Exception) -> None:
        self.error = error

    async def execute(self, *args, **kwargs):
        raise self.error

    async def scalar(self, *args, **kwargs):
        raise self.error

    async def scalars(self, *args, **kwargs):
        raise self.error

    async def rollback(self):
        pass


@pytest.fixture()
def failing_db(app):
    def override(error: Exception):
        app.dependency_overrides[get_async_session] = lambda: FailingSession(error)

    yield override
    app.dependency_overrides.clear()


async def test_database_failure(client: AsyncClient, failing_db):
    failing_db(OperationalError("DELETE FROM messages", {}, Exception("disk I/O error")))

    response = await client.delete("/api/v1/messages/messages/1")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    body = response.json()
    assert body["message"] == "Database operation failed"
    assert "disk I/O error" in body["error"]


async def test_database_failure_on_list(client: AsyncClient, failing_db):
    failing_db(OperationalError("SELECT", {}, Exception("connection refused")))

    response = await client.get("/api/v1/competitions/")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["message"] == "Database operation failed"


async def test_unexpected_error(app, failing_db):
    failing_db(RuntimeError("driver exploded"))

    # the server error middleware re-raises after responding
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        response = await client.get("/api/v1/messages/messages/1")

    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json() == {"message": "Internal Server Error"}
