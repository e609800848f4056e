import pytest
from fastapi import status
from httpx import AsyncClient


async def send(client: AsyncClient, sender_id: int, content: str) -> int:
    response = await client.post(
        "/api/v1/messages/messages/create",
        json={"sender_id": sender_id, "recipient_group": "all", "content": content},
    )
    assert response.status_code == status.HTTP_201_CREATED
    return response.json()["message_id"]


@pytest.fixture()
async def message_id(client: AsyncClient, user) -> int:
    return await send(client, user["user_id"], "Contest starts at nine")


async def test_list_newest_first(client: AsyncClient, user):
    first = await send(client, user["user_id"], "first")
    second = await send(client, user["user_id"], "second")

    response = await client.get("/api/v1/messages/messages")
    assert response.status_code == status.HTTP_200_OK
    assert [m["message_id"] for m in response.json()] == [second, first]


async def test_create_validation(client: AsyncClient):
    response = await client.post(
        "/api/v1/messages/messages/create",
        json={"sender_id": 1, "recipient_group": "everyone", "content": ""},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [
        {
            "field": "recipient_group",
            "message": 'Recipient group must be either "all", "admin", or "users"',
        },
        {"field": "content", "message": "Content is required"},
    ]


async def test_get_message(client: AsyncClient, message_id):
    response = await client.get(f"/api/v1/messages/messages/{message_id}")
    assert response.status_code == status.HTTP_200_OK
    assert response.json()["content"] == "Contest starts at nine"
    assert response.json()["sent_date"]


async def test_get_message_bad_id(client: AsyncClient):
    response = await client.get("/api/v1/messages/messages/latest")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [
        {"field": "message_id", "message": "Message ID must be a number"}
    ]

    missing = await client.get("/api/v1/messages/messages/404")
    assert missing.status_code == status.HTTP_404_NOT_FOUND
    assert missing.json() == {"message": "Message not found"}


@pytest.mark.parametrize("suffix", ["", "/update"])
async def test_update_message(client: AsyncClient, message_id, suffix):
    response = await client.patch(
        f"/api/v1/messages/messages/{message_id}{suffix}",
        json={"content": "Contest starts at ten"},
    )
    assert response.status_code == status.HTTP_200_OK

    message = await client.get(f"/api/v1/messages/messages/{message_id}")
    assert message.json()["content"] == "Contest starts at ten"


async def test_update_message_rejects_sender(client: AsyncClient, message_id):
    response = await client.patch(
        f"/api/v1/messages/messages/{message_id}", json={"sender_id": 2}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["invalidFields"] == ["sender_id"]


async def test_delete_twice(client: AsyncClient, message_id):
    url = f"/api/v1/messages/messages/{message_id}"
    assert (await client.delete(url)).status_code == status.HTTP_200_OK
    assert (await client.delete(url)).status_code == status.HTTP_404_NOT_FOUND


@pytest.mark.parametrize("raw_id", ["0", "99999999999999999999999", "2147483648"])
async def test_get_message_out_of_range_id(client: AsyncClient, raw_id):
    response = await client.get(f"/api/v1/messages/messages/{raw_id}")
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["message"] == "Validation failed"
    assert response.json()["errors"][0]["field"] == "message_id"


async def test_create_message_out_of_range_sender(client: AsyncClient):
    response = await client.post(
        "/api/v1/messages/messages/create",
        json={"sender_id": 2**40, "recipient_group": "all", "content": "hi"},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"][0]["field"] == "sender_id"
