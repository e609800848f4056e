from io import BytesIO

import pytest
from fastapi import UploadFile, status
from httpx import AsyncClient
from sqlalchemy.exc import OperationalError
from starlette.datastructures import Headers

from compete_api.exceptions import UploadFailed
from compete_api.services.image import ImageService
from compete_api.storage import ObjectStorage
from tests.helpers import png_bytes


class RecordingStorage(ObjectStorage):
    def __init__(self, fail_put: bool = False) -> None:
        self.fail_put = fail_put
        self.stored: dict[str, bytes] = {}
        self.deleted: list[str] = []

    async def put_object(self, key, body, content_type):
        if self.fail_put:
            raise ConnectionError("bucket unreachable")
        self.stored[key] = body
        return f"https://bucket.example/{key}"

    async def delete_object(self, key):
        self.deleted.append(key)


class BrokenSession:
    def __init__(self) -> None:
        self.rolled_back = False

    def add(self, instance):
        pass

    async def commit(self):
        raise OperationalError("INSERT INTO images", {}, Exception("database is gone"))

    async def refresh(self, instance):
        pass

    async def rollback(self):
        self.rolled_back = True


def upload_file(contents: bytes, filename: str = "logo.png") -> UploadFile:
    return UploadFile(
        BytesIO(contents),
        filename=filename,
        headers=Headers({"content-type": "image/png"}),
    )


async def test_upload(client: AsyncClient, user, storage):
    response = await client.post(
        "/api/v1/images/upload",
        data={"uploader_id": str(user["user_id"])},
        files={"image": ("logo.png", png_bytes(), "image/png")},
    )
    assert response.status_code == status.HTTP_201_CREATED
    body = response.json()
    assert body["message"] == "Image uploaded successfully"
    assert body["imageUrl"].startswith("/image/")
    assert body["imageUrl"].endswith("_logo.png")
    assert isinstance(body["image_id"], int)

    key = body["imageUrl"].rsplit("/", 1)[-1]
    assert (storage.folder / key).read_bytes() == png_bytes()


async def test_upload_not_an_image(client: AsyncClient, user, storage):
    response = await client.post(
        "/api/v1/images/upload",
        data={"uploader_id": str(user["user_id"])},
        files={"image": ("notes.png", b"definitely not a png", "image/png")},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [
        {"field": "image", "message": "Uploaded file is not a valid image."}
    ]
    assert list(storage.folder.iterdir()) == []


async def test_upload_without_file(client: AsyncClient, user):
    response = await client.post(
        "/api/v1/images/upload", data={"uploader_id": str(user["user_id"])}
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json() == {"message": "No file uploaded."}


async def test_upload_bad_uploader_id(client: AsyncClient):
    response = await client.post(
        "/api/v1/images/upload",
        data={"uploader_id": "me"},
        files={"image": ("logo.png", png_bytes(), "image/png")},
    )
    assert response.status_code == status.HTTP_400_BAD_REQUEST
    assert response.json()["errors"] == [
        {"field": "uploader_id", "message": "Uploader ID must be a number"}
    ]


async def test_upload_storage_failure(client: AsyncClient, app, user):
    app.state.storage = RecordingStorage(fail_put=True)

    response = await client.post(
        "/api/v1/images/upload",
        data={"uploader_id": str(user["user_id"])},
        files={"image": ("logo.png", png_bytes(), "image/png")},
    )
    assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
    assert response.json()["message"] == "Image upload failed"


async def test_failed_insert_removes_stored_object():
    storage = RecordingStorage()
    session = BrokenSession()
    service = ImageService(session, storage)

    with pytest.raises(UploadFailed):
        await service.upload(upload_file(png_bytes()), uploader_id=1)

    assert session.rolled_back
    assert list(storage.stored) == storage.deleted
    assert len(storage.deleted) == 1
