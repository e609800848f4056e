import os
from abc import ABC, abstractmethod
from pathlib import Path

import aioboto3
import aiofiles
import aiofiles.os

from compete_api.config import Settings


class ObjectStorage(ABC):
    """Place where uploaded image bytes live.

    ``put_object`` returns the public URL of the stored object.
    """

    @abstractmethod
    async def put_object(self, key: str, body: bytes, content_type: str | None) -> str:
        ...

    @abstractmethod
    async def delete_object(self, key: str) -> None:
        ...


class LocalObjectStorage(ObjectStorage):
    def __init__(self, folder: Path, base_url: str) -> None:
        self.folder = Path(folder)
        self.base_url = base_url.rstrip("/")
        if not os.path.exists(self.folder):
            os.makedirs(self.folder)

    async def put_object(self, key: str, body: bytes, content_type: str | None) -> str:
        async with aiofiles.open(self.folder / key, "wb") as out_file:
            await out_file.write(body)
        return f"{self.base_url}/{key}"

    async def delete_object(self, key: str) -> None:
        try:
            await aiofiles.os.remove(self.folder / key)
        except FileNotFoundError:
            pass


class S3ObjectStorage(ObjectStorage):
    def __init__(self, bucket: str, region: str, endpoint_url: str | None = None) -> None:
        self.bucket = bucket
        self.region = region
        self.endpoint_url = endpoint_url
        self._session = aioboto3.Session()

    def _client(self):
        return self._session.client(
            "s3", region_name=self.region, endpoint_url=self.endpoint_url
        )

    async def put_object(self, key: str, body: bytes, content_type: str | None) -> str:
        extra = {"ContentType": content_type} if content_type else {}
        async with self._client() as s3:
            await s3.put_object(Bucket=self.bucket, Key=key, Body=body, **extra)
        return f"https://{self.bucket}.s3.{self.region}.amazonaws.com/{key}"

    async def delete_object(self, key: str) -> None:
        async with self._client() as s3:
            await s3.delete_object(Bucket=self.bucket, Key=key)


def create_storage(settings: Settings) -> ObjectStorage:
    if settings.STORAGE_BACKEND == "s3":
        return S3ObjectStorage(
            bucket=settings.S3_BUCKET,
            region=settings.S3_REGION,
            endpoint_url=settings.S3_ENDPOINT_URL,
        )
    return LocalObjectStorage(settings.IMAGES_FOLDER, settings.IMAGES_BASE_URL)
