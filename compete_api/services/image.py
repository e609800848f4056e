import logging
import os
from io import BytesIO
from uuid import uuid4

from fastapi import Depends, UploadFile
from PIL import Image as PILImage, UnidentifiedImageError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from compete_api.database import get_async_session, get_storage
from compete_api.exceptions import UploadFailed, ValidationFailed
from compete_api.models.tables import Image
from compete_api.services import BaseService, ModelRequests
from compete_api.storage import ObjectStorage

logger = logging.getLogger(__name__)


class ImageService(BaseService, ModelRequests[Image]):
    model = Image

    def __init__(self, session: AsyncSession, storage: ObjectStorage) -> None:
        super().__init__(session)
        self.storage = storage

    @classmethod
    async def get_service(
        cls,
        session: AsyncSession = Depends(get_async_session),
        storage: ObjectStorage = Depends(get_storage),
    ):
        return cls(session, storage)

    @staticmethod
    def _verify_image(contents: bytes) -> None:
        try:
            PILImage.open(BytesIO(contents)).verify()
        except (UnidentifiedImageError, OSError, SyntaxError):
            raise ValidationFailed(
                [{"field": "image", "message": "Uploaded file is not a valid image."}]
            )

    @staticmethod
    def _object_key(filename: str | None) -> str:
        name = os.path.basename(filename or "") or "image"
        return f"{uuid4()}_{name}"

    async def upload(self, image: UploadFile, uploader_id: int) -> Image:
        contents = await image.read()
        self._verify_image(contents)
        key = self._object_key(image.filename)

        try:
            url = await self.storage.put_object(key, contents, image.content_type)
        except Exception as e:
            logger.exception("Storing image %s failed", key)
            raise UploadFailed(error=str(e))

        try:
            instance = Image(url=url, uploader_id=uploader_id)
            self.session.add(instance)
            await self.session.commit()
            await self.session.refresh(instance)
        except SQLAlchemyError as e:
            logger.exception("Saving image %s failed, removing stored object", key)
            await self.session.rollback()
            await self._discard(key)
            raise UploadFailed(error=str(e))

        logger.info("Image %s uploaded by user %s", instance.image_id, uploader_id)
        return instance

    async def _discard(self, key: str) -> None:
        try:
            await self.storage.delete_object(key)
        except Exception:
            logger.exception("Could not remove orphaned object %s", key)
