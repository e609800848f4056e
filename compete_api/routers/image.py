from typing import Annotated
from fastapi import APIRouter, Depends, File, Form, UploadFile, status
from compete_api.exceptions import ApiError
from compete_api.schemas.image import ImageUploadedResponseSchema
from compete_api.services.image import ImageService
from compete_api.utils.validation import MAX_ID, numeric

router = APIRouter(prefix="/images", tags=["Image"])


class NoFileUploaded(ApiError):
    status_code = status.HTTP_400_BAD_REQUEST
    message = "No file uploaded."


@router.post(
    "/upload",
    status_code=status.HTTP_201_CREATED,
    response_model=ImageUploadedResponseSchema,
)
async def upload(
    uploader_id: Annotated[
        int, Form(gt=0, le=MAX_ID), numeric("Uploader ID must be a number")
    ],
    image: UploadFile | None = File(None),
    service: ImageService = Depends(ImageService.get_service),
):
    if image is None:
        raise NoFileUploaded()
    instance = await service.upload(image, uploader_id)
    return ImageUploadedResponseSchema(
        message="Image uploaded successfully",
        imageUrl=instance.url,
        image_id=instance.image_id,
    )
