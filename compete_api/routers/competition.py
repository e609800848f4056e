from fastapi import APIRouter, Depends, status
from compete_api.routers import CompetitionIdType
from compete_api.schemas import MessageResponseSchema
from compete_api.schemas.competition import (
    CompetitionCreatedResponseSchema,
    CompetitionSchema,
    NewCompetitionSchema,
    UpdateCompetitionPayloadSchema,
)
from compete_api.services.competition import CompetitionService
from compete_api.utils.token import admin_required

router = APIRouter(prefix="/competitions", tags=["Competition"])


@router.post(
    "/",
    status_code=status.HTTP_201_CREATED,
    response_model=CompetitionCreatedResponseSchema,
    dependencies=[Depends(admin_required)],
)
async def post(
    payload: NewCompetitionSchema,
    service: CompetitionService = Depends(CompetitionService.get_service),
):
    competition = await service.create(payload)
    return CompetitionCreatedResponseSchema(
        message="Competition created successfully",
        competition_id=competition.competition_id,
    )


@router.get("/", response_model=list[CompetitionSchema])
async def get_list(
    service: CompetitionService = Depends(CompetitionService.get_service),
):
    return await service.get_all()


@router.patch(
    "/{competition_id}",
    response_model=MessageResponseSchema,
    dependencies=[Depends(admin_required)],
)
async def update(
    competition_id: CompetitionIdType,
    payload: UpdateCompetitionPayloadSchema,
    service: CompetitionService = Depends(CompetitionService.get_service),
):
    await service.update(competition_id, payload.sparse())
    return MessageResponseSchema(message="Competition updated successfully")


@router.delete(
    "/{competition_id}",
    response_model=MessageResponseSchema,
    dependencies=[Depends(admin_required)],
)
async def delete(
    competition_id: CompetitionIdType,
    service: CompetitionService = Depends(CompetitionService.get_service),
):
    await service.delete(competition_id)
    return MessageResponseSchema(message="Competition deleted successfully")
