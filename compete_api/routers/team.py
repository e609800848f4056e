from typing import Annotated
from fastapi import APIRouter, Depends, Query, status
from compete_api.routers import RegistrationIdType, TeamIdType
from compete_api.schemas import MessageResponseSchema
from compete_api.schemas.team import (
    NewRegistrationSchema,
    NewTeamSchema,
    RegistrationCreatedResponseSchema,
    RegistrationStatusPayloadSchema,
    TeamCreatedResponseSchema,
    TeamSchema,
    UpdateTeamPayloadSchema,
)
from compete_api.services.team import RegistrationService, TeamService
from compete_api.utils.token import admin_required
from compete_api.utils.validation import MAX_ID, numeric, string

router = APIRouter(prefix="/teams", tags=["Team"])


@router.post(
    "/create",
    status_code=status.HTTP_201_CREATED,
    response_model=TeamCreatedResponseSchema,
)
async def create(
    payload: NewTeamSchema,
    service: TeamService = Depends(TeamService.get_service),
):
    team = await service.create(payload)
    return TeamCreatedResponseSchema(
        message="Team created successfully.", team_id=team.team_id
    )


@router.get("/teams/details", response_model=list[TeamSchema])
async def get_details(
    team_id: Annotated[
        int,
        Query(alias="teamId", gt=0, le=MAX_ID),
        numeric("Team ID must be a number"),
    ] = None,
    school_name: Annotated[
        str, Query(), string("School name must be a string")
    ] = None,
    service: TeamService = Depends(TeamService.get_service),
):
    return await service.get_details(team_id=team_id, school_name=school_name)


@router.patch("/teams/{team_id}/update", response_model=MessageResponseSchema)
async def update(
    team_id: TeamIdType,
    payload: UpdateTeamPayloadSchema,
    service: TeamService = Depends(TeamService.get_service),
):
    await service.update(team_id, payload.sparse())
    return MessageResponseSchema(message="Team updated successfully.")


@router.post(
    "/registrations/register",
    status_code=status.HTTP_201_CREATED,
    response_model=RegistrationCreatedResponseSchema,
)
async def register(
    payload: NewRegistrationSchema,
    service: RegistrationService = Depends(RegistrationService.get_service),
):
    registration = await service.register(payload)
    return RegistrationCreatedResponseSchema(
        message="Registration successful.",
        registration_id=registration.registration_id,
    )


@router.delete(
    "/registrations/{registration_id}/deregister",
    response_model=MessageResponseSchema,
    dependencies=[Depends(admin_required)],
)
async def deregister(
    registration_id: RegistrationIdType,
    service: RegistrationService = Depends(RegistrationService.get_service),
):
    await service.delete(registration_id)
    return MessageResponseSchema(message="Deregistration successful.")


@router.patch(
    "/registrations/{registration_id}/status",
    response_model=MessageResponseSchema,
    dependencies=[Depends(admin_required)],
)
async def update_status(
    registration_id: RegistrationIdType,
    payload: RegistrationStatusPayloadSchema,
    service: RegistrationService = Depends(RegistrationService.get_service),
):
    await service.update(registration_id, payload.sparse())
    return MessageResponseSchema(message="Registration status updated successfully.")
