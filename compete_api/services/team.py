from sqlalchemy import select

from compete_api.models.tables import Registration, Team
from compete_api.schemas.team import NewRegistrationSchema, NewTeamSchema
from compete_api.services import BaseService, ModelRequests


class TeamService(BaseService, ModelRequests[Team]):
    model = Team
    updatable_fields = ("team_name", "school_name")

    async def create(self, payload: NewTeamSchema) -> Team:
        return await self.post(**payload.model_dump())

    async def get_details(
        self, team_id: int | None = None, school_name: str | None = None
    ) -> list[Team]:
        """Teams matching ``team_id``, else ``school_name``, else every team."""
        if team_id is not None:
            return [await self.get(team_id)]
        stmt = select(Team).order_by(Team.team_id)
        if school_name:
            stmt = stmt.where(Team.school_name == school_name)
        scalars = await self.session.scalars(stmt)
        return list(scalars.all())


class RegistrationService(BaseService, ModelRequests[Registration]):
    model = Registration
    updatable_fields = ("status",)

    async def register(self, payload: NewRegistrationSchema) -> Registration:
        return await self.post(**payload.model_dump())
