from compete_api.models.tables import Competition
from compete_api.schemas.competition import NewCompetitionSchema
from compete_api.services import BaseService, ModelRequests


class CompetitionService(BaseService, ModelRequests[Competition]):
    model = Competition
    updatable_fields = (
        "name",
        "description",
        "start_date",
        "end_date",
        "status",
        "category",
    )

    async def create(self, payload: NewCompetitionSchema) -> Competition:
        return await self.post(**payload.model_dump())

    async def get_all(self) -> list[Competition]:
        return await self.get_list(Competition.competition_id)
