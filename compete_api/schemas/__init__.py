from typing import Any
from pydantic import BaseModel, ConfigDict


class MessageResponseSchema(BaseModel):
    message: str


class PartialPayloadSchema(BaseModel):
    """PATCH body: declared fields are validated, unknown keys are kept so the
    partial-update builder can reject them by name."""

    model_config = ConfigDict(extra="allow")

    def sparse(self) -> dict[str, Any]:
        data = self.model_dump(exclude_unset=True)
        data.update(self.model_extra or {})
        return data
