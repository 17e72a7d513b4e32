from __future__ import annotations

from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, model_serializer

StatusValue = Literal["activated", "deactivated", "deleted"]


class OperationStatus(BaseModel):
    """Outcome of a trainee status change or a test deletion."""

    status: StatusValue = Field(..., description="What happened to the resource.")
    id: Optional[str] = Field(None, description="Notion page id of the affected resource.")
    model_config = ConfigDict(json_schema_extra={"required": ["status"]})

    @model_serializer(mode="wrap")
    def _drop_missing_id(self, handler):  # type: ignore[override]
        data = handler(self)
        if data.get("id") is None:
            del data["id"]
        return data


class ErrorMessage(BaseModel):
    error: str


class ErrorResponse(BaseModel):
    """Body of 401, 404 and 422 responses raised by the routes."""

    detail: ErrorMessage


ERROR_RESPONSES = {
    404: {"model": ErrorResponse, "description": "Trainee or test not found"},
    422: {"description": "Input rejected by validation or by the calculator"},
}
