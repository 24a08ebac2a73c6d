"""User administration DTOs (Data Transfer Objects)."""

from pydantic import BaseModel, Field


class SetUserStateInput(BaseModel):
    """Input DTO for activating or deactivating an account."""

    active: bool = Field(..., alias="activo", description="Target state of the account")

    model_config = {"frozen": True, "populate_by_name": True}
