"""Pydantic schemas for destinations: create/update payloads, responses, pagination."""

from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field, field_validator

from app.models.destination import DestinationType
from app.schemas.base import CamelModel

NAME_MIN_LENGTH = 2
NAME_MAX_LENGTH = 100
DESCRIPTION_MIN_LENGTH = 10
DESCRIPTION_MAX_LENGTH = 500
COUNTRY_CODE_PATTERN = r"^[A-Z]{2}$"


def _strip(value: Any) -> Any:
    return value.strip() if isinstance(value, str) else value


class DestinationCreate(CamelModel):
    """Payload for POST /destinations. All fields required."""

    name: str = Field(
        ...,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
        description="Destination name (2-100 characters).",
    )
    description: str = Field(
        ...,
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
        description="Description (10-500 characters).",
    )
    country_code: str = Field(
        ...,
        pattern=COUNTRY_CODE_PATTERN,
        description="ISO 3166-1 alpha-2 country code, uppercase (e.g. MX).",
    )
    type: DestinationType = Field(..., description="Destination category.")

    @field_validator("name", "description", "country_code", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return _strip(v)


class DestinationUpdate(CamelModel):
    """
    Payload for PUT /destinations/{id}. Partial: omitted (or null) fields keep
    their stored value; provided fields obey the same rules as on create.
    """

    name: str | None = Field(
        default=None,
        min_length=NAME_MIN_LENGTH,
        max_length=NAME_MAX_LENGTH,
    )
    description: str | None = Field(
        default=None,
        min_length=DESCRIPTION_MIN_LENGTH,
        max_length=DESCRIPTION_MAX_LENGTH,
    )
    country_code: str | None = Field(default=None, pattern=COUNTRY_CODE_PATTERN)
    type: DestinationType | None = None

    @field_validator("name", "description", "country_code", mode="before")
    @classmethod
    def strip_text(cls, v: Any) -> Any:
        return _strip(v)

    def changes(self) -> dict[str, Any]:
        """Fields the client actually provided, keyed by model attribute name."""
        return self.model_dump(exclude_unset=True, exclude_none=True)


class DestinationOut(CamelModel):
    id: int
    name: str
    description: str
    country_code: str
    type: DestinationType
    last_modif: datetime
    user_id: int
    created_at: datetime
    updated_at: datetime


class DestinationFilters(BaseModel):
    """Optional exact-match filters for listing."""

    type: DestinationType | None = None
    country_code: str | None = None


class PaginationMeta(CamelModel):
    page: int = Field(..., ge=1)
    limit: int = Field(..., ge=1)
    total: int = Field(..., ge=0)
    total_pages: int = Field(..., ge=0)


class DestinationListResponse(BaseModel):
    """Response for GET /destinations."""

    destinations: list[DestinationOut] = Field(default_factory=list)
    pagination: PaginationMeta


class DeleteResponse(BaseModel):
    message: str
