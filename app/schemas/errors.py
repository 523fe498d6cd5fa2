"""Error body shared by every non-2xx JSON response."""

from typing import Any

from pydantic import BaseModel, Field


class ErrorResponse(BaseModel):
    """{error, message?, details?}"""

    error: str = Field(..., description="Short error label (e.g. Not Found).")
    message: str | None = Field(default=None, description="Human-readable explanation.")
    details: list[dict[str, Any]] | None = Field(
        default=None,
        description="Per-field validation problems, when applicable.",
    )
