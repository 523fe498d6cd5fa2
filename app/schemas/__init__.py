"""Pydantic request/response schemas."""

from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserOut,
)
from app.schemas.destination import (
    DeleteResponse,
    DestinationCreate,
    DestinationFilters,
    DestinationListResponse,
    DestinationOut,
    DestinationUpdate,
    PaginationMeta,
)
from app.schemas.errors import ErrorResponse
from app.schemas.health import HealthResponse

__all__ = [
    "AuthResponse",
    "CurrentUser",
    "DeleteResponse",
    "DestinationCreate",
    "DestinationFilters",
    "DestinationListResponse",
    "DestinationOut",
    "DestinationUpdate",
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "MeResponse",
    "PaginationMeta",
    "RegisterRequest",
    "UserOut",
]
