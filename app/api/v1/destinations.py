"""Destinations endpoints: public listing and lookup, owner-only create/update/delete."""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from app.api.v1.auth import get_current_user
from app.core.database import get_db
from app.models import DestinationType
from app.schemas.auth import CurrentUser
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
from app.services import destinations as destination_service

router = APIRouter()

_AUTH_ERRORS = {401: {"model": ErrorResponse}}
_OWNER_ERRORS = {
    401: {"model": ErrorResponse},
    403: {"model": ErrorResponse},
    404: {"model": ErrorResponse},
}


@router.get("", response_model=DestinationListResponse, responses={400: {"model": ErrorResponse}})
def list_destinations(
    db: Annotated[Session, Depends(get_db)],
    page: Annotated[int, Query(ge=1, description="1-based page number")] = destination_service.DEFAULT_PAGE,
    limit: Annotated[
        int, Query(ge=1, description="Page size; values above 100 are capped at 100")
    ] = destination_service.DEFAULT_LIMIT,
    type: Annotated[DestinationType | None, Query(description="Exact destination type")] = None,
    country_code: Annotated[
        str | None,
        Query(
            alias="countryCode",
            pattern=r"^[A-Za-z]{2}$",
            description="Two-letter country code",
        ),
    ] = None,
) -> DestinationListResponse:
    """
    List destinations, most recently created first.

    Supports optional exact filters on `type` and `countryCode` and offset
    pagination via `page` and `limit`.
    """
    filters = DestinationFilters(
        type=type,
        country_code=country_code.upper() if country_code else None,
    )
    result = destination_service.list_destinations(db, filters, page=page, limit=limit)
    return DestinationListResponse(
        destinations=[DestinationOut.model_validate(d) for d in result.items],
        pagination=PaginationMeta(
            page=result.page,
            limit=result.limit,
            total=result.total,
            total_pages=result.total_pages,
        ),
    )


@router.get("/{destination_id}", response_model=DestinationOut, responses={404: {"model": ErrorResponse}})
def get_destination(
    destination_id: int,
    db: Annotated[Session, Depends(get_db)],
) -> DestinationOut:
    """Fetch a single destination by id."""
    return DestinationOut.model_validate(destination_service.get_destination(db, destination_id))


@router.post(
    "",
    response_model=DestinationOut,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, **_AUTH_ERRORS},
)
def create_destination(
    body: DestinationCreate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DestinationOut:
    """Create a destination owned by the authenticated user."""
    destination = destination_service.create_destination(db, body, owner_id=current_user.id)
    return DestinationOut.model_validate(destination)


@router.put(
    "/{destination_id}",
    response_model=DestinationOut,
    responses={400: {"model": ErrorResponse}, **_OWNER_ERRORS},
)
def update_destination(
    destination_id: int,
    body: DestinationUpdate,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DestinationOut:
    """Partially update a destination. Only its owner may do this."""
    destination = destination_service.update_destination(
        db, destination_id, body, acting_user_id=current_user.id
    )
    return DestinationOut.model_validate(destination)


@router.delete("/{destination_id}", response_model=DeleteResponse, responses=_OWNER_ERRORS)
def delete_destination(
    destination_id: int,
    db: Annotated[Session, Depends(get_db)],
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
) -> DeleteResponse:
    """Permanently delete a destination. Only its owner may do this."""
    destination_service.delete_destination(db, destination_id, acting_user_id=current_user.id)
    return DeleteResponse(message="Destination deleted successfully")
