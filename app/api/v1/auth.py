"""Registration, login, and the bearer-token dependency (get_current_user)."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.errors import NotFoundError, UnauthorizedError
from app.core.security import (
    ExpiredTokenError,
    InvalidTokenError,
    create_access_token,
    decode_access_token,
)
from app.models import User
from app.schemas.auth import (
    AuthResponse,
    CurrentUser,
    LoginRequest,
    MeResponse,
    RegisterRequest,
    UserOut,
)
from app.schemas.errors import ErrorResponse
from app.services import users as user_service

logger = logging.getLogger(__name__)
router = APIRouter()
# auto_error=False: a missing header and a non-Bearer header both arrive as None.
security = HTTPBearer(auto_error=False)

TOKEN_REQUIRED_MESSAGE = "Access token required. Format: Authorization: Bearer <token>"


def _auth_response(user: User) -> AuthResponse:
    token = create_access_token(user_id=user.id, email=user.email)
    return AuthResponse(token=token, user=UserOut.model_validate(user))


def get_current_user(
    request: Request,
    credentials: Annotated[HTTPAuthorizationCredentials | None, Depends(security)],
    db: Annotated[Session, Depends(get_db)],
) -> CurrentUser:
    """Dependency: require a valid Bearer JWT for an existing user. Raises 401 otherwise."""
    if credentials is None or not credentials.credentials:
        raise UnauthorizedError(TOKEN_REQUIRED_MESSAGE)
    try:
        claims = decode_access_token(credentials.credentials)
    except ExpiredTokenError as e:
        raise UnauthorizedError(e.message) from e
    except InvalidTokenError as e:
        raise UnauthorizedError(e.message) from e

    try:
        user = user_service.get_user(db, claims["userId"])
    except NotFoundError as e:
        logger.info("Token for unknown user id=%s", claims["userId"])
        raise UnauthorizedError("User not found") from e

    current = CurrentUser.model_validate(user)
    request.state.user = current
    return current


@router.post(
    "/register",
    response_model=AuthResponse,
    status_code=status.HTTP_201_CREATED,
    responses={400: {"model": ErrorResponse}, 409: {"model": ErrorResponse}},
)
def register(
    body: RegisterRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """Create an account and return a JWT for it."""
    user = user_service.register(db, email=body.email, password=body.password, name=body.name)
    return _auth_response(user)


@router.post(
    "/login",
    response_model=AuthResponse,
    responses={400: {"model": ErrorResponse}, 401: {"model": ErrorResponse}},
)
def login(
    body: LoginRequest,
    db: Annotated[Session, Depends(get_db)],
) -> AuthResponse:
    """
    Authenticate with email and password; returns a JWT access token.
    Include the token in the Authorization header as: Bearer <token>
    """
    user = user_service.verify(db, email=body.email, password=body.password)
    return _auth_response(user)


@router.get("/me", response_model=MeResponse, responses={401: {"model": ErrorResponse}})
def me(
    current_user: Annotated[CurrentUser, Depends(get_current_user)],
    db: Annotated[Session, Depends(get_db)],
) -> MeResponse:
    """Return the authenticated user's profile."""
    user = user_service.get_user(db, current_user.id)
    return MeResponse(user=UserOut.model_validate(user))
