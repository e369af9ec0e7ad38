"""User API routes for user CRUD operations.

Endpoints:
- GET /api/users: List all users
- GET /api/users/filter?loginName=...: Get a user by login name
- GET /api/users/{id}: Get a user by ID
- POST /api/users: Create a user
- PUT /api/users/{id}: Update a user
- DELETE /api/users/{id}: Delete a user
"""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, Path, Query, Request, Response, status

from api.dependencies import get_user_service
from api.mapper import from_domain, to_domain
from api.models import ErrorResponse, UserDto
from domain.model.errors import DomainError, DuplicateError, NotFoundError, ValidationError
from port.user_service import UserService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])

# IDs are positive and must fit a BSON int64
MAX_USER_ID = 2**63 - 1
UserId = Annotated[int, Path(ge=1, le=MAX_USER_ID, description="User ID")]

_NOT_FOUND = {404: {"model": ErrorResponse, "description": "User not found"}}
_INVALID = {
    400: {"model": ErrorResponse, "description": "Invalid input data"},
    409: {"model": ErrorResponse, "description": "Login name or email address already in use"},
}


def _to_http_error(error: DomainError) -> HTTPException:
    """Map a domain error to the matching HTTP status."""
    if isinstance(error, NotFoundError):
        return HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(error))
    if isinstance(error, ValidationError):
        return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(error))
    if isinstance(error, DuplicateError):
        return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(error))
    logger.error("User operation failed", extra={"error": str(error)})
    return HTTPException(status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(error))


def _upsert(user_dto: UserDto, service: UserService) -> UserDto:
    """Shared create/update step: DTO -> domain -> service -> DTO."""
    try:
        return from_domain(service.upsert(to_domain(user_dto)))
    except DomainError as e:
        raise _to_http_error(e)


@router.get("", response_model=list[UserDto])
def get_all_users(service: UserService = Depends(get_user_service)):
    """Get all users as a JSON array."""
    return [from_domain(user) for user in service.get_all()]


@router.get("/filter", response_model=UserDto, responses=_NOT_FOUND)
def filter_users(
    login_name: str = Query(..., alias="loginName"),
    service: UserService = Depends(get_user_service),
):
    """Get a user by login name."""
    try:
        return from_domain(service.get_by_login_name(login_name))
    except DomainError as e:
        raise _to_http_error(e)


@router.get("/{user_id}", response_model=UserDto, responses=_NOT_FOUND)
def get_user(user_id: UserId, service: UserService = Depends(get_user_service)):
    """Get a user by ID."""
    try:
        return from_domain(service.get_by_id(user_id))
    except DomainError as e:
        raise _to_http_error(e)


@router.post(
    "",
    response_model=UserDto,
    status_code=status.HTTP_201_CREATED,
    responses=_INVALID,
)
def create_user(
    user_dto: UserDto,
    request: Request,
    response: Response,
    service: UserService = Depends(get_user_service),
):
    """Create a new user. The Location header points at the created user."""
    if user_dto.id is not None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="A new user must not have an ID",
        )

    created = _upsert(user_dto, service)
    response.headers["Location"] = str(request.url_for("get_user", user_id=created.id))

    logger.info("User created", extra={"userId": created.id, "loginName": created.login_name})
    return created


@router.put("/{user_id}", response_model=UserDto, responses={**_INVALID, **_NOT_FOUND})
def update_user(
    user_id: UserId,
    user_dto: UserDto,
    service: UserService = Depends(get_user_service),
):
    """Update an existing user. The path ID must match the ID in the body."""
    if user_dto.id != user_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail=f"User ID in path ({user_id}) does not match ID in body ({user_dto.id})",
        )

    return _upsert(user_dto, service)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=_NOT_FOUND,
)
def delete_user(user_id: UserId, service: UserService = Depends(get_user_service)):
    """Delete a user by ID."""
    try:
        service.delete(user_id)
    except DomainError as e:
        raise _to_http_error(e)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
