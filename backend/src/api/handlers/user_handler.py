"""
User Handler

Handles creator registration, profile updates and the owner's view of
their links.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Handlers should ONLY:
- Parse HTTP requests
- Call service methods
- Format HTTP responses

Business logic belongs in the SERVICE layer.
"""

from typing import List
from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.shared.schemas.common import ErrorResponse, SuccessResponse
from src.shared.schemas.link import LinkResponse, ReorderLinksRequest
from src.shared.schemas.user import UserCreate, UserResponse, UserUpdate
from src.shared.services.link_service import LinkService
from src.shared.services.user_service import UserService
from src.shared.core.exceptions import NotFoundError
from src.api.dependencies.services import get_link_service, get_user_service


router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_user(
    request: UserCreate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Register a new creator.

    Fails with 409 when the username or the email is already registered.
    """
    user = await user_service.create_user(
        username=request.username,
        email=request.email,
        display_name=request.display_name,
        bio=request.bio,
        avatar_url=request.avatar_url,
        theme=request.theme,
    )
    return UserResponse.model_validate(user)


@router.patch("/{user_id}", response_model=UserResponse)
async def update_user(
    user_id: UUID,
    request: UserUpdate,
    user_service: UserService = Depends(get_user_service),
):
    """
    Update a creator profile.

    Only fields present in the body are written; an explicit null clears
    display_name, bio or avatar_url.
    """
    user = await user_service.update_user(user_id, **request.changes())
    return UserResponse.model_validate(user)


@router.get("/by-username/{username}", response_model=UserResponse)
async def get_user_by_username(
    username: str,
    user_service: UserService = Depends(get_user_service),
):
    """Look up a creator by username, whether active or not."""
    user = await user_service.get_user_by_username(username)
    if not user:
        raise NotFoundError("User", details={"username": username})
    return UserResponse.model_validate(user)


@router.get("/{user_id}/links", response_model=List[LinkResponse])
async def list_links(
    user_id: UUID,
    link_service: LinkService = Depends(get_link_service),
):
    """All of a creator's links, inactive ones included, in display order."""
    links = await link_service.list_links(user_id)
    return [LinkResponse.model_validate(link) for link in links]


@router.post("/{user_id}/links/reorder", response_model=SuccessResponse)
async def reorder_links(
    user_id: UUID,
    request: ReorderLinksRequest,
    link_service: LinkService = Depends(get_link_service),
):
    """
    Assign new positions to a batch of the creator's links.

    The whole batch is rejected with 400 INVALID_ARGUMENT if any link is
    unknown or belongs to another user.
    """
    success = await link_service.reorder_links(
        user_id,
        [(order.id, order.position) for order in request.link_orders],
    )
    return SuccessResponse(success=success)
