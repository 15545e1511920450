"""
Link Handler

Handles link CRUD and click tracking.

ARCHITECTURE:
=============
    Handler → Service → Repository → Model

Business logic belongs in the SERVICE layer.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status

from src.shared.schemas.common import ErrorResponse, SuccessResponse
from src.shared.schemas.link import LinkCreate, LinkResponse, LinkUpdate
from src.shared.services.click_service import ClickService
from src.shared.services.link_service import LinkService
from src.api.dependencies.services import get_click_service, get_link_service


router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


@router.post(
    "",
    response_model=LinkResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_link(
    request: LinkCreate,
    link_service: LinkService = Depends(get_link_service),
):
    """
    Add a link to a creator's profile.

    Without a position the link is appended after the creator's last link.
    """
    link = await link_service.create_link(
        user_id=request.user_id,
        title=request.title,
        url=request.url,
        description=request.description,
        icon=request.icon,
        position=request.position,
    )
    return LinkResponse.model_validate(link)


@router.patch("/{link_id}", response_model=LinkResponse)
async def update_link(
    link_id: UUID,
    request: LinkUpdate,
    link_service: LinkService = Depends(get_link_service),
):
    """
    Update a link.

    Only fields present in the body are written. A position given here
    overwrites this link's position without moving any other link.
    """
    link = await link_service.update_link(link_id, **request.changes())
    return LinkResponse.model_validate(link)


@router.delete("/{link_id}", response_model=SuccessResponse)
async def delete_link(
    link_id: UUID,
    link_service: LinkService = Depends(get_link_service),
):
    """Delete a link and move the owner's later links up by one."""
    success = await link_service.delete_link(link_id)
    return SuccessResponse(success=success)


@router.post("/{link_id}/click", response_model=SuccessResponse)
async def track_click(
    link_id: UUID,
    click_service: ClickService = Depends(get_click_service),
):
    """
    Count a click on a link.

    Always answers 200; success is false when the link does not exist.
    """
    success = await click_service.track_click(link_id)
    return SuccessResponse(success=success)
