"""
Profile Handler

Public, read-only endpoints a visitor hits: the profile itself and the
click-through redirect for each of its links.
"""

from uuid import UUID

from fastapi import APIRouter, Depends, status
from fastapi.responses import RedirectResponse

from src.shared.schemas.common import ErrorResponse
from src.shared.schemas.link import LinkResponse
from src.shared.schemas.profile import PublicProfileResponse
from src.shared.schemas.user import UserResponse
from src.shared.services.click_service import ClickService
from src.shared.services.profile_service import ProfileService
from src.shared.core.exceptions import LinkNotFoundError, ProfileNotFoundError
from src.shared.core.logging import logger
from src.api.dependencies.services import get_click_service, get_profile_service


router = APIRouter(
    responses={
        status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse},
        status.HTTP_404_NOT_FOUND: {"model": ErrorResponse},
    },
)


@router.get("/{username}", response_model=PublicProfileResponse)
async def get_public_profile(
    username: str,
    profile_service: ProfileService = Depends(get_profile_service),
):
    """
    Public profile of an active creator with their active links.

    Unknown and inactive creators both answer 404.
    """
    profile = await profile_service.get_public_profile(username)
    if profile is None:
        raise ProfileNotFoundError(username)

    return PublicProfileResponse(
        user=UserResponse.model_validate(profile.user),
        links=[LinkResponse.model_validate(link) for link in profile.links],
    )


@router.get(
    "/{username}/go/{link_id}",
    status_code=status.HTTP_307_TEMPORARY_REDIRECT,
    response_class=RedirectResponse,
)
async def follow_link(
    username: str,
    link_id: UUID,
    profile_service: ProfileService = Depends(get_profile_service),
    click_service: ClickService = Depends(get_click_service),
):
    """
    Count a click and send the visitor on to the link's URL.

    Only links shown on the public profile can be followed.
    """
    link = await profile_service.find_visible_link(username, link_id)
    if link is None:
        raise LinkNotFoundError(str(link_id))

    destination = link.url
    if not await click_service.track_click(link.id):
        logger.warning("Click not counted", link_id=str(link_id), username=username)

    return RedirectResponse(url=destination, status_code=status.HTTP_307_TEMPORARY_REDIRECT)
