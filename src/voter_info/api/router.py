"""Root API router with /api/v1 prefix."""

from fastapi import APIRouter

from voter_info.core.config import Settings


def create_router(settings: Settings) -> APIRouter:
    """Create the root API router with all sub-routers included.

    Args:
        settings: Application settings.

    Returns:
        Configured API router.
    """
    from voter_info.api.v1.candidates import candidates_router
    from voter_info.api.v1.contests import contests_router
    from voter_info.api.v1.popup import popup_router

    root_router = APIRouter(prefix=settings.api_v1_prefix)
    root_router.include_router(contests_router)
    root_router.include_router(candidates_router)
    root_router.include_router(popup_router)
    return root_router
