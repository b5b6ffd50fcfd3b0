"""Info popup layout endpoints."""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.responses import HTMLResponse

from voter_info.core.config import Settings, get_settings
from voter_info.lib.popup import PopupConfigurationError, PopupLayout
from voter_info.schemas.popup import PopupLayoutResponse, PopupRequest
from voter_info.services.popup_service import build_popup, render_popup

popup_router = APIRouter(
    prefix="/popup",
    tags=["popup"],
)


def _layout(body: PopupRequest, settings: Settings) -> PopupLayout:
    try:
        return build_popup(body.wrapper, body.max_width, body.max_height, settings)
    except PopupConfigurationError as e:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=str(e)) from e


@popup_router.post("")
async def layout_popup(
    body: PopupRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> PopupLayoutResponse:
    """Compute a popup layout that fits inside the requested maximum size."""
    return PopupLayoutResponse.from_layout(_layout(body, settings))


@popup_router.post("/html", response_class=HTMLResponse)
async def render_popup_html(
    body: PopupRequest,
    settings: Annotated[Settings, Depends(get_settings)],
) -> HTMLResponse:
    """Render the popup as an HTML snippet for a web map."""
    return HTMLResponse(render_popup(_layout(body, settings), "html"))
