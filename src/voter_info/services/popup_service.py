"""Popup service: build and render info popups with configured metrics."""

from loguru import logger

from voter_info.core.config import Settings
from voter_info.lib.popup import PopupLayout, PopupMetrics, Rect, create, get_renderer
from voter_info.schemas.polling_location import PollingLocationWrapper


def metrics_from_settings(settings: Settings) -> PopupMetrics:
    """Popup metrics with the configurable values taken from settings."""
    return PopupMetrics(
        padding=settings.popup_padding,
        max_line_chars=settings.popup_max_line_chars,
        min_width=settings.popup_min_width,
        min_height=settings.popup_min_height,
    )


def build_popup(
    wrapper: PollingLocationWrapper,
    max_width: float,
    max_height: float,
    settings: Settings,
) -> PopupLayout:
    """Lay out a popup for ``wrapper`` no larger than ``max_width`` x ``max_height``.

    Raises:
        PopupConfigurationError: If either maximum dimension is not positive.
    """
    layout = create(Rect.from_size(max_width, max_height), wrapper, metrics_from_settings(settings))
    if layout.truncated:
        logger.debug(
            f"Popup for '{wrapper.name}' truncated to {layout.frame.width:g}x{layout.frame.height:g} "
            f"({len(layout.lines)} lines shown)"
        )
    return layout


def render_popup(layout: PopupLayout, renderer: str = "text") -> str:
    """Render a layout with a registered renderer ("text" or "html")."""
    return get_renderer(renderer).render(layout)
