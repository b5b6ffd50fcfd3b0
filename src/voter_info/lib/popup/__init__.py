"""Info popup library: bounded layout for polling place and candidate popups.

Public API:
    - create: (max bounds, wrapper) -> PopupLayout
    - PopupMetrics / DEFAULT_METRICS: text measurement and size floor
    - Rect, Size, PopupLine, PopupLayout, LineStyle: layout value types
    - PopupConfigurationError: non-positive bounds
    - TextRenderer, HtmlRenderer, get_renderer: toolkit adapters
"""

from voter_info.lib.popup.layout import create
from voter_info.lib.popup.metrics import DEFAULT_METRICS, ELLIPSIS, PopupMetrics
from voter_info.lib.popup.renderers import HtmlRenderer, PopupRenderer, TextRenderer, get_renderer
from voter_info.lib.popup.types import LineStyle, PopupConfigurationError, PopupLayout, PopupLine, Rect, Size

__all__ = [
    "DEFAULT_METRICS",
    "ELLIPSIS",
    "HtmlRenderer",
    "LineStyle",
    "PopupConfigurationError",
    "PopupLayout",
    "PopupLine",
    "PopupMetrics",
    "PopupRenderer",
    "Rect",
    "Size",
    "TextRenderer",
    "create",
    "get_renderer",
]
