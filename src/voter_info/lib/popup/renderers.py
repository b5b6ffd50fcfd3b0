"""Swappable renderers that turn a PopupLayout into toolkit output.

Layout never depends on a renderer; a renderer only reads the layout.
"""

import html
from typing import Protocol

from voter_info.lib.popup.types import PopupLayout


class PopupRenderer(Protocol):
    """Anything that can draw a popup layout."""

    media_type: str

    def render(self, layout: PopupLayout) -> str: ...


def _px(value: float) -> str:
    return f"{value:g}px"


class TextRenderer:
    """Boxed plain-text rendering for terminals and logs.

    Pixel geometry is dropped; each layout line becomes one row.
    """

    media_type = "text/plain"

    def render(self, layout: PopupLayout) -> str:
        width = max((len(line.text) for line in layout.lines), default=0)
        rows = ["┌" + "─" * (width + 2) + "┐"]
        for line in layout.lines:
            rows.append(f"│ {line.text.ljust(width)} │")
        rows.append("└" + "─" * (width + 2) + "┘")
        return "\n".join(rows)


class HtmlRenderer:
    """Absolutely positioned HTML snippet for a web map popup."""

    media_type = "text/html"

    def __init__(self, css_class: str = "vi-popup") -> None:
        self.css_class = css_class

    def render(self, layout: PopupLayout) -> str:
        frame = layout.frame
        parts = [
            f'<div class="{html.escape(self.css_class)}" '
            f'style="position:relative;width:{_px(frame.width)};height:{_px(frame.height)};overflow:hidden">'
        ]
        for line in layout.lines:
            parts.append(
                f'<div class="{html.escape(self.css_class)}-{line.style}" data-field="{html.escape(line.field)}" '
                f'style="position:absolute;left:{_px(line.frame.x)};top:{_px(line.frame.y)};'
                f'height:{_px(line.frame.height)};white-space:nowrap">'
                f"{html.escape(line.text)}</div>"
            )
        parts.append("</div>")
        return "".join(parts)


RENDERERS: dict[str, PopupRenderer] = {
    "text": TextRenderer(),
    "html": HtmlRenderer(),
}


def get_renderer(name: str) -> PopupRenderer:
    """Look up a registered renderer by name.

    Raises:
        ValueError: If no renderer is registered under ``name``.
    """
    try:
        return RENDERERS[name]
    except KeyError:
        msg = f"Unknown popup renderer '{name}'. Available: {', '.join(sorted(RENDERERS))}"
        raise ValueError(msg) from None
