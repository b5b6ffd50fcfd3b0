"""Info popup layout: maps maximum bounds and a display wrapper to a layout.

The popup's natural size comes from the wrapper's content alone: every
field is wrapped at a fixed character limit and measured with fixed
advances, so it does not depend on the bounds. The final size is the
natural size raised to the minimum floor and then clamped to the bounds:

    size = min(bounds, max(natural, floor))

The result never exceeds the bounds and grows monotonically with them.
Content that no longer fits once clamped is truncated with an ellipsis,
never overflowed.
"""

import textwrap

from voter_info.lib.popup.metrics import DEFAULT_METRICS, ELLIPSIS, PopupMetrics
from voter_info.lib.popup.types import (
    LineStyle,
    PopupConfigurationError,
    PopupLayout,
    PopupLine,
    Rect,
    Size,
)
from voter_info.schemas.polling_location import PollingLocationWrapper

TITLE_FIELD = "name"

_PlannedLine = tuple[str, str, LineStyle]


def _plan_lines(wrapper: PollingLocationWrapper, metrics: PopupMetrics) -> list[_PlannedLine]:
    """Break the wrapper's populated fields into display lines."""
    planned: list[_PlannedLine] = []
    for field, text in wrapper.display_fields():
        style = LineStyle.TITLE if field == TITLE_FIELD else LineStyle.BODY
        for paragraph in text.splitlines():
            if not paragraph.strip():
                continue
            wrapped = textwrap.wrap(
                paragraph,
                width=metrics.max_line_chars,
                break_long_words=True,
                break_on_hyphens=False,
            )
            planned.extend((field, line, style) for line in wrapped)
    return planned


def _natural_size(planned: list[_PlannedLine], metrics: PopupMetrics) -> Size:
    inset = 2 * metrics.padding
    if not planned:
        return Size(inset, inset)
    width = max(metrics.text_width(text, style) for _, text, style in planned)
    height = sum(metrics.line_height(style) for _, _, style in planned)
    height += metrics.line_spacing * (len(planned) - 1)
    return Size(width + inset, height + inset)


def _fit_text(text: str, max_chars: int) -> str | None:
    """Cut ``text`` to ``max_chars``, ending in an ellipsis when shortened."""
    if len(text) <= max_chars:
        return text
    if max_chars < 1:
        return None
    return text[: max_chars - 1].rstrip() + ELLIPSIS


def _mark_continued(text: str, max_chars: int) -> str:
    """Append an ellipsis to a line that is followed by hidden content."""
    if text.endswith(ELLIPSIS) or max_chars < 1:
        return text
    if len(text) + 1 <= max_chars:
        return text + ELLIPSIS
    return text[: max_chars - 1].rstrip() + ELLIPSIS


def _place_lines(
    planned: list[_PlannedLine],
    size: Size,
    metrics: PopupMetrics,
) -> tuple[list[PopupLine], bool]:
    content_width = size.width - 2 * metrics.padding
    bottom = size.height - metrics.padding
    placed: list[PopupLine] = []
    truncated = False
    y = metrics.padding

    for field, text, style in planned:
        line_height = metrics.line_height(style)
        if y + line_height > bottom:
            truncated = True
            break
        fitted = _fit_text(text, metrics.chars_that_fit(content_width, style))
        if fitted is None:
            truncated = True
            break
        if fitted != text:
            truncated = True
        frame = Rect(metrics.padding, y, metrics.text_width(fitted, style), line_height)
        placed.append(PopupLine(field=field, text=fitted, style=style, frame=frame))
        y += line_height + metrics.line_spacing

    if truncated and placed and len(placed) < len(planned):
        last = placed[-1]
        text = _mark_continued(last.text, metrics.chars_that_fit(content_width, last.style))
        frame = Rect(last.frame.x, last.frame.y, metrics.text_width(text, last.style), last.frame.height)
        placed[-1] = PopupLine(field=last.field, text=text, style=last.style, frame=frame)

    return placed, truncated


def create(
    max_bounds: Rect,
    wrapper: PollingLocationWrapper,
    metrics: PopupMetrics = DEFAULT_METRICS,
) -> PopupLayout:
    """Lay out an info popup for ``wrapper`` inside ``max_bounds``.

    Args:
        max_bounds: Largest popup the caller accepts, normally anchored at
            (0, 0). The returned frame keeps its origin.
        wrapper: Read-only display data for a polling place or candidate.
        metrics: Text measurement and minimum-size settings.

    Returns:
        A PopupLayout whose frame never exceeds ``max_bounds``.

    Raises:
        PopupConfigurationError: If ``max_bounds`` has a non-positive
            width or height.
    """
    if max_bounds.width <= 0 or max_bounds.height <= 0:
        msg = f"popup bounds must have positive width and height, got {max_bounds.width}x{max_bounds.height}"
        raise PopupConfigurationError(msg)

    planned = _plan_lines(wrapper, metrics)
    natural = _natural_size(planned, metrics)
    width = min(max_bounds.width, max(natural.width, metrics.min_width))
    height = min(max_bounds.height, max(natural.height, metrics.min_height))
    frame = Rect(max_bounds.x, max_bounds.y, width, height)

    lines, truncated = _place_lines(planned, frame.size, metrics)
    return PopupLayout(frame=frame, lines=tuple(lines), truncated=truncated)
