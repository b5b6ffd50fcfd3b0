"""Text metrics used to measure popup content.

Measurement uses fixed per-character advances so that layouts are
deterministic and independent of any font rasterizer.
"""

from dataclasses import dataclass

from voter_info.lib.popup.types import LineStyle

ELLIPSIS = "…"


@dataclass(frozen=True)
class PopupMetrics:
    """Character advances, line heights, spacing and the minimum popup size."""

    title_char_width: float = 9.0
    body_char_width: float = 7.0
    title_line_height: float = 18.0
    body_line_height: float = 16.0
    line_spacing: float = 2.0
    padding: float = 8.0
    max_line_chars: int = 36
    min_width: float = 80.0
    min_height: float = 40.0

    def __post_init__(self) -> None:
        for name in ("title_char_width", "body_char_width", "title_line_height", "body_line_height"):
            if getattr(self, name) <= 0:
                msg = f"{name} must be positive, got {getattr(self, name)}"
                raise ValueError(msg)
        if self.line_spacing < 0 or self.padding < 0:
            msg = "line_spacing and padding must not be negative"
            raise ValueError(msg)
        if self.max_line_chars < 1:
            msg = f"max_line_chars must be at least 1, got {self.max_line_chars}"
            raise ValueError(msg)
        if self.min_width <= 0 or self.min_height <= 0:
            msg = "minimum popup size must be positive"
            raise ValueError(msg)

    def char_width(self, style: LineStyle) -> float:
        return self.title_char_width if style is LineStyle.TITLE else self.body_char_width

    def line_height(self, style: LineStyle) -> float:
        return self.title_line_height if style is LineStyle.TITLE else self.body_line_height

    def text_width(self, text: str, style: LineStyle) -> float:
        return len(text) * self.char_width(style)

    def chars_that_fit(self, width: float, style: LineStyle) -> int:
        """Number of whole characters of ``style`` that fit in ``width``."""
        if width <= 0:
            return 0
        return int(width // self.char_width(style))


DEFAULT_METRICS = PopupMetrics()
