"""Geometry and layout value types for info popups."""

from dataclasses import dataclass
from enum import StrEnum


class PopupConfigurationError(ValueError):
    """Raised when the maximum popup bounds cannot hold any layout."""


@dataclass(frozen=True)
class Size:
    """Width and height in points."""

    width: float
    height: float

    def fits_within(self, other: "Size") -> bool:
        return self.width <= other.width and self.height <= other.height


@dataclass(frozen=True)
class Rect:
    """Axis-aligned rectangle; ``(x, y)`` is the top-left corner."""

    x: float
    y: float
    width: float
    height: float

    @classmethod
    def from_size(cls, width: float, height: float) -> "Rect":
        """Rectangle anchored at the origin."""
        return cls(0.0, 0.0, width, height)

    @property
    def size(self) -> Size:
        return Size(self.width, self.height)

    @property
    def max_x(self) -> float:
        return self.x + self.width

    @property
    def max_y(self) -> float:
        return self.y + self.height

    def contains(self, other: "Rect") -> bool:
        """Whether ``other`` lies entirely inside this rectangle."""
        return (
            other.x >= self.x
            and other.y >= self.y
            and other.max_x <= self.max_x
            and other.max_y <= self.max_y
        )


class LineStyle(StrEnum):
    """Typographic role of a popup line."""

    TITLE = "title"
    BODY = "body"


@dataclass(frozen=True)
class PopupLine:
    """One laid-out line of text.

    ``frame`` is in popup-local coordinates: (0, 0) is the popup's
    top-left corner, not the corner of the maximum bounds.
    """

    field: str
    text: str
    style: LineStyle
    frame: Rect


@dataclass(frozen=True)
class PopupLayout:
    """Final popup geometry plus every line that fits inside it."""

    frame: Rect
    lines: tuple[PopupLine, ...]
    truncated: bool = False

    @property
    def size(self) -> Size:
        return self.frame.size

    @property
    def fields(self) -> list[str]:
        """Distinct fields with at least one visible line, in display order."""
        seen: list[str] = []
        for line in self.lines:
            if line.field not in seen:
                seen.append(line.field)
        return seen
