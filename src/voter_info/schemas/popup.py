"""Pydantic v2 schemas for popup layout requests and responses."""

from dataclasses import asdict

from pydantic import BaseModel, Field

from voter_info.lib.popup import PopupLayout
from voter_info.schemas.polling_location import PollingLocationWrapper


class PopupRequest(BaseModel):
    """Maximum popup size plus the data to display.

    Bounds are not range-checked here; non-positive values are rejected by
    the layout itself as a configuration error.
    """

    max_width: float = Field(description="Largest popup width the caller accepts")
    max_height: float = Field(description="Largest popup height the caller accepts")
    wrapper: PollingLocationWrapper


class RectResponse(BaseModel):
    x: float
    y: float
    width: float
    height: float


class PopupLineResponse(BaseModel):
    field: str
    text: str
    style: str
    frame: RectResponse


class PopupLayoutResponse(BaseModel):
    """A computed popup layout."""

    frame: RectResponse
    lines: list[PopupLineResponse]
    truncated: bool

    @classmethod
    def from_layout(cls, layout: PopupLayout) -> "PopupLayoutResponse":
        return cls(
            frame=RectResponse(**asdict(layout.frame)),
            lines=[
                PopupLineResponse(
                    field=line.field,
                    text=line.text,
                    style=str(line.style),
                    frame=RectResponse(**asdict(line.frame)),
                )
                for line in layout.lines
            ],
            truncated=layout.truncated,
        )
