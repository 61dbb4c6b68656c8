"""Text style models: colour, size, halo, offset and anchoring of a label."""

from enum import Enum
from pathlib import Path
from typing import Any, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..utils.color_utils import parse_rgb


class TextJustify(str, Enum):
    """Horizontal alignment of lines within a wrapped text block."""

    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class TextAnchor(str, Enum):
    """Which point of the text block is pinned to the same point of the canvas."""

    CENTER = "center"
    LEFT = "left"
    RIGHT = "right"
    TOP = "top"
    BOTTOM = "bottom"
    TOP_LEFT = "top_left"
    TOP_RIGHT = "top_right"
    BOTTOM_LEFT = "bottom_left"
    BOTTOM_RIGHT = "bottom_right"

    @classmethod
    def parse(cls, value: Union[str, "TextAnchor", None]) -> "TextAnchor":
        """Parse an anchor name or value, falling back to ``CENTER``.

        Matching ignores case and accepts ``-`` or spaces in place of ``_``
        (``"Top-Right"`` -> ``TOP_RIGHT``). Unknown or empty values do not
        raise.
        """
        if isinstance(value, TextAnchor):
            return value
        if not value or not isinstance(value, str):
            return cls.CENTER
        v = value.strip().lower().replace("-", "_").replace(" ", "_")
        if v == "centre":
            v = "center"
        for anchor in cls:
            if anchor.value == v:
                return anchor
        return cls.CENTER


class TextStyle(BaseModel):
    """Immutable description of how a piece of text should look.

    A style is validated once on construction and never mutated; use
    ``with_changes`` to derive a variant.
    """

    model_config = ConfigDict(frozen=True)

    color: tuple[int, int, int] = Field(default=(0, 0, 0), description="Text colour (RGB)")
    opacity: float = Field(default=1.0, ge=0.0, le=1.0, description="Text opacity")
    justification: TextJustify = Field(
        default=TextJustify.LEFT,
        description="Alignment of lines within a wrapped block",
    )
    size: int = Field(default=16, gt=0, description="Font size in pixels")
    max_width: int = Field(
        default=160,
        gt=0,
        description="Maximum line width in pixels; longer text wraps",
    )
    halo_color: tuple[int, int, int] = Field(
        default=(255, 255, 255),
        description="Colour of the blurred halo behind the glyphs (RGB)",
    )
    halo_width: float = Field(default=0.0, ge=0.0, description="Halo blur radius in pixels")
    offset: tuple[int, int] = Field(
        default=(0, 0),
        description="Pixel displacement away from the anchored edge",
    )
    anchor: TextAnchor = Field(default=TextAnchor.CENTER, description="Anchor point")
    fonts: list[str] = Field(
        default_factory=list,
        description="Font names or paths, highest preference first",
    )
    line_height: int = Field(
        default=0,
        ge=0,
        description="Line leading in pixels (0 uses the font's own metrics)",
    )
    rotation: float = Field(
        default=0.0,
        ge=0.0,
        le=360.0,
        description="Clockwise marker rotation in degrees",
    )

    @field_validator("color", "halo_color", mode="before")
    @classmethod
    def _parse_color(cls, value: Any) -> tuple[int, int, int]:
        return parse_rgb(value)

    @field_validator("justification", mode="before")
    @classmethod
    def _normalize_justification(cls, value: Any) -> Any:
        if isinstance(value, str) and not isinstance(value, TextJustify):
            return value.strip().lower()
        return value

    @field_validator("anchor", mode="before")
    @classmethod
    def _parse_anchor(cls, value: Any) -> TextAnchor:
        return TextAnchor.parse(value)

    @property
    def font(self) -> str:
        """Preferred font, or an empty string for the default font."""
        return self.fonts[0] if self.fonts else ""

    def with_changes(self, **changes: Any) -> "TextStyle":
        """Return a new, re-validated style with ``changes`` applied."""
        data = self.model_dump()
        data.update(changes)
        return TextStyle(**data)

    @classmethod
    def from_yaml(cls, path: Path) -> "TextStyle":
        """Load a style from a YAML file."""
        with open(path) as f:
            data = yaml.safe_load(f) or {}
        return cls(**data)

    def to_yaml(self, path: Path) -> None:
        """Save the style to a YAML file."""
        data = self.model_dump(mode="json")
        with open(path, "w") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
