"""Value types produced while laying out a single text bitmap."""

from dataclasses import dataclass


@dataclass(frozen=True)
class TextDimension:
    """Pixel size of the laid-out text block."""

    width: int
    height: int


@dataclass(frozen=True)
class CanvasDimension:
    """Pixel size of the output bitmap."""

    width: int
    height: int

    def fits(self, text: TextDimension) -> bool:
        return self.width >= text.width and self.height >= text.height


@dataclass(frozen=True)
class AnchorRatio:
    """Fractional position of an anchor inside any rectangle, in [0, 1]."""

    x: float
    y: float


@dataclass(frozen=True)
class Translation:
    """Offset of the text block's drawing origin inside the canvas."""

    x: float
    y: float

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


@dataclass(frozen=True)
class TextGeometry:
    """Everything computed for one render request, before drawing."""

    text: TextDimension
    canvas: CanvasDimension
    ratio: AnchorRatio
    translation: Translation
