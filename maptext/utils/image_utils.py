"""Image loading, saving and compositing utilities."""

from pathlib import Path
from typing import Union

from PIL import Image


def load_image(path: Union[str, Path]) -> Image.Image:
    """Load an image from file as RGBA."""
    return Image.open(path).convert("RGBA")


def save_image(image: Image.Image, path: Union[str, Path], quality: int = 95) -> Path:
    """Save an image to file, creating parent directories as needed.

    JPEG has no alpha channel, so RGBA images are flattened onto white
    before being written. Every other format keeps the alpha channel.
    """
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if path.suffix.lower() in (".jpg", ".jpeg"):
        if image.mode == "RGBA":
            background = Image.new("RGB", image.size, (255, 255, 255))
            background.paste(image, mask=image.split()[3])
            image = background
        image.save(path, quality=quality)
    else:
        image.save(path)
    return path


def blend_images(
    base: Image.Image,
    overlay: Image.Image,
    position: tuple[int, int] = (0, 0),
    opacity: float = 1.0,
) -> Image.Image:
    """Alpha-composite ``overlay`` onto a copy of ``base`` at ``position``.

    ``position`` is the top-left corner of the overlay and may be negative
    or extend past the base; the overlay is clipped to the base.
    """
    if base.mode != "RGBA":
        base = base.convert("RGBA")
    if overlay.mode != "RGBA":
        overlay = overlay.convert("RGBA")

    if opacity < 1.0:
        r, g, b, a = overlay.split()
        a = a.point(lambda x: int(x * opacity))
        overlay = Image.merge("RGBA", (r, g, b, a))

    # Full-size layer so alpha_composite blends instead of replacing pixels.
    # No paste mask: the overlay's straight alpha must reach alpha_composite untouched.
    layer = Image.new("RGBA", base.size, (0, 0, 0, 0))
    layer.paste(overlay, position)
    return Image.alpha_composite(base, layer)
