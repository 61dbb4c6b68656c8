"""Configuration management for the text renderer."""

import os
from pathlib import Path
from typing import Optional

from pydantic import BaseModel, Field

_TRUTHY = ("1", "true", "yes", "on")

# Opaque fill used when debug_background is enabled
DEBUG_BACKGROUND_COLOR = (255, 0, 0, 255)


class AppConfig(BaseModel):
    """Application-level configuration."""

    default_font_path: Optional[str] = Field(
        default=None,
        description="TrueType font used when a style names no loadable font",
    )
    output_dir: Path = Field(
        default=Path.cwd() / "output",
        description="Default output directory for rendered images",
    )
    debug_background: bool = Field(
        default=False,
        description="Fill canvases with opaque red instead of transparency",
    )

    @classmethod
    def load(cls) -> "AppConfig":
        """Load configuration from environment and defaults."""
        return cls(
            default_font_path=os.environ.get("MAPTEXT_FONT_PATH") or None,
            output_dir=Path(os.environ.get("MAPTEXT_OUTPUT_DIR", str(cls.model_fields["output_dir"].default))),
            debug_background=os.environ.get("MAPTEXT_DEBUG_BACKGROUND", "").strip().lower() in _TRUTHY,
        )

    def ensure_directories(self) -> None:
        """Create necessary directories."""
        self.output_dir.mkdir(parents=True, exist_ok=True)


# Global config instance
_config: Optional[AppConfig] = None


def get_config() -> AppConfig:
    """Get or create global configuration."""
    global _config
    if _config is None:
        _config = AppConfig.load()
    return _config


def reset_config() -> None:
    """Forget the global configuration so the next call reloads it."""
    global _config
    _config = None
