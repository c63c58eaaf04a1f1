"""
Codec configuration.
"""

import os
from dataclasses import dataclass


def _env_flag(name: str) -> bool:
    return os.environ.get(name, "").strip().lower() in ("1", "true", "yes", "on")


@dataclass
class CodecConfig:
    """Options controlling how GeoJSON text is written and fetched."""

    indent: int | None = None
    """Indentation for pretty output. None writes compact JSON."""

    sort_keys: bool = False
    """Sort object keys in the output."""

    ensure_ascii: bool = False
    """Escape non-ASCII characters in the output."""

    fetch_timeout: float = 30.0
    """Timeout in seconds for HTTP fetches."""

    def __post_init__(self) -> None:
        """Check option ranges."""
        if self.indent is not None and self.indent < 0:
            raise ValueError(f"indent must be >= 0, got {self.indent}")
        if self.fetch_timeout <= 0:
            raise ValueError(f"fetch_timeout must be positive, got {self.fetch_timeout}")

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """
        Build a configuration from environment variables.

        Reads GEOJSON_CODEC_INDENT, GEOJSON_CODEC_SORT_KEYS and
        GEOJSON_CODEC_TIMEOUT. Unset variables keep their defaults.
        """
        indent = os.environ.get("GEOJSON_CODEC_INDENT")
        timeout = os.environ.get("GEOJSON_CODEC_TIMEOUT")
        try:
            return cls(
                indent=int(indent) if indent else None,
                sort_keys=_env_flag("GEOJSON_CODEC_SORT_KEYS"),
                fetch_timeout=float(timeout) if timeout else 30.0,
            )
        except ValueError as e:
            raise ValueError(f"Invalid GEOJSON_CODEC_* environment setting: {e}") from e
