import os
import logging
from dataclasses import dataclass

from src.core.enums import DimensionMode

logger = logging.getLogger(__name__)

_TRUE_VALUES = ("1", "true", "yes", "on")


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in _TRUE_VALUES


@dataclass(frozen=True)
class CodecConfig:
    """
    Codec behaviour settings (Immutable Object Pattern)

    Attributes:
        hex_uppercase: Emit upper-case hex digits instead of lower-case
        dimension_mode: Resolve Z/M per framed geometry or once from the root
        strict_trailing_bytes: Fail instead of warn on bytes after the root geometry
        max_depth: Deepest allowed multi-geometry nesting below the root
    """
    hex_uppercase: bool = False
    dimension_mode: DimensionMode = DimensionMode.PER_GEOMETRY
    strict_trailing_bytes: bool = False
    max_depth: int = 128

    def __post_init__(self) -> None:
        if self.max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {self.max_depth}")

    @classmethod
    def from_env(cls) -> "CodecConfig":
        """
        Build configuration from environment variables

        Reads WKB_HEX_UPPERCASE, WKB_DIMENSION_MODE, WKB_STRICT_TRAILING_BYTES
        and WKB_MAX_DEPTH, falling back to the defaults.

        Returns:
            CodecConfig instance

        Raises:
            ValueError: If WKB_DIMENSION_MODE holds an unknown mode or
                WKB_MAX_DEPTH is not a non-negative integer
        """
        mode_str = os.getenv("WKB_DIMENSION_MODE", DimensionMode.PER_GEOMETRY.value)
        try:
            dimension_mode = DimensionMode(mode_str.strip().lower())
        except ValueError:
            valid_modes = [mode.value for mode in DimensionMode]
            raise ValueError(
                f"Invalid WKB_DIMENSION_MODE '{mode_str}'. "
                f"Valid modes: {', '.join(valid_modes)}"
            )

        config = cls(
            hex_uppercase=_env_flag("WKB_HEX_UPPERCASE", False),
            dimension_mode=dimension_mode,
            strict_trailing_bytes=_env_flag("WKB_STRICT_TRAILING_BYTES", False),
            max_depth=int(os.getenv("WKB_MAX_DEPTH", cls.max_depth)),
        )
        logger.debug(f"Codec configuration loaded from environment: {config}")
        return config


# Singleton instance for easy access
DEFAULT_CODEC_CONFIG = CodecConfig()
