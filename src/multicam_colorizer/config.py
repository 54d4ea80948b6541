"""Colorizer configuration settings."""

import os

from dotenv import load_dotenv

from multicam_colorizer.common.base_colorizer_model import BaseColorizerModel
from multicam_colorizer.schemas import AllocationMode

_TRUE_VALUES = {"1", "true", "yes", "on"}


class ColorizerConfig(BaseColorizerModel):
    """Configuration for a colorizer run."""

    mode: AllocationMode = AllocationMode.AUTOMATIC
    debug: bool = False
    log_level: str = "INFO"

    @property
    def effective_log_level(self) -> str:
        """Return the log level, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level.upper()


def get_colorizer_config() -> ColorizerConfig:
    """Get colorizer configuration from environment variables.

    A .env file in the working directory is loaded first.

    Environment variables:
        MULTICAM_COLORIZER_MODE: automatic, manual or individual (default: automatic)
        MULTICAM_COLORIZER_DEBUG: Enable debug logging (default: false)
        MULTICAM_COLORIZER_LOG_LEVEL: Log level name (default: INFO)
    """
    load_dotenv()

    raw_mode = os.environ.get("MULTICAM_COLORIZER_MODE", AllocationMode.AUTOMATIC)
    try:
        mode = AllocationMode(raw_mode)
    except ValueError as exc:
        msg = f"MULTICAM_COLORIZER_MODE must be one of {[m.value for m in AllocationMode]}, got {raw_mode!r}"
        raise ValueError(msg) from exc

    debug = os.environ.get("MULTICAM_COLORIZER_DEBUG", "").strip().lower() in _TRUE_VALUES
    log_level = os.environ.get("MULTICAM_COLORIZER_LOG_LEVEL", "INFO")

    return ColorizerConfig(mode=mode, debug=debug, log_level=log_level)
