"""Infrastructure layer - configuration and logging."""

from vufs.infrastructure.config import EngineSettings, get_settings
from vufs.infrastructure.logging import configure_logging

__all__ = ["EngineSettings", "configure_logging", "get_settings"]
