"""Configuration and logging helpers."""

from dvw_reader.utils.config import Settings, get_settings
from dvw_reader.utils.logging import clear_log_context, log_context, setup_logging

__all__ = ["Settings", "clear_log_context", "get_settings", "log_context", "setup_logging"]
