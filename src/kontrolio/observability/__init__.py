"""
Logging helpers shared across kontrolio.
"""

from .logger import get_logger, log_operation, setup_logger

__all__ = ["setup_logger", "get_logger", "log_operation"]
