"""Utility modules for nhtml.

Provides:
- logger: get_logger and configure_logging for logging
"""

from nhtml.utils.logger import configure_logging, get_logger

__all__ = ["configure_logging", "get_logger"]
