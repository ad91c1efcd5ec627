"""Utility modules for Cobalt.

Provides:
- logger: get_logger for logging
"""

from cobalt.utils.logger import get_logger

__all__ = ["get_logger"]
