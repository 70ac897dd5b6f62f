"""
Logging configuration and utilities for fpds.
"""
from .config import configure_logging, get_logger, get_structure_logger

__all__ = ["configure_logging", "get_logger", "get_structure_logger"]
