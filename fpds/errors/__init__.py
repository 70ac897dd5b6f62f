"""
Error classification for data structure operations.

Under the default policy no list or tree operation raises. These exceptions
are used by strict mode, argument checking and configuration loading.
"""

from .structure_errors import (
    StructureError,
    EmptyStructureError,
    InvalidArgumentError,
    ConfigurationError,
)

__all__ = [
    "StructureError",
    "EmptyStructureError",
    "InvalidArgumentError",
    "ConfigurationError",
]
