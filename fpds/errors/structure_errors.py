"""
Exceptions raised by the persistent data structures and their configuration.
"""

from typing import Any, Optional


class StructureError(Exception):
    """Base class for all fpds errors."""

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = True


class EmptyStructureError(StructureError):
    """A strict-mode operation was applied to an empty or too-short structure."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 structure: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.structure = structure


class InvalidArgumentError(StructureError):
    """A caller-supplied argument is outside the operation's domain."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value


class ConfigurationError(StructureError):
    """Configuration failed validation."""

    def __init__(self, message: str, errors: Optional[list] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.errors = errors or []
        self.recoverable = False
