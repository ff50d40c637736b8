"""
Custom exceptions for modelgen.
"""
from typing import Optional, Dict, Any


class ModelgenError(Exception):
    """Base exception for all modelgen errors."""

    def __init__(
        self,
        message: str,
        *,
        context: Optional[Dict[str, Any]] = None,
        original_exception: Optional[Exception] = None
    ) -> None:
        """Initialize the exception.

        Args:
            message: Human-readable error message
            context: Additional context about the error
            original_exception: The original exception that caused this error
        """
        super().__init__(message)
        self.context = context or {}
        self.original_exception = original_exception


class FieldAttributeError(ModelgenError):
    """Raised when a field attribute name is not part of FieldSpec."""
    pass


class DescriptionLoadError(ModelgenError):
    """Raised when a model description file cannot be read or parsed."""
    pass
