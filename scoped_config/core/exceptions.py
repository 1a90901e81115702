"""
Custom exceptions for scoped singletons and configuration holders.
"""

from typing import Optional, Dict, Any


class ScopedConfigError(Exception):
    """Base exception for scoped configuration errors."""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)

    def to_response_dict(self) -> Dict[str, Any]:
        """Convert to an error response body."""
        return {
            "success": False,
            "error": type(self).__name__,
            "message": self.message,
            "details": self.details,
        }


class DirectInstantiationError(ScopedConfigError, TypeError):
    """
    Raised when a scoped singleton is constructed outside its accessor.

    Instances are only ever built by get_instance().
    """

    def __init__(self, class_name: str):
        self.class_name = class_name
        super().__init__(
            message=f"{class_name} cannot be instantiated directly; use {class_name}.get_instance()",
            details={"class_name": class_name},
        )


class ImmutableConfigurationError(ScopedConfigError, AttributeError):
    """Raised on any attempt to modify a constructed configuration holder."""

    def __init__(self, class_name: str, attribute: str):
        self.class_name = class_name
        self.attribute = attribute
        super().__init__(
            message=f"{class_name} is read-only; cannot set '{attribute}'",
            details={"class_name": class_name, "attribute": attribute},
        )
