# src/pattern_gallery/domain/core/exceptions.py
from typing import Any, List, Optional


class DomainException(Exception):
    """Base exception for all domain-specific errors."""
    pass


class ValidationError(DomainException):
    """Raised when domain validation fails."""
    def __init__(self, message: str, details: Any = None):
        super().__init__(message)
        self.details = details


class CyclicCompositionError(ValidationError):
    """Raised when adding a component would make a composite contain itself."""
    def __init__(self, container: Any, component: Any):
        super().__init__(
            f"Cannot add {component!r} to {container!r}: the composite would contain itself",
            {"container": container, "component": component},
        )
        self.container = container
        self.component = component


class PatternNotFoundError(DomainException):
    """Raised when a requested pattern demo is not registered."""
    def __init__(self, name: str, available: Optional[List[str]] = None):
        super().__init__(f"Pattern demo '{name}' not found")
        self.name = name
        self.available = available or []


class ConfigurationError(DomainException):
    """Raised when there's an issue with configuration."""
    def __init__(self, message: str, missing_fields: Optional[List[str]] = None):
        super().__init__(message)
        self.missing_fields = missing_fields or []
