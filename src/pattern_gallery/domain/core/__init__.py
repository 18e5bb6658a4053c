"""Core domain types shared by every pattern package."""

from pattern_gallery.domain.core.exceptions import (
    ConfigurationError,
    CyclicCompositionError,
    DomainException,
    PatternNotFoundError,
    ValidationError,
)

__all__ = [
    "ConfigurationError",
    "CyclicCompositionError",
    "DomainException",
    "PatternNotFoundError",
    "ValidationError",
]
