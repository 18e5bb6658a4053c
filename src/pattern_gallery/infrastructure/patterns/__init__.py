"""Infrastructure patterns package."""

from pattern_gallery.infrastructure.patterns.instance_registry import InstanceRegistry

__all__ = ["InstanceRegistry"]
