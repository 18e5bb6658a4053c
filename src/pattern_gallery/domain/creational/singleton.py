"""Singleton pattern, without hidden global state.

``SharedService`` is an ordinary class. "Exactly one instance" is provided by
the ``InstanceRegistry`` the application builds at start-up and passes around,
rather than by a class-level ``get_instance`` hook.
"""

from pattern_gallery.infrastructure.patterns.instance_registry import InstanceRegistry


class SharedService:
    """Service the application uses through a single shared instance."""

    def operation_one(self) -> str:
        return "Operation One"

    def operation_two(self) -> str:
        return "Operation Two"


def get_shared_service(registry: InstanceRegistry) -> SharedService:
    """Get the shared service instance owned by ``registry``."""
    return registry.get(SharedService)
