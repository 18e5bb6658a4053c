"""Instance registry - one shared instance per class, owned by the composition root."""

import threading
from typing import Any, Dict, List, Type, TypeVar, cast

from pattern_gallery.infrastructure.logging.logger import get_logger

T = TypeVar("T")


class InstanceRegistry:
    """
    Registry handing out exactly one instance of each requested class.

    Unlike a class-level singleton the registry is an ordinary object: the
    application creates it once and passes it to whoever needs shared
    instances, so tests can build a fresh registry instead of resetting
    global state.
    """

    def __init__(self) -> None:
        """Initialize the instance."""
        self._instances: Dict[type, Any] = {}
        self._lock = threading.Lock()
        self.logger = get_logger(__name__)

    def get(self, instance_class: Type[T], *args: Any, **kwargs: Any) -> T:
        """
        Get the shared instance of a class, creating it on first request.

        Args:
            instance_class: The class to get an instance of
            *args: Arguments to pass to the constructor if creating a new instance
            **kwargs: Keyword arguments to pass to the constructor if creating a new instance

        Returns:
            The shared instance
        """
        with self._lock:
            if instance_class not in self._instances:
                self._instances[instance_class] = instance_class(*args, **kwargs)
                self.logger.debug("Created shared instance", instance_class=instance_class.__name__)
            return cast(T, self._instances[instance_class])

    def has(self, instance_class: type) -> bool:
        """Check whether an instance of the class has been created."""
        with self._lock:
            return instance_class in self._instances

    def registered_classes(self) -> List[str]:
        """List names of classes with a live shared instance."""
        with self._lock:
            return [cls.__name__ for cls in self._instances]

    def clear(self) -> None:
        """Forget every shared instance."""
        with self._lock:
            self._instances.clear()
