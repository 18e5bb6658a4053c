"""Flyweight pattern - icons are shared per type, positions are passed in."""

import threading
from abc import ABC, abstractmethod
from typing import Dict, List

from pattern_gallery.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Icon(ABC):
    """Shared icon contract."""

    @abstractmethod
    def render(self, x: int, y: int) -> str:
        """Render the icon at a position supplied by the caller."""


class ConcreteIcon(Icon):
    """Icon carrying only its intrinsic state, the icon type."""

    def __init__(self, icon_type: str) -> None:
        self._icon_type = icon_type

    @property
    def icon_type(self) -> str:
        return self._icon_type

    def render(self, x: int, y: int) -> str:
        return f"Rendering icon of type '{self._icon_type}' at position ({x}, {y})."

    def __repr__(self) -> str:
        return f"ConcreteIcon({self._icon_type!r})"


class IconFactory:
    """Creates icons lazily and hands out the same instance for a type thereafter.

    The cache never evicts. Any string is a valid icon type.
    """

    def __init__(self) -> None:
        self._icons: Dict[str, Icon] = {}
        self._lock = threading.Lock()

    def get_icon(self, icon_type: str) -> Icon:
        """
        Get the shared icon for a type.

        Args:
            icon_type: Intrinsic key of the icon

        Returns:
            The cached icon, created on the first request for this type
        """
        with self._lock:
            icon = self._icons.get(icon_type)
            if icon is None:
                icon = ConcreteIcon(icon_type)
                self._icons[icon_type] = icon
                logger.debug("Created shared icon", icon_type=icon_type, cached=len(self._icons))
            return icon

    @property
    def icon_count(self) -> int:
        """Number of shared icons created so far."""
        with self._lock:
            return len(self._icons)

    @property
    def cached_types(self) -> List[str]:
        """Icon types in the order they were first requested."""
        with self._lock:
            return list(self._icons)


class IconManager:
    """Client that places shared icons at caller-supplied coordinates."""

    def __init__(self, icon_factory: IconFactory) -> None:
        self.icon_factory = icon_factory

    def display_icon(self, icon_type: str, x: int, y: int) -> str:
        icon = self.icon_factory.get_icon(icon_type)
        return icon.render(x, y)
