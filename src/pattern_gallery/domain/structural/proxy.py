"""Proxy pattern - an image stand-in that loads the real image lazily behind an access check."""

from abc import ABC, abstractmethod
from typing import Callable, Optional

from pattern_gallery.infrastructure.logging.logger import get_logger

logger = get_logger(__name__)


class Image(ABC):
    """Displayable image contract."""

    @abstractmethod
    def display(self) -> str:
        """Display the image and describe what was shown."""


class RealImage(Image):
    """Image whose construction simulates an expensive load from disk."""

    def __init__(self, filename: str) -> None:
        self.filename = filename
        self.load_message = self._load_from_disk()

    def _load_from_disk(self) -> str:
        message = f"Loading image from disk: {self.filename}"
        logger.info(message, filename=self.filename)
        return message

    def display(self) -> str:
        return f"Displaying image: {self.filename}"


class ProxyImage(Image):
    """
    Stand-in for a ``RealImage``.

    The real image is built on the first granted ``display()`` call and
    reused afterwards. When access is not granted the real image is never
    built and every call returns the denial message.
    """

    def __init__(
        self,
        filename: str,
        access_granted: bool = True,
        image_factory: Callable[[str], Image] = RealImage,
    ) -> None:
        self.filename = filename
        self.access_granted = access_granted
        self._image_factory = image_factory
        self._real_image: Optional[Image] = None

    @property
    def is_materialized(self) -> bool:
        """Whether the real image has been loaded."""
        return self._real_image is not None

    def display(self) -> str:
        if not self.access_granted:
            logger.debug("Image access denied", filename=self.filename)
            return f"Access denied to display the image: {self.filename}"

        if self._real_image is None:
            self._real_image = self._image_factory(self.filename)
        return self._real_image.display()
