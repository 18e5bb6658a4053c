"""Bridge pattern - shapes and colors vary independently."""

from abc import ABC, abstractmethod


class Color(ABC):
    """Implementation side of the bridge."""

    @abstractmethod
    def apply_color(self) -> str:
        """Name of the color applied."""


class RedColor(Color):
    def apply_color(self) -> str:
        return "Red"


class BlueColor(Color):
    def apply_color(self) -> str:
        return "Blue"


class Shape(ABC):
    """Abstraction side of the bridge, holding a reference to a ``Color``."""

    def __init__(self, color: Color) -> None:
        self.color = color

    @abstractmethod
    def draw(self) -> str:
        """Describe the drawn shape."""


class Circle(Shape):
    def draw(self) -> str:
        return f"Drawing Circle in {self.color.apply_color()}"


class Square(Shape):
    def draw(self) -> str:
        return f"Drawing Square in {self.color.apply_color()}"
