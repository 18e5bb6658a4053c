"""Structural patterns: Adapter, Bridge, Composite, Facade, Flyweight, Proxy."""

from .adapter import AggregatedTask, Task, TaskAdapter
from .bridge import BlueColor, Circle, Color, RedColor, Shape, Square
from .composite import Component, Composite, Leaf
from .facade import Facade, SubsystemA, SubsystemB
from .flyweight import ConcreteIcon, Icon, IconFactory, IconManager
from .proxy import Image, ProxyImage, RealImage

__all__ = [
    "AggregatedTask",
    "BlueColor",
    "Circle",
    "Color",
    "Component",
    "Composite",
    "ConcreteIcon",
    "Facade",
    "Icon",
    "IconFactory",
    "IconManager",
    "Image",
    "Leaf",
    "ProxyImage",
    "RealImage",
    "RedColor",
    "Shape",
    "Square",
    "SubsystemA",
    "SubsystemB",
    "Task",
    "TaskAdapter",
]
