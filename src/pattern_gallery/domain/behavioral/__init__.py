"""Behavioral patterns: Chain of Responsibility, Memento, Observer, State, Strategy, Template Method."""

from .chain_of_responsibility import AuthHandler, Handler, LoggingHandler, ValidationHandler
from .memento import Document, DocumentMemento, History
from .observer import Observer, PhoneDisplay, Subject, TemperatureDisplay, TVDisplay, WeatherStation
from .state import (
    OutOfStockState,
    PaymentPendingState,
    ProductSelectedState,
    ReadyState,
    VendingMachineContext,
    VendingMachineState,
)
from .strategy import BubbleSortStrategy, QuickSortStrategy, SortContext, SortStrategy
from .template_method import BeverageMaker, CoffeeMaker, TeaMaker

__all__ = [
    "AuthHandler",
    "BeverageMaker",
    "BubbleSortStrategy",
    "CoffeeMaker",
    "Document",
    "DocumentMemento",
    "Handler",
    "History",
    "LoggingHandler",
    "Observer",
    "OutOfStockState",
    "PaymentPendingState",
    "PhoneDisplay",
    "ProductSelectedState",
    "QuickSortStrategy",
    "ReadyState",
    "SortContext",
    "SortStrategy",
    "Subject",
    "TVDisplay",
    "TeaMaker",
    "TemperatureDisplay",
    "ValidationHandler",
    "VendingMachineContext",
    "VendingMachineState",
]
