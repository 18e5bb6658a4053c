"""State pattern - a vending machine delegates requests to its current state."""

from abc import ABC, abstractmethod
from typing import Optional


class VendingMachineState(ABC):
    @abstractmethod
    def handle_request(self) -> str:
        """Respond to a request while the machine is in this state."""


class ReadyState(VendingMachineState):
    def handle_request(self) -> str:
        return "Ready state: Please select a product."


class ProductSelectedState(VendingMachineState):
    def handle_request(self) -> str:
        return "Product selected state: Processing payment."


class PaymentPendingState(VendingMachineState):
    def handle_request(self) -> str:
        return "Payment pending state: Dispensing product."


class OutOfStockState(VendingMachineState):
    def handle_request(self) -> str:
        return "Out of stock state: Product unavailable. Please select another product."


class VendingMachineContext:
    """Vending machine; starts in ``ReadyState`` unless told otherwise."""

    def __init__(self, state: Optional[VendingMachineState] = None) -> None:
        self._state = state or ReadyState()

    @property
    def state(self) -> VendingMachineState:
        return self._state

    def set_state(self, state: VendingMachineState) -> None:
        self._state = state

    def request(self) -> str:
        return self._state.handle_request()
