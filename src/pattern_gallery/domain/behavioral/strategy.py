"""Strategy pattern - interchangeable sorting algorithms behind one interface."""

from abc import ABC, abstractmethod
from typing import Any, List, Sequence


class SortStrategy(ABC):
    """Sorting algorithm. Implementations return a new list and leave the input alone."""

    @abstractmethod
    def sort(self, data: Sequence[Any]) -> List[Any]:
        pass


class BubbleSortStrategy(SortStrategy):
    def sort(self, data: Sequence[Any]) -> List[Any]:
        items = list(data)
        n = len(items)
        for i in range(n - 1):
            for j in range(n - i - 1):
                if items[j] > items[j + 1]:
                    items[j], items[j + 1] = items[j + 1], items[j]
        return items


class QuickSortStrategy(SortStrategy):
    def sort(self, data: Sequence[Any]) -> List[Any]:
        if len(data) <= 1:
            return list(data)
        pivot = data[0]
        left = [item for item in data[1:] if item < pivot]
        right = [item for item in data[1:] if not item < pivot]
        return self.sort(left) + [pivot] + self.sort(right)


class SortContext:
    """Client holding the currently selected strategy."""

    def __init__(self, strategy: SortStrategy) -> None:
        self._strategy = strategy

    @property
    def strategy(self) -> SortStrategy:
        return self._strategy

    def set_strategy(self, strategy: SortStrategy) -> None:
        self._strategy = strategy

    def execute_strategy(self, data: Sequence[Any]) -> List[Any]:
        return self._strategy.sort(data)
