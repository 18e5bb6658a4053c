"""Template Method pattern - fixed beverage recipe with pluggable steps."""

from abc import ABC, abstractmethod
from typing import List


class BeverageMaker(ABC):
    """Defines the recipe; subclasses fill in brewing and condiments."""

    def announce(self) -> str:
        return f"Request - {type(self).__name__}"

    def prepare_beverage(self) -> List[str]:
        """Run the recipe and return each step in order."""
        return [
            self._boil_water(),
            self.brew(),
            self._pour_in_cup(),
            self.add_condiments(),
        ]

    def _boil_water(self) -> str:
        return "Boiling water"

    def _pour_in_cup(self) -> str:
        return "Pouring into cup"

    @abstractmethod
    def brew(self) -> str:
        pass

    @abstractmethod
    def add_condiments(self) -> str:
        pass


class TeaMaker(BeverageMaker):
    def brew(self) -> str:
        return "Steeping the tea"

    def add_condiments(self) -> str:
        return "Adding lemon"


class CoffeeMaker(BeverageMaker):
    def brew(self) -> str:
        return "Dripping coffee through filter"

    def add_condiments(self) -> str:
        return "Adding sugar and milk"
