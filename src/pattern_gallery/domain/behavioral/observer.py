"""Observer pattern - displays follow a weather station's temperature."""

from abc import ABC, abstractmethod
from typing import List, Optional


class Observer(ABC):
    """Receives temperature updates."""

    @abstractmethod
    def update(self, temperature: float) -> None:
        pass


class Subject(ABC):
    """Maintains observers and notifies them of changes."""

    @abstractmethod
    def add_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def remove_observer(self, observer: Observer) -> None:
        pass

    @abstractmethod
    def notify(self) -> None:
        pass


class WeatherStation(Subject):
    """Subject publishing temperature readings."""

    def __init__(self) -> None:
        self._observers: List[Observer] = []
        self._temperature: Optional[float] = None

    @property
    def temperature(self) -> Optional[float]:
        return self._temperature

    def add_observer(self, observer: Observer) -> None:
        self._observers.append(observer)

    def remove_observer(self, observer: Observer) -> None:
        """Detach an observer, compared by identity; unknown observers are ignored."""
        self._observers = [o for o in self._observers if o is not observer]

    def notify(self) -> None:
        # nothing to report before the first reading
        if self._temperature is None:
            return
        for observer in self._observers:
            observer.update(self._temperature)

    def set_temperature(self, temperature: float) -> None:
        self._temperature = temperature
        self.notify()


class TemperatureDisplay(Observer):
    """Observer that records every update it receives."""

    def __init__(self) -> None:
        self.messages: List[str] = []

    def update(self, temperature: float) -> None:
        self.messages.append(
            f"{type(self).__name__}: Temperature updated to {_format_temperature(temperature)}°C"
        )


def _format_temperature(temperature: float) -> str:
    # whole readings print without a trailing ".0"
    if float(temperature).is_integer():
        return str(int(temperature))
    return str(temperature)


class PhoneDisplay(TemperatureDisplay):
    pass


class TVDisplay(TemperatureDisplay):
    pass
