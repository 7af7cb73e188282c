"""Adapting imperial speeds for a metric speeding check."""

import functools
from abc import ABC, abstractmethod

from .exceptions.catalogue_exception import IncompatibleUnits

MILES_TO_KILOMETERS = 1.61


@functools.total_ordering
class Speed(ABC):
    """A speed value together with its unit."""

    def __init__(self, value: float):
        self.value = value

    @property
    @abstractmethod
    def unit(self) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'unit'"
        )

    def _check_units(self, other: "Speed") -> None:
        if self.unit != other.unit:
            raise IncompatibleUnits(
                f"The speeds have different units: {self.unit} and {other.unit}"
            )

    def __eq__(self, other):
        if not isinstance(other, Speed):
            return NotImplemented
        self._check_units(other)
        return self.value == other.value

    def __lt__(self, other):
        if not isinstance(other, Speed):
            return NotImplemented
        self._check_units(other)
        return self.value < other.value

    def __hash__(self):
        return hash((self.value, self.unit))

    def __repr__(self):
        return f"{self.__class__.__name__}({self.value}{self.unit})"


class KilometersSpeed(Speed):
    """Speed as used throughout the internal, metric system."""

    @property
    def unit(self) -> str:
        return "km/h"


class MilesSpeed(Speed):
    """Speed as received from the external, imperial API."""

    @property
    def unit(self) -> str:
        return "mi/h"


class KilometersAdapter(KilometersSpeed):
    """Presents a miles-per-hour reading as kilometres per hour."""

    def __init__(self, speed: MilesSpeed):
        super().__init__(speed.value * MILES_TO_KILOMETERS)
        self.source = speed


class KilometersSpeedLimit:
    MAX_LIMIT = KilometersSpeed(100)

    @classmethod
    def is_speeding(cls, speed: Speed) -> bool:
        if speed > cls.MAX_LIMIT:
            print(f"({speed.value:g}{speed.unit}) You are speeding")
            return True

        print(f"({speed.value:g}{speed.unit}) You are below the max limit")
        return False


def demo() -> None:
    KilometersSpeedLimit.is_speeding(KilometersSpeed(90))
    KilometersSpeedLimit.is_speeding(KilometersSpeed(110))

    # Readings from the external API
    slow_mi_speed = MilesSpeed(50)
    fast_mi_speed = MilesSpeed(80)

    KilometersSpeedLimit.is_speeding(KilometersAdapter(slow_mi_speed))
    KilometersSpeedLimit.is_speeding(KilometersAdapter(fast_mi_speed))
