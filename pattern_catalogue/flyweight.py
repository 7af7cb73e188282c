"""Flyweights sharing intrinsic car state across many records."""

import json
import logging
from typing import Dict, List, Sequence

logger = logging.getLogger(__name__)


class Flyweight:
    """
    Stores the state shared by many entities.

    The unique, extrinsic part arrives through method parameters.
    """

    def __init__(self, shared_state: Sequence[str]):
        self.shared_state = list(shared_state)

    def operation(self, unique_state: Sequence[str]) -> str:
        s = json.dumps(self.shared_state)
        u = json.dumps(list(unique_state))
        message = f"Flyweight: Displaying shared ({s}) and unique ({u}) state."
        print(message, end="")
        return message


class FlyweightFactory:
    """Hands out existing flyweights, creating them only when missing."""

    def __init__(self, initial_flyweights: Sequence[Sequence[str]] = ()):
        self._flyweights: Dict[str, Flyweight] = {}
        for state in initial_flyweights:
            self._flyweights[self.get_key(state)] = Flyweight(state)

    @staticmethod
    def get_key(state: Sequence[str]) -> str:
        return "_".join(sorted(state))

    def get_flyweight(self, shared_state: Sequence[str]) -> Flyweight:
        key = self.get_key(shared_state)

        if key not in self._flyweights:
            print("FlyweightFactory: Can't find a flyweight, creating new one.")
            self._flyweights[key] = Flyweight(shared_state)
            logger.debug("Created flyweight %s", key)
        else:
            print("FlyweightFactory: Reusing existing flyweight.")

        return self._flyweights[key]

    def keys(self) -> List[str]:
        return list(self._flyweights)

    def __len__(self) -> int:
        return len(self._flyweights)

    def list_flyweights(self) -> None:
        print(f"FlyweightFactory: I have {len(self._flyweights)} flyweights:")
        print("\n".join(self._flyweights), end="")


def add_car_to_police_database(
    factory: FlyweightFactory, plates: str, owner: str, brand: str, model: str, color: str
) -> Flyweight:
    print("\n\nClient: Adding a car to database.")
    flyweight = factory.get_flyweight([brand, model, color])
    # Extrinsic state is stored or computed by the client
    flyweight.operation([plates, owner])
    return flyweight


def demo() -> None:
    factory = FlyweightFactory(
        [
            ["Chevrolet", "Camaro2018", "pink"],
            ["Mercedes Benz", "C300", "black"],
            ["Mercedes Benz", "C500", "red"],
            ["BMW", "M5", "red"],
            ["BMW", "X6", "white"],
        ]
    )

    factory.list_flyweights()

    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "M5", "red")
    add_car_to_police_database(factory, "CL234IR", "James Doe", "BMW", "X1", "red")

    print("\n")
    factory.list_flyweights()
    print()
