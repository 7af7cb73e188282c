"""Originator whose state can be snapshotted and restored."""

import random
import string
import uuid
from typing import Optional

from .exceptions.catalogue_exception import InvalidMemento
from .models.memento import ConcreteMemento, Memento


class Originator:
    """Holds some important state that may change over time."""

    def __init__(
        self,
        state: str,
        state_length: int = 30,
        rng: Optional[random.Random] = None,
    ):
        self._state = state
        self.state_length = state_length
        self.rng = rng or random.Random()
        self.token = uuid.uuid4().hex
        print(f"Originator: My initial state is: {self._state}")

    @property
    def state(self) -> str:
        return self._state

    def do_something(self) -> None:
        """Business logic that replaces the state. Back it up first."""
        print("Originator: I'm doing something important.")
        self._state = self._generate_random_string(self.state_length)
        print(f"Originator: and my state has changed to: {self._state}")

    def _generate_random_string(self, length: int = 10) -> str:
        return "".join(self.rng.choice(string.ascii_letters) for _ in range(length))

    def save(self) -> Memento:
        """Save the current state inside a memento."""
        return ConcreteMemento(_state=self._state, owner=self.token)

    def restore(self, memento: Memento) -> None:
        """Restore the state from a memento produced by this originator."""
        if not isinstance(memento, ConcreteMemento):
            raise InvalidMemento(
                f"Cannot restore from {type(memento).__name__}, expected ConcreteMemento"
            )
        if not isinstance(memento._state, str):
            raise InvalidMemento(f"Memento from {memento.owner} holds a malformed state")
        if memento.owner != self.token:
            raise InvalidMemento(f"Memento {memento.name} belongs to another originator")

        self._state = memento._state
        print(f"Originator: My state has changed to: {self._state}")
