"""Caretaker keeping the undo history of an originator."""

import logging
from typing import Iterator, List, Optional

from .config import CatalogueConfig
from .exceptions.catalogue_exception import InvalidMemento
from .models.memento import Memento
from .originator import Originator

logger = logging.getLogger(__name__)


class HistoryView:
    """Read-only, restartable view of memento labels, oldest first."""

    def __init__(self, mementos: List[Memento]):
        self._mementos = mementos

    def __iter__(self) -> Iterator[str]:
        return (memento.name for memento in list(self._mementos))

    def __len__(self) -> int:
        return len(self._mementos)


class Caretaker:
    """
    Manages the memento history of one originator.

    Works with mementos only through the base Memento interface, so it never
    sees the originator's state.
    """

    def __init__(self, originator: Originator, max_history: Optional[int] = None):
        self._mementos: List[Memento] = []
        self._originator = originator
        self.max_history = max_history

    def backup(self) -> Memento:
        """Push a snapshot of the originator's current state."""
        print("\nCaretaker: Saving Originator's state...")
        memento = self._originator.save()
        self._mementos.append(memento)

        # Drop the oldest snapshots beyond the limit
        if self.max_history is not None and len(self._mementos) > self.max_history:
            self._mementos.pop(0)

        return memento

    def undo(self) -> bool:
        """
        Restore the most recent snapshot.

        Snapshots the originator refuses are skipped in favour of the next
        older one. Returns False when the history is empty.
        """
        while self._mementos:
            memento = self._mementos.pop()
            print(f"Caretaker: Restoring state to: {memento.name}")
            try:
                self._originator.restore(memento)
                return True
            except InvalidMemento as e:
                if not self._mementos:
                    raise
                logger.warning("Skipping unusable memento %s: %s", memento.name, e)

        return False

    def show_history(self) -> HistoryView:
        """Labels of the stored mementos in save order."""
        return HistoryView(self._mementos)

    def print_history(self) -> None:
        print("Caretaker: Here's the list of mementos:")
        for name in self.show_history():
            print(name)

    def history_count(self) -> int:
        return len(self._mementos)

    def has_history(self) -> bool:
        return len(self._mementos) > 0


def demo(config: Optional[CatalogueConfig] = None) -> None:
    config = config or CatalogueConfig()
    originator = Originator(
        config.initial_state, state_length=config.state_length, rng=config.random()
    )
    caretaker = Caretaker(originator, max_history=config.max_history)

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    caretaker.backup()
    originator.do_something()

    print()
    caretaker.print_history()

    print("\nClient: Now, let's rollback!\n")
    caretaker.undo()

    print("\nClient: Once more!\n")
    caretaker.undo()
