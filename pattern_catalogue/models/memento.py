"""Memento data models for snapshot and undo."""

import time
from abc import ABC, abstractmethod
from dataclasses import dataclass, field

LABEL_PREFIX_LENGTH = 9
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class Memento(ABC):
    """
    Metadata view of a snapshot.

    Caretakers only see the name and the date, never the originator's state.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'name'"
        )

    @property
    @abstractmethod
    def date(self) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'date'"
        )


@dataclass(frozen=True)
class ConcreteMemento(Memento):
    """
    Immutable snapshot of an originator's state.

    The state is private to the originator that captured it.
    """

    _state: str = field(repr=False)
    owner: str
    timestamp: float = field(default_factory=time.time)

    @property
    def name(self) -> str:
        return f"{self.date} / ({str(self._state)[:LABEL_PREFIX_LENGTH]}...)"

    @property
    def date(self) -> str:
        return time.strftime(DATE_FORMAT, time.localtime(self.timestamp))
