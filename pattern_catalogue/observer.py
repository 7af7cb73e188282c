"""Subscribers notified about changes in a subject's state."""

import random
from abc import ABC, abstractmethod
from typing import List, Optional


class Subject(ABC):
    """Methods for managing subscribers."""

    @abstractmethod
    def attach(self, observer: "Observer") -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'attach'"
        )

    @abstractmethod
    def detach(self, observer: "Observer") -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'detach'"
        )

    @abstractmethod
    def notify(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'notify'"
        )


class ConcreteSubject(Subject):
    """Owns some important state and notifies observers when it changes."""

    def __init__(self, rng: Optional[random.Random] = None):
        self.state: Optional[int] = None
        self._observers: List[Observer] = []
        self.rng = rng or random.Random()

    @property
    def observers(self) -> List["Observer"]:
        return list(self._observers)

    def attach(self, observer: "Observer") -> None:
        print("Subject: Attached an observer.")
        self._observers.append(observer)

    def detach(self, observer: "Observer") -> None:
        self._observers.remove(observer)

    def notify(self) -> None:
        print("Subject: Notifying observers...")
        for observer in list(self._observers):
            observer.update(self)

    def some_business_logic(self) -> None:
        print("\nSubject: I'm doing something important.")
        self.state = self.rng.randint(0, 10)

        print(f"Subject: My state has just changed to: {self.state}")
        self.notify()


class Observer(ABC):
    @abstractmethod
    def update(self, subject: Subject) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'update'"
        )


class ConcreteObserverA(Observer):
    def update(self, subject: Subject) -> None:
        if subject.state < 3:
            print("ConcreteObserverA: Reacted to the event")


class ConcreteObserverB(Observer):
    def update(self, subject: Subject) -> None:
        if subject.state == 0 or subject.state >= 2:
            print("ConcreteObserverB: Reacted to the event")


def demo(rng: Optional[random.Random] = None) -> None:
    subject = ConcreteSubject(rng)

    observer_a = ConcreteObserverA()
    subject.attach(observer_a)

    observer_b = ConcreteObserverB()
    subject.attach(observer_b)

    subject.some_business_logic()
    subject.some_business_logic()

    subject.detach(observer_a)

    subject.some_business_logic()
