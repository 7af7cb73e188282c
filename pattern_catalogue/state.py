"""A context whose behaviour changes with its current state object."""

from abc import ABC, abstractmethod
from typing import Optional


class Context:
    """Delegates part of its behaviour to the current State."""

    _state: Optional["State"] = None

    def __init__(self, state: "State"):
        self.transition_to(state)

    @property
    def state(self) -> Optional["State"]:
        return self._state

    def transition_to(self, state: "State") -> None:
        print(f"Context: Transition to {type(state).__name__}")
        self._state = state
        self._state.context = self

    def request1(self) -> None:
        self._state.handle1()

    def request2(self) -> None:
        self._state.handle2()


class State(ABC):
    """
    Behaviour associated with one state of the Context.

    Keeps a back reference to the Context so a state can move it elsewhere.
    """

    _context: Optional[Context] = None

    @property
    def context(self) -> Optional[Context]:
        return self._context

    @context.setter
    def context(self, context: Context) -> None:
        self._context = context

    @abstractmethod
    def handle1(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'handle1'"
        )

    @abstractmethod
    def handle2(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'handle2'"
        )


class ConcreteStateA(State):
    def handle1(self) -> None:
        print("ConcreteStateA handles request1.")
        print("ConcreteStateA wants to change the state of the context.")
        self.context.transition_to(ConcreteStateB())

    def handle2(self) -> None:
        print("ConcreteStateA handles request2.")


class ConcreteStateB(State):
    def handle1(self) -> None:
        print("ConcreteStateB handles request1.")

    def handle2(self) -> None:
        print("ConcreteStateB handles request2.")
        print("ConcreteStateB wants to change the state of the context.")
        self.context.transition_to(ConcreteStateA())


def demo() -> None:
    context = Context(ConcreteStateA())
    context.request1()
    context.request2()
