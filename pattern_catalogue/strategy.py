"""Interchangeable sorting strategies behind one context."""

from abc import ABC, abstractmethod
from typing import List


class Strategy(ABC):
    """Operations common to all versions of the algorithm."""

    @abstractmethod
    def do_algorithm(self, data: List[str]) -> List[str]:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'do_algorithm'"
        )


class ConcreteStrategyA(Strategy):
    def do_algorithm(self, data: List[str]) -> List[str]:
        return sorted(data)


class ConcreteStrategyB(Strategy):
    def do_algorithm(self, data: List[str]) -> List[str]:
        return sorted(data, reverse=True)


class Context:
    """Works with any strategy through the Strategy interface."""

    def __init__(self, strategy: Strategy):
        self._strategy = strategy

    @property
    def strategy(self) -> Strategy:
        return self._strategy

    @strategy.setter
    def strategy(self, strategy: Strategy) -> None:
        self._strategy = strategy

    def do_some_business_logic(self) -> str:
        print("Context: Sorting data using the strategy (not sure how it'll do it)")
        result = ",".join(self._strategy.do_algorithm(["a", "b", "c", "d", "e"]))
        print(result)
        return result


def demo() -> None:
    context = Context(ConcreteStrategyA())
    print("Client: Strategy is set to normal sorting.")
    context.do_some_business_logic()
    print()

    print("Client: Strategy is set to reverse sorting.")
    context.strategy = ConcreteStrategyB()
    context.do_some_business_logic()
