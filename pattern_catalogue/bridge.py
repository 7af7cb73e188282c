"""Bridge separating an abstraction hierarchy from its implementations."""

from abc import ABC, abstractmethod


class Implementation(ABC):
    """
    Interface for all implementation classes.

    Usually provides primitive operations only, while the Abstraction defines
    the higher-level operations built on them.
    """

    @abstractmethod
    def operation_implementation(self) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method "
            "'operation_implementation'"
        )


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A."


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B."


class Abstraction:
    """Control part of the two hierarchies, delegating real work to an implementation."""

    def __init__(self, implementation: Implementation):
        self.implementation = implementation

    def operation(self) -> str:
        return (
            "Abstraction: Base operation with:\n"
            f"{self.implementation.operation_implementation()}"
        )


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return (
            "ExtendedAbstraction: Extended operation with:\n"
            f"{self.implementation.operation_implementation()}"
        )


def client_code(abstraction: Abstraction) -> None:
    print(abstraction.operation(), end="")


def demo() -> None:
    client_code(Abstraction(ConcreteImplementationA()))
    print("\n")
    client_code(ExtendedAbstraction(ConcreteImplementationB()))
    print()
