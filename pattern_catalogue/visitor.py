"""Visitors running algorithms over components without changing them."""

from abc import ABC, abstractmethod
from typing import List


class Component(ABC):
    @abstractmethod
    def accept(self, visitor: "Visitor") -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'accept'"
        )


class ConcreteComponentA(Component):
    def accept(self, visitor: "Visitor") -> str:
        # Calling the method matching this class tells the visitor what it got
        return visitor.visit_concrete_component_a(self)

    def exclusive_method_of_concrete_component_a(self) -> str:
        return "A"


class ConcreteComponentB(Component):
    def accept(self, visitor: "Visitor") -> str:
        return visitor.visit_concrete_component_b(self)

    def special_method_of_concrete_component_b(self) -> str:
        return "B"


class Visitor(ABC):
    """One visiting method per component class."""

    @abstractmethod
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method "
            "'visit_concrete_component_a'"
        )

    @abstractmethod
    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method "
            "'visit_concrete_component_b'"
        )


class ConcreteVisitor1(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        result = f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor1"
        print(result)
        return result

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        result = f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor1"
        print(result)
        return result


class ConcreteVisitor2(Visitor):
    def visit_concrete_component_a(self, element: ConcreteComponentA) -> str:
        result = f"{element.exclusive_method_of_concrete_component_a()} + ConcreteVisitor2"
        print(result)
        return result

    def visit_concrete_component_b(self, element: ConcreteComponentB) -> str:
        result = f"{element.special_method_of_concrete_component_b()} + ConcreteVisitor2"
        print(result)
        return result


def client_code(components: List[Component], visitor: Visitor) -> List[str]:
    return [component.accept(visitor) for component in components]


def demo() -> None:
    components = [ConcreteComponentA(), ConcreteComponentB()]

    print("The client code works with all visitors via the base Visitor interface:")
    client_code(components, ConcreteVisitor1())

    print("It allows the same client code to work with different types of visitors:")
    client_code(components, ConcreteVisitor2())
