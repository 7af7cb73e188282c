"""Tree structures of leaves and composites behind one component interface."""

from abc import ABC, abstractmethod
from typing import List, Optional


class Component(ABC):
    """Common operations for both simple and complex objects of a composition."""

    _parent: Optional["Component"] = None

    @property
    def parent(self) -> Optional["Component"]:
        return self._parent

    @parent.setter
    def parent(self, parent: Optional["Component"]) -> None:
        self._parent = parent

    # Child management is declared here; leaves refuse it.
    def add(self, component: "Component") -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'add'"
        )

    def remove(self, component: "Component") -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'remove'"
        )

    def is_composite(self) -> bool:
        return False

    @abstractmethod
    def operation(self) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'operation'"
        )


class Leaf(Component):
    """End object of a composition; does the actual work."""

    def operation(self) -> str:
        return "Leaf"


class Composite(Component):
    """Delegates to its children and sums up the results."""

    def __init__(self):
        self._children: List[Component] = []

    @property
    def children(self) -> List[Component]:
        return list(self._children)

    def add(self, component: Component) -> None:
        self._children.append(component)
        component.parent = self

    def remove(self, component: Component) -> None:
        self._children.remove(component)
        component.parent = None

    def is_composite(self) -> bool:
        return True

    def operation(self) -> str:
        results = [child.operation() for child in self._children]
        return f"Branch({'+'.join(results)})"


def client_code(component: Component) -> None:
    print(f"RESULT: {component.operation()}", end="")


def client_code2(component1: Component, component2: Component) -> None:
    """Manages the tree without checking concrete component classes."""
    if component1.is_composite():
        component1.add(component2)

    print(f"RESULT: {component1.operation()}", end="")


def demo() -> None:
    simple = Leaf()
    print("Client: I've got a simple component:")
    client_code(simple)
    print("\n")

    tree = Composite()

    branch1 = Composite()
    branch1.add(Leaf())
    branch1.add(Leaf())

    branch2 = Composite()
    branch2.add(Leaf())

    tree.add(branch1)
    tree.add(branch2)

    print("Client: Now I've got a composite tree:")
    client_code(tree)
    print("\n")

    print("Client: I don't need to check the components classes even when managing the tree:")
    client_code2(tree, simple)
    print()
