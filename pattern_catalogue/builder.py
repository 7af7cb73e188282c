"""Step-by-step construction of products through builders and a director."""

from abc import ABC, abstractmethod
from typing import List, Optional


class Builder(ABC):
    """Methods for creating the different parts of the product objects."""

    @abstractmethod
    def produce_part_a(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'produce_part_a'"
        )

    @abstractmethod
    def produce_part_b(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'produce_part_b'"
        )

    @abstractmethod
    def produce_part_c(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'produce_part_c'"
        )


class Product1:
    def __init__(self):
        self.parts: List[str] = []

    def add(self, part: str) -> None:
        self.parts.append(part)

    def list_parts(self) -> None:
        print(f"Product parts: {', '.join(self.parts)}", end="")


class ConcreteBuilder1(Builder):
    """A fresh builder holds a blank product which further steps assemble."""

    def __init__(self):
        self.reset()

    def reset(self) -> None:
        self._product = Product1()

    @property
    def product(self) -> Product1:
        """Hand over the assembled product and start a new one."""
        product = self._product
        self.reset()
        return product

    def produce_part_a(self) -> None:
        self._product.add("PartA1")

    def produce_part_b(self) -> None:
        self._product.add("PartB1")

    def produce_part_c(self) -> None:
        self._product.add("PartC1")


class Director:
    """Executes the building steps in a particular sequence."""

    def __init__(self):
        self._builder: Optional[Builder] = None

    @property
    def builder(self) -> Builder:
        if self._builder is None:
            raise ValueError("Director has no builder assigned")
        return self._builder

    @builder.setter
    def builder(self, builder: Builder) -> None:
        self._builder = builder

    def build_minimal_viable_product(self) -> None:
        self.builder.produce_part_a()

    def build_full_featured_product(self) -> None:
        self.builder.produce_part_a()
        self.builder.produce_part_b()
        self.builder.produce_part_c()


def demo() -> None:
    director = Director()
    builder = ConcreteBuilder1()
    director.builder = builder

    print("Standard basic product: ")
    director.build_minimal_viable_product()
    builder.product.list_parts()

    print("\n")

    print("Standard full featured product: ")
    director.build_full_featured_product()
    builder.product.list_parts()

    print("\n")

    # The builder works without a director too
    print("Custom product: ")
    builder.produce_part_a()
    builder.produce_part_b()
    builder.product.list_parts()
    print()
