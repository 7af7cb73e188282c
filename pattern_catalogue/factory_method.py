"""Creators deferring product instantiation to a factory method."""

from abc import ABC, abstractmethod


class Product(ABC):
    @abstractmethod
    def operation(self) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'operation'"
        )


class ConcreteProduct1(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct1}"


class ConcreteProduct2(Product):
    def operation(self) -> str:
        return "{Result of the ConcreteProduct2}"


class Creator(ABC):
    """
    Declares the factory method returning a Product.

    Despite the name, the creator's main job is business logic built on the
    products; subclasses change that logic by returning different products.
    """

    @abstractmethod
    def factory_method(self) -> Product:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'factory_method'"
        )

    def some_operation(self) -> str:
        product = self.factory_method()
        return f"Creator: The same creator's code has just worked with {product.operation()}"


class ConcreteCreator1(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct1()


class ConcreteCreator2(Creator):
    def factory_method(self) -> Product:
        return ConcreteProduct2()


def client_code(creator: Creator) -> None:
    print(
        "Client: I'm not aware of the creator's class, but it still works.\n"
        f"{creator.some_operation()}",
        end="",
    )


def demo() -> None:
    print("App: Launched with the ConcreteCreator1.")
    client_code(ConcreteCreator1())
    print("\n")

    print("App: Launched with the ConcreteCreator2.")
    client_code(ConcreteCreator2())
    print()
