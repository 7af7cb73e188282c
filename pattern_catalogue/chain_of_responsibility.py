"""Requests passed along a chain of handlers."""

from abc import ABC, abstractmethod
from typing import Optional


class Handler(ABC):
    """Builds the chain of handlers and executes requests."""

    @abstractmethod
    def set_next(self, handler: "Handler") -> "Handler":
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'set_next'"
        )

    @abstractmethod
    def handle(self, request: str) -> Optional[str]:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'handle'"
        )


class AbstractHandler(Handler):
    """Default chaining behaviour shared by the concrete handlers."""

    _next_handler: Optional[Handler] = None

    def set_next(self, handler: Handler) -> Handler:
        self._next_handler = handler
        # Returning the handler allows monkey.set_next(squirrel).set_next(dog)
        return handler

    def handle(self, request: str) -> Optional[str]:
        if self._next_handler:
            return self._next_handler.handle(request)
        return None


class MonkeyHandler(AbstractHandler):
    def handle(self, request: str) -> Optional[str]:
        if request == "Banana":
            return f"Monkey: I'll eat the {request}"
        return super().handle(request)


class SquirrelHandler(AbstractHandler):
    def handle(self, request: str) -> Optional[str]:
        if request == "Nut":
            return f"Squirrel: I'll eat the {request}"
        return super().handle(request)


class DogHandler(AbstractHandler):
    def handle(self, request: str) -> Optional[str]:
        if request == "MeatBall":
            return f"Dog: I'll eat the {request}"
        return super().handle(request)


def client_code(handler: Handler) -> None:
    for food in ["Nut", "Banana", "Cup of coffee"]:
        print(f"\nClient: Who wants a {food}?")
        result = handler.handle(food)
        if result:
            print(f"  {result}", end="")
        else:
            print(f"  {food} was left untouched.", end="")


def demo() -> None:
    monkey = MonkeyHandler()
    squirrel = SquirrelHandler()
    dog = DogHandler()

    monkey.set_next(squirrel).set_next(dog)

    # Requests can enter the chain at any handler
    print("Chain: Monkey > Squirrel > Dog")
    client_code(monkey)
    print("\n")

    print("Subchain: Squirrel > Dog")
    client_code(squirrel)
    print()
