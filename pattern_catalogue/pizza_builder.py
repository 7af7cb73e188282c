"""Fluent pizza builders directed by a chef."""

from typing import List, Optional


class Pizza:
    def __init__(self, crust: str):
        self.crust = crust
        self.toppings: List[str] = []

    def present(self) -> None:
        print("This pizza is a")
        print(f"{self.crust} pizza")
        print("with:")
        print("\n".join(self.toppings))
        print("-*-*--*--*--*--*--*-")


class PizzaBuilder:
    """Adds toppings; every step returns the builder so calls can be chained."""

    crust = ""

    def __init__(self):
        self.pizza = Pizza(self.crust)

    def add_tomato_sauce(self) -> "PizzaBuilder":
        self.pizza.toppings.append("Tomato sauce")
        return self

    def add_cheese(self) -> "PizzaBuilder":
        self.pizza.toppings.append("Cheese")
        return self

    def add_basil(self) -> "PizzaBuilder":
        self.pizza.toppings.append("Basil")
        return self

    def add_pepperoni(self) -> "PizzaBuilder":
        self.pizza.toppings.append("Pepperoni")
        return self


class ThinCrustPizzaBuilder(PizzaBuilder):
    crust = "Thin crust"


class StuffedCrustPizzaBuilder(PizzaBuilder):
    crust = "Stuffed crust"


class Chef:
    def __init__(self, builder: Optional[PizzaBuilder] = None):
        self.builder = builder

    def make_margherita_pizza(self) -> Pizza:
        return self.builder.add_tomato_sauce().add_cheese().add_basil().pizza

    def make_pepperoni_pizza(self) -> Pizza:
        return self.builder.add_tomato_sauce().add_cheese().add_pepperoni().pizza


def demo() -> None:
    chef = Chef()

    chef.builder = ThinCrustPizzaBuilder()
    chef.make_margherita_pizza().present()

    chef.builder = StuffedCrustPizzaBuilder()
    chef.make_pepperoni_pizza().present()
