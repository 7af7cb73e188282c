"""Main entry point for the design pattern catalogue."""

from typing import Callable, List, Optional, Tuple

from pattern_catalogue import (
    abstract_factory,
    adapter,
    bridge,
    builder,
    caretaker,
    chain_of_responsibility,
    command,
    composite,
    facade,
    factory_method,
    flyweight,
    iterator,
    mediator,
    observer,
    pizza_builder,
    prototype,
    proxy,
    remote_control,
    singleton,
    speed_adapter,
    state,
    strategy,
    template_method,
    visitor,
)
from pattern_catalogue.config import CatalogueConfig, configure_logging


def demonstrations(config: CatalogueConfig) -> List[Tuple[str, Callable[[], None]]]:
    """Every demonstration in catalogue order, bound to the run's config."""
    return [
        ("Abstract Factory (GUI widgets)", abstract_factory.demo),
        ("Adapter (conceptual)", adapter.demo),
        ("Adapter (speed limits)", speed_adapter.demo),
        ("Bridge (conceptual)", bridge.demo),
        ("Bridge (remote controls)", remote_control.demo),
        ("Builder (conceptual)", builder.demo),
        ("Builder (pizza)", pizza_builder.demo),
        ("Chain of Responsibility", chain_of_responsibility.demo),
        ("Command", command.demo),
        ("Composite", composite.demo),
        ("Facade", facade.demo),
        ("Factory Method", factory_method.demo),
        ("Flyweight", flyweight.demo),
        ("Iterator", iterator.demo),
        ("Mediator", mediator.demo),
        ("Memento", lambda: caretaker.demo(config)),
        ("Observer", lambda: observer.demo(config.random())),
        ("Prototype", prototype.demo),
        ("Proxy", proxy.demo),
        ("Singleton", singleton.demo),
        ("State", state.demo),
        ("Strategy", strategy.demo),
        ("Template Method", template_method.demo),
        ("Visitor", visitor.demo),
    ]


def main(config: Optional[CatalogueConfig] = None) -> None:
    """Run every pattern demonstration in turn."""
    config = config or CatalogueConfig()
    configure_logging(config)

    print("=== DESIGN PATTERN CATALOGUE ===\n")

    # Errors propagate and end the run
    for number, (title, demo) in enumerate(demonstrations(config), start=1):
        print(f"{number}. {title}")
        print("-" * (len(title) + len(str(number)) + 2))
        demo()
        print()

    print("=== CATALOGUE DEMONSTRATION COMPLETED ===")


if __name__ == "__main__":
    main()
