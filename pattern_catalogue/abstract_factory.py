"""GUI widget families built through an abstract factory."""

from abc import ABC, abstractmethod


class Button(ABC):
    """Common interface for the buttons family."""

    @abstractmethod
    def draw(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'draw'"
        )


class MacOSButton(Button):
    def draw(self) -> None:
        print("MacOSButton has been drawn")


class WindowsButton(Button):
    def draw(self) -> None:
        print("WindowsButton has been drawn")


class Checkbox(ABC):
    """Second product family, with the same variants as buttons."""

    @abstractmethod
    def draw(self) -> None:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'draw'"
        )


class MacOSCheckbox(Checkbox):
    def draw(self) -> None:
        print("MacOSCheckbox has been drawn")


class WindowsCheckbox(Checkbox):
    def draw(self) -> None:
        print("WindowsCheckbox has been drawn")


class GUIFactory(ABC):
    @abstractmethod
    def create_button(self) -> Button:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'create_button'"
        )

    @abstractmethod
    def create_checkbox(self) -> Checkbox:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'create_checkbox'"
        )


class MacOSFactory(GUIFactory):
    def create_button(self) -> Button:
        return MacOSButton()

    def create_checkbox(self) -> Checkbox:
        return MacOSCheckbox()


class WindowsFactory(GUIFactory):
    def create_button(self) -> Button:
        return WindowsButton()

    def create_checkbox(self) -> Checkbox:
        return WindowsCheckbox()


class Application:
    """Works with factories and products only through their abstract interfaces."""

    def __init__(self, factory: GUIFactory):
        self.button = factory.create_button()
        self.checkbox = factory.create_checkbox()

    def draw(self) -> None:
        self.button.draw()
        self.checkbox.draw()


FACTORIES = {"MacOS": MacOSFactory, "Windows": WindowsFactory}


def factory_for(os_name: str) -> GUIFactory:
    """Pick the concrete factory matching an operating system name."""
    if os_name not in FACTORIES:
        raise ValueError(f"Unsupported operating system: {os_name}")
    return FACTORIES[os_name]()


def demo(current_os: str = "Windows") -> None:
    Application(factory_for(current_os)).draw()
