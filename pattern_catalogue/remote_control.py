"""Remote controls bridged to the devices they drive."""

from abc import ABC, abstractmethod

MIN_VOLUME = 0
MAX_VOLUME = 100


class Device(ABC):
    def __init__(self):
        self._enabled = False
        self._volume = 30
        self.channel = 1

    @property
    def volume(self) -> int:
        return self._volume

    @volume.setter
    def volume(self, value: int) -> None:
        self._volume = max(MIN_VOLUME, min(MAX_VOLUME, value))

    def is_enabled(self) -> bool:
        return self._enabled

    def enable(self) -> None:
        self._enabled = True

    def disable(self) -> None:
        self._enabled = False

    def status(self) -> str:
        return (
            "------------------------------------\n"
            f"| I'm {self.kind}.\n"
            f"| I'm {'enabled' if self.is_enabled() else 'disabled'}\n"
            f"| Current volume is {self.volume}%\n"
            f"| Current channel is {self.channel}\n"
            "------------------------------------"
        )

    @property
    @abstractmethod
    def kind(self) -> str:
        raise NotImplementedError(
            f"{self.__class__.__name__} has not implemented method 'kind'"
        )

    def print_status(self) -> None:
        print(self.status())


class Radio(Device):
    @property
    def kind(self) -> str:
        return "radio"


class Tv(Device):
    @property
    def kind(self) -> str:
        return "a TV"


class BasicRemote:
    def __init__(self, device: Device):
        self.device = device

    def power(self) -> None:
        print("Remote: power toggle")
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_down(self) -> None:
        self.device.volume -= 10

    def volume_up(self) -> None:
        self.device.volume += 10

    def channel_down(self) -> None:
        self.device.channel -= 1

    def channel_up(self) -> None:
        self.device.channel += 1


class AdvancedRemote(BasicRemote):
    def mute(self) -> None:
        self.device.volume = MIN_VOLUME


def exercise_device(device: Device) -> None:
    print("Tests with basic remote.")
    basic_remote = BasicRemote(device)
    basic_remote.power()
    device.print_status()

    print("Tests with advanced remote.")
    advanced_remote = AdvancedRemote(device)
    advanced_remote.power()
    advanced_remote.mute()
    device.print_status()


def demo() -> None:
    exercise_device(Radio())
    exercise_device(Tv())
