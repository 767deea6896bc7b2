"""
Bridge.

Bridge is a structural design pattern that divides business logic or a huge
class into separate class hierarchies that can be developed independently.
One hierarchy (the Abstraction) gets a reference to an object of the second
hierarchy (the Implementation) and delegates most of its calls to it.

Use the Bridge to divide a monolithic class that has several variants of
some functionality, to extend a class in several orthogonal dimensions, or
to switch implementations at runtime.

Identification: a clear distinction between some controlling entity and
several different platforms that it relies on.

Complexity: 3/3
Popularity: 1/3
"""
from abc import ABC, abstractmethod

from gof_patterns.domain.catalog import PatternCategory, PatternInfo
from gof_patterns.infrastructure.registry import demo, register_pattern

register_pattern(PatternInfo(
    name="bridge",
    title="Bridge",
    category=PatternCategory.STRUCTURAL,
    intent="Split a large class into abstraction and implementation hierarchies.",
    applicability=[
        "Divide a monolithic class with several variants of some functionality.",
        "Extend a class in several orthogonal dimensions.",
        "Switch implementations at runtime.",
    ],
    identification="A controlling entity distinct from the platforms it relies on.",
    complexity=3,
    popularity=1,
    reference_url="https://refactoring.guru/design-patterns/bridge",
))


class Implementation(ABC):
    """
    The Implementation interface doesn't have to match the Abstraction's.
    Typically it provides primitive operations and the Abstraction builds
    higher-level operations on top of them.
    """

    @abstractmethod
    def operation_implementation(self) -> str:
        pass


class ConcreteImplementationA(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationA: Here's the result on the platform A."


class ConcreteImplementationB(Implementation):
    def operation_implementation(self) -> str:
        return "ConcreteImplementationB: Here's the result on the platform B."


class Abstraction:
    """
    The Abstraction defines the interface for the "control" part of the two
    hierarchies and delegates the real work to its implementation.
    """

    def __init__(self, implementation: Implementation):
        self.implementation = implementation

    def operation(self) -> str:
        return f"Abstraction: Base operation with:\n{self.implementation.operation_implementation()}"


class ExtendedAbstraction(Abstraction):
    def operation(self) -> str:
        return f"ExtendedAbstraction: Extended operation with:\n{self.implementation.operation_implementation()}"


def client_code(abstraction: Abstraction) -> None:
    print(abstraction.operation())


@demo("bridge", "canonical", "Two abstractions over two platforms")
def run_canonical() -> None:
    client_code(Abstraction(ConcreteImplementationA()))
    print("")
    client_code(ExtendedAbstraction(ConcreteImplementationB()))


MIN_VOLUME = 0
MAX_VOLUME = 100
MIN_CHANNEL = 1


class Device(ABC):
    """The implementation side: all devices share this interface."""

    @abstractmethod
    def is_enabled(self) -> bool:
        pass

    @abstractmethod
    def enable(self) -> None:
        pass

    @abstractmethod
    def disable(self) -> None:
        pass

    @abstractmethod
    def get_volume(self) -> int:
        pass

    @abstractmethod
    def set_volume(self, percent: int) -> None:
        pass

    @abstractmethod
    def get_channel(self) -> int:
        pass

    @abstractmethod
    def set_channel(self, channel: int) -> None:
        pass

    @abstractmethod
    def status(self) -> str:
        pass


class _StatefulDevice(Device):
    name = "Device"

    def __init__(self, volume: int = 30, channel: int = 1):
        self._on = False
        self._volume = volume
        self._channel = channel

    def is_enabled(self) -> bool:
        return self._on

    def enable(self) -> None:
        self._on = True

    def disable(self) -> None:
        self._on = False

    def get_volume(self) -> int:
        return self._volume

    def set_volume(self, percent: int) -> None:
        self._volume = max(MIN_VOLUME, min(MAX_VOLUME, percent))

    def get_channel(self) -> int:
        return self._channel

    def set_channel(self, channel: int) -> None:
        self._channel = max(MIN_CHANNEL, channel)

    def status(self) -> str:
        power = "enabled" if self._on else "disabled"
        return f"{self.name}: {power}, volume {self._volume}%, channel {self._channel}"


class Tv(_StatefulDevice):
    name = "TV"


class Radio(_StatefulDevice):
    name = "Radio"

    def __init__(self, volume: int = 20, channel: int = 1):
        super().__init__(volume, channel)


class RemoteControl:
    """
    The abstraction side: a remote keeps a reference to a device and
    delegates all work to it.
    """

    def __init__(self, device: Device):
        self.device = device

    def toggle_power(self) -> None:
        if self.device.is_enabled():
            self.device.disable()
        else:
            self.device.enable()

    def volume_down(self) -> None:
        self.device.set_volume(self.device.get_volume() - 10)

    def volume_up(self) -> None:
        self.device.set_volume(self.device.get_volume() + 10)

    def channel_down(self) -> None:
        self.device.set_channel(self.device.get_channel() - 1)

    def channel_up(self) -> None:
        self.device.set_channel(self.device.get_channel() + 1)


class AdvancedRemoteControl(RemoteControl):
    """Extends the abstraction without touching the devices."""

    def mute(self) -> None:
        self.device.set_volume(MIN_VOLUME)


def remote_client_code() -> None:
    tv = Tv()
    radio = Radio()

    tv_remote = RemoteControl(tv)
    radio_remote = AdvancedRemoteControl(radio)

    tv_remote.toggle_power()
    radio_remote.toggle_power()

    tv_remote.channel_up()
    radio_remote.channel_up()

    tv_remote.volume_up()
    radio_remote.volume_up()
    print(tv.status())
    print(radio.status())

    radio_remote.mute()
    tv_remote.toggle_power()
    print(tv.status())
    print(radio.status())


@demo("bridge", "remote", "Remote controls over a TV and a radio")
def run_remote() -> None:
    remote_client_code()
