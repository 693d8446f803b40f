"""
Bridge pattern: remotes and devices vary independently.

A remote (the abstraction) holds a device (the implementor) and expresses
its higher-level operations in terms of the device's primitives. Any remote
works with any device.
"""

from abc import ABC, abstractmethod

from pattern_catalog.registry import PatternCategory, demo


class Device(ABC):
    """Primitive operations every device supports."""

    label = "Device"
    default_volume = 0

    def __init__(self) -> None:
        self._volume = self.default_volume
        self._enabled = False

    @property
    def volume(self) -> int:
        return self._volume

    @property
    def enabled(self) -> bool:
        return self._enabled

    def turn_on(self) -> None:
        self._enabled = True
        print(f"{self.label}: Turning on, current volume: {self._volume}")

    def turn_off(self) -> None:
        self._enabled = False
        print(f"{self.label}: Turning off")

    def set_volume(self, volume: int) -> None:
        self._volume = volume
        print(f"{self.label}: Setting volume to {volume}")


class TV(Device):
    label = "TV"
    default_volume = 10


class Radio(Device):
    label = "Radio"
    default_volume = 5


class RemoteControl(ABC):
    def __init__(self, device: Device) -> None:
        self.device = device

    def toggle_power(self) -> None:
        print("Remote: Toggling power")
        if self.device.enabled:
            self.device.turn_off()
        else:
            self.device.turn_on()

    @abstractmethod
    def set_volume(self, volume: int) -> None:
        pass


class BasicRemote(RemoteControl):
    def set_volume(self, volume: int) -> None:
        print("BasicRemote: Setting volume")
        self.device.set_volume(volume)


class AdvancedRemote(RemoteControl):
    def set_volume(self, volume: int) -> None:
        print("AdvancedRemote: Setting volume with extra features")
        self.device.set_volume(volume)

    def mute(self) -> None:
        print("AdvancedRemote: Muting device")
        self.device.set_volume(0)


@demo(
    name="bridge",
    category=PatternCategory.STRUCTURAL,
    description="Basic and advanced remotes drive a TV and a radio.",
)
def main() -> None:
    """Drive a TV with a basic remote and a radio with an advanced one."""
    tv = TV()
    basic_remote = BasicRemote(tv)
    basic_remote.toggle_power()
    basic_remote.set_volume(15)

    print()

    radio = Radio()
    advanced_remote = AdvancedRemote(radio)
    advanced_remote.toggle_power()
    advanced_remote.set_volume(20)
    advanced_remote.mute()


if __name__ == "__main__":
    main()
