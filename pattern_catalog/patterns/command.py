"""
Command pattern: a smart-home remote with undo.

Requests to devices are wrapped in command objects. The remote (invoker)
only knows the command interface, keeps a history of what it executed and
can undo the most recent command.
"""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from pattern_catalog.registry import PatternCategory, demo


class Light:
    """Receiver: a light in one room."""

    def __init__(self, location: str) -> None:
        self.location = location
        self.is_on = False

    def on(self) -> None:
        self.is_on = True
        print(f"{self.location} light is ON")

    def off(self) -> None:
        self.is_on = False
        print(f"{self.location} light is OFF")


class Television:
    """Receiver: a television."""

    def __init__(self) -> None:
        self.is_on = False
        self.volume = 0

    def on(self) -> None:
        self.is_on = True
        print("Television is ON")

    def off(self) -> None:
        self.is_on = False
        print("Television is OFF")

    def set_volume(self, level: int) -> None:
        self.volume = level
        print(f"Television volume set to {level}")


class Command(ABC):
    """A request that can be executed and reverted."""

    @abstractmethod
    def execute(self) -> None:
        """Carry out the request."""

    @abstractmethod
    def undo(self) -> None:
        """Revert what ``execute`` did."""


class LightOnCommand(Command):
    def __init__(self, light: Light) -> None:
        self._light = light

    def execute(self) -> None:
        self._light.on()

    def undo(self) -> None:
        self._light.off()


class LightOffCommand(Command):
    def __init__(self, light: Light) -> None:
        self._light = light

    def execute(self) -> None:
        self._light.off()

    def undo(self) -> None:
        self._light.on()


class TelevisionOnCommand(Command):
    """Turns the television on at a comfortable volume."""

    DEFAULT_VOLUME = 15

    def __init__(self, tv: Television) -> None:
        self._tv = tv

    def execute(self) -> None:
        self._tv.on()
        self._tv.set_volume(self.DEFAULT_VOLUME)

    def undo(self) -> None:
        self._tv.off()


class MacroCommand(Command):
    """Several commands behaving as one.

    Children execute in order and are undone in reverse order.
    """

    def __init__(self, commands: Sequence[Command]) -> None:
        self._commands = list(commands)

    def execute(self) -> None:
        for command in self._commands:
            command.execute()

    def undo(self) -> None:
        for command in reversed(self._commands):
            command.undo()


class RemoteController:
    """Invoker: runs whatever command is loaded and remembers it."""

    def __init__(self) -> None:
        self._command: Optional[Command] = None
        self._history: List[Command] = []

    @property
    def history_size(self) -> int:
        """Number of commands that can still be undone."""
        return len(self._history)

    def set_command(self, command: Command) -> None:
        self._command = command

    def press_button(self) -> None:
        """Execute the loaded command; does nothing if none is loaded."""
        if self._command is not None:
            self._command.execute()
            self._history.append(self._command)

    def press_undo(self) -> bool:
        """Undo the most recent command.

        Returns:
            True if a command was undone, False if the history was empty
        """
        if not self._history:
            print("No commands to undo")
            return False

        last_command = self._history.pop()
        last_command.undo()
        print("Undo executed")
        return True


@demo(
    name="command",
    category=PatternCategory.BEHAVIORAL,
    description="A remote executes device commands and undoes them in reverse.",
)
def main() -> None:
    """Execute three commands, then undo one more time than possible."""
    living_room_light = Light("Living Room")
    kitchen_light = Light("Kitchen")
    tv = Television()

    remote = RemoteController()

    print("--- Executing commands ---")
    for command in (
        LightOnCommand(living_room_light),
        LightOnCommand(kitchen_light),
        TelevisionOnCommand(tv),
    ):
        remote.set_command(command)
        remote.press_button()

    print("\n--- Undoing commands ---")
    remote.press_undo()
    remote.press_undo()
    remote.press_undo()
    remote.press_undo()  # history is empty by now


if __name__ == "__main__":
    main()
