"""
Facade pattern: one call to start a computer.
"""

from typing import Optional

from pattern_catalog.registry import PatternCategory, demo


class CPU:
    def process_data(self) -> None:
        print("CPU is processing data")


class Memory:
    def load(self) -> None:
        print("Memory is loading data")


class HardDrive:
    def read_data(self) -> None:
        print("HardDrive is reading data")


class ComputerFacade:
    """Hides the start-up sequence of the subsystems behind ``start``.

    Args:
        cpu: CPU to use (defaults to a new one)
        memory: Memory to use (defaults to a new one)
        hard_drive: Hard drive to use (defaults to a new one)
    """

    def __init__(
        self,
        cpu: Optional[CPU] = None,
        memory: Optional[Memory] = None,
        hard_drive: Optional[HardDrive] = None,
    ) -> None:
        self.cpu = cpu if cpu is not None else CPU()
        self.memory = memory if memory is not None else Memory()
        self.hard_drive = hard_drive if hard_drive is not None else HardDrive()

    def start(self) -> None:
        self.cpu.process_data()
        self.memory.load()
        self.hard_drive.read_data()
        print("Computer is starting...")


@demo(
    name="facade",
    category=PatternCategory.STRUCTURAL,
    description="A facade starts the CPU, memory and hard drive in order.",
)
def main() -> None:
    ComputerFacade().start()


if __name__ == "__main__":
    main()
