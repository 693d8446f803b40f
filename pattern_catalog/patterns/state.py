"""
State pattern: a vending machine.

The machine delegates every operation to the object for its current state.
State objects are stateless and hold no reference to the machine: the
machine owns one instance of each, keyed by ``MachineState``, and passes
itself into every call.

Transitions::

    NO_COIN --insert_coin--> HAS_COIN --select_product--> DISPENSING
    HAS_COIN --eject_coin--> NO_COIN
    DISPENSING --dispense--> NO_COIN       (stock left)
    DISPENSING --dispense--> OUT_OF_STOCK  (last product, terminal)
"""

# pylint: disable=unused-argument

from abc import ABC, abstractmethod
from enum import Enum
from typing import Dict

from pattern_catalog.observability.logging import get_logger
from pattern_catalog.registry import PatternCategory, demo

logger = get_logger("patterns.state")


class MachineState(Enum):
    NO_COIN = "no_coin"
    HAS_COIN = "has_coin"
    DISPENSING = "dispensing"
    OUT_OF_STOCK = "out_of_stock"


class VendingMachineState(ABC):
    """Behavior of the machine while it is in one state."""

    @abstractmethod
    def insert_coin(self, machine: "VendingMachine") -> None:
        pass

    @abstractmethod
    def eject_coin(self, machine: "VendingMachine") -> None:
        pass

    @abstractmethod
    def select_product(self, machine: "VendingMachine") -> None:
        pass

    @abstractmethod
    def dispense(self, machine: "VendingMachine") -> None:
        pass


class NoCoinState(VendingMachineState):
    def insert_coin(self, machine: "VendingMachine") -> None:
        print("Coin inserted")
        machine.set_state(MachineState.HAS_COIN)

    def eject_coin(self, machine: "VendingMachine") -> None:
        print("No coin to eject")

    def select_product(self, machine: "VendingMachine") -> None:
        print("Please insert coin first")

    def dispense(self, machine: "VendingMachine") -> None:
        print("Please insert coin first")


class HasCoinState(VendingMachineState):
    def insert_coin(self, machine: "VendingMachine") -> None:
        print("Coin already inserted")

    def eject_coin(self, machine: "VendingMachine") -> None:
        print("Coin ejected")
        machine.set_state(MachineState.NO_COIN)

    def select_product(self, machine: "VendingMachine") -> None:
        print("Product selected")
        machine.set_state(MachineState.DISPENSING)

    def dispense(self, machine: "VendingMachine") -> None:
        print("Please select product first")


class DispensingState(VendingMachineState):
    def insert_coin(self, machine: "VendingMachine") -> None:
        print("Please wait, dispensing product")

    def eject_coin(self, machine: "VendingMachine") -> None:
        print("Cannot eject coin, already dispensing")

    def select_product(self, machine: "VendingMachine") -> None:
        print("Product already selected")

    def dispense(self, machine: "VendingMachine") -> None:
        if machine.product_count <= 0:
            return

        print("Dispensing product...")
        machine.release_product()

        if machine.product_count > 0:
            machine.set_state(MachineState.NO_COIN)
        else:
            print("Out of products!")
            machine.set_state(MachineState.OUT_OF_STOCK)


class OutOfStockState(VendingMachineState):
    """Terminal state: every request is turned down."""

    def insert_coin(self, machine: "VendingMachine") -> None:
        print("Machine is out of stock. Coin ejected.")

    def eject_coin(self, machine: "VendingMachine") -> None:
        print("No coin to eject")

    def select_product(self, machine: "VendingMachine") -> None:
        print("Machine is out of stock")

    def dispense(self, machine: "VendingMachine") -> None:
        print("Machine is out of stock")


class VendingMachine:
    """Context: a vending machine stocked with identical products."""

    def __init__(self, product_count: int) -> None:
        """Stock the machine.

        Args:
            product_count: Number of products loaded

        Raises:
            ValueError: If ``product_count`` is negative
        """
        if product_count < 0:
            raise ValueError(f"product_count must be >= 0, got {product_count}")

        self._states: Dict[MachineState, VendingMachineState] = {
            MachineState.NO_COIN: NoCoinState(),
            MachineState.HAS_COIN: HasCoinState(),
            MachineState.DISPENSING: DispensingState(),
            MachineState.OUT_OF_STOCK: OutOfStockState(),
        }
        self._product_count = product_count
        self._state = (
            MachineState.NO_COIN if product_count > 0 else MachineState.OUT_OF_STOCK
        )

    @property
    def state(self) -> MachineState:
        return self._state

    @property
    def product_count(self) -> int:
        return self._product_count

    def _current(self) -> VendingMachineState:
        return self._states[self._state]

    def insert_coin(self) -> None:
        self._current().insert_coin(self)

    def eject_coin(self) -> None:
        self._current().eject_coin(self)

    def select_product(self) -> None:
        """Select a product; a successful selection dispenses right away."""
        self._current().select_product(self)
        self._current().dispense(self)

    def set_state(self, state: MachineState) -> None:
        logger.debug(f"{self._state.value} -> {state.value}")
        self._state = state

    def release_product(self) -> None:
        if self._product_count > 0:
            self._product_count -= 1
            print(f"Product released. Products remaining: {self._product_count}")


@demo(
    name="state",
    category=PatternCategory.BEHAVIORAL,
    description="A vending machine changes behavior with its current state.",
)
def main(product_count: int = 3) -> None:
    """Buy products until the machine runs out, with a few invalid requests."""
    print(f"=== Vending Machine with {product_count} products ===\n")
    machine = VendingMachine(product_count)

    print("--- Purchase 1 ---")
    machine.insert_coin()
    machine.select_product()

    print("\n--- Purchase 2 ---")
    machine.insert_coin()
    machine.select_product()

    print("\n--- Attempt without coin ---")
    machine.select_product()

    print("\n--- Insert and eject coin ---")
    machine.insert_coin()
    machine.eject_coin()

    print("\n--- Purchase 3 (last product) ---")
    machine.insert_coin()
    machine.select_product()

    print("\n--- Attempt when out of stock ---")
    machine.insert_coin()
    machine.select_product()


if __name__ == "__main__":
    main()
