"""
Visitor pattern over a closed set of computer parts.

The part kinds form a fixed union of plain dataclasses. Instead of an
``accept``/``visit_*`` double dispatch, every operation is a single
function that switches on the part type. Adding an operation touches one
function; adding a part kind touches all of them.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Union

from pattern_catalog.registry import PatternCategory, demo


@dataclass
class Keyboard:
    price: float


@dataclass
class Monitor:
    price: float
    screen_size: int


@dataclass
class Mouse:
    price: float


def _standard_parts() -> List["ComputerPart"]:
    return [Keyboard(50.0), Monitor(300.0, 24), Mouse(25.0)]


@dataclass
class Computer:
    """Composite part; visited after all of its children."""

    parts: List["ComputerPart"] = field(default_factory=_standard_parts)


ComputerPart = Union[Keyboard, Monitor, Mouse, Computer]


def walk(part: ComputerPart) -> Iterator[ComputerPart]:
    """Yield ``part`` and everything inside it, children first."""
    if isinstance(part, Computer):
        for child in part.parts:
            yield from walk(child)
    yield part


def _unsupported(part: object) -> TypeError:
    return TypeError(f"Unsupported computer part: {type(part).__name__}")


def price_parts(root: ComputerPart) -> float:
    """Print the price of every part and the running total.

    Returns:
        Total price of all leaf parts
    """
    total = 0.0

    for part in walk(root):
        if isinstance(part, Keyboard):
            total += part.price
            print(f"Keyboard price: ${part.price}")
        elif isinstance(part, Monitor):
            total += part.price
            print(f'Monitor price: ${part.price} (Screen size: {part.screen_size}")')
        elif isinstance(part, Mouse):
            total += part.price
            print(f"Mouse price: ${part.price}")
        elif isinstance(part, Computer):
            print(f"Total computer price: ${total}")
        else:
            raise _unsupported(part)

    return total


def display_parts(root: ComputerPart) -> None:
    for part in walk(root):
        if not isinstance(part, (Keyboard, Monitor, Mouse, Computer)):
            raise _unsupported(part)
        print(f"Displaying {type(part).__name__}")


def export_xml(root: ComputerPart) -> str:
    """Render the parts as an XML document wrapped in ``<Computer>``."""
    lines = ["<Computer>"]

    for part in walk(root):
        if isinstance(part, Keyboard):
            lines.append(f'<Keyboard price="{part.price}"/>')
        elif isinstance(part, Monitor):
            lines.append(
                f'<Monitor price="{part.price}" screenSize="{part.screen_size}"/>'
            )
        elif isinstance(part, Mouse):
            lines.append(f'<Mouse price="{part.price}"/>')
        elif not isinstance(part, Computer):
            raise _unsupported(part)

    lines.append("</Computer>")
    return "\n".join(lines)


@demo(
    name="visitor",
    category=PatternCategory.BEHAVIORAL,
    description="Pricing, display and XML export over a fixed part hierarchy.",
)
def main() -> str:
    """Run the three operations over a standard computer."""
    computer = Computer()

    print("=== Price Calculation ===")
    price_parts(computer)

    print("\n=== Display Operation ===")
    display_parts(computer)

    print("\n=== XML Export ===")
    xml = export_xml(computer)
    print(xml)
    return xml


if __name__ == "__main__":
    main()
