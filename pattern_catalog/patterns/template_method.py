"""
Template Method pattern, Python style.

The skeleton of the algorithm is a plain function that calls its variable
steps in a fixed order. The steps are passed in as callbacks instead of
being overridden in a subclass.
"""

from dataclasses import dataclass
from typing import Any, Callable, List

from pattern_catalog.registry import PatternCategory, demo

Step = Callable[[], Any]


@dataclass(frozen=True)
class AlgorithmSteps:
    """The variable parts of the algorithm."""

    first: Step
    second: Step
    third: Step


def run_template(steps: AlgorithmSteps) -> List[Any]:
    """Run the fixed skeleton: first, second, then third step.

    Args:
        steps: The steps to plug into the skeleton

    Returns:
        The value returned by each step, in call order
    """
    return [steps.first(), steps.second(), steps.third()]


def _announce(text: str) -> Step:
    def step() -> str:
        print(text)
        return text

    return step


def concrete_algorithm() -> AlgorithmSteps:
    """Steps that announce themselves as they run."""
    return AlgorithmSteps(
        first=_announce("Step 1"),
        second=_announce("Step 2"),
        third=_announce("Step 3"),
    )


@demo(
    name="template_method",
    category=PatternCategory.BEHAVIORAL,
    description="A fixed skeleton calls pluggable steps in order.",
)
def main() -> List[Any]:
    """Run the skeleton with the announcing steps."""
    return run_template(concrete_algorithm())


if __name__ == "__main__":
    main()
