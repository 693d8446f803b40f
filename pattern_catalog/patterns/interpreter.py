"""
Interpreter pattern: integer arithmetic sentences.

Grammar::

    expression := term (("+" | "-") term)*
    term       := INTEGER | IDENTIFIER

Numbers and variables are terminal expressions, addition and subtraction
are non-terminal ones. A Context carries the variable bindings.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Optional

from pattern_catalog.registry import PatternCategory, demo

_TOKEN_RE = re.compile(r"\s*(?:(\d+)|([A-Za-z_]\w*)|(\S))")


class Context:
    """Variable bindings available while interpreting."""

    def __init__(self, variables: Optional[Dict[str, int]] = None) -> None:
        self._variables: Dict[str, int] = dict(variables or {})

    def assign(self, name: str, value: int) -> None:
        self._variables[name] = value

    def lookup(self, name: str) -> int:
        """Get the value bound to ``name``.

        Raises:
            KeyError: If the variable is not bound
        """
        if name not in self._variables:
            raise KeyError(f"Unknown variable: {name}")
        return self._variables[name]


class Expression(ABC):
    @abstractmethod
    def interpret(self, context: Context) -> int:
        """Evaluate the expression in ``context``."""


class NumberExpression(Expression):
    def __init__(self, number: int) -> None:
        self.number = number

    def interpret(self, context: Context) -> int:
        return self.number


class VariableExpression(Expression):
    def __init__(self, name: str) -> None:
        self.name = name

    def interpret(self, context: Context) -> int:
        return context.lookup(self.name)


class AddExpression(Expression):
    def __init__(self, left: Expression, right: Expression) -> None:
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> int:
        return self.left.interpret(context) + self.right.interpret(context)


class SubtractExpression(Expression):
    def __init__(self, left: Expression, right: Expression) -> None:
        self.left = left
        self.right = right

    def interpret(self, context: Context) -> int:
        return self.left.interpret(context) - self.right.interpret(context)


def _tokenize(text: str) -> List[str]:
    tokens: List[str] = []
    position = 0
    text = text.rstrip()

    while position < len(text):
        match = _TOKEN_RE.match(text, position)
        if match is None:
            break
        number, name, symbol = match.groups()
        if symbol is not None and symbol not in "+-":
            raise ValueError(f"Unexpected character {symbol!r} at {match.start(3)}")
        tokens.append(number or name or symbol)
        position = match.end()

    return tokens


def _parse_term(token: str) -> Expression:
    if token.isdigit():
        return NumberExpression(int(token))
    if token in ("+", "-"):
        raise ValueError(f"Expected a number or variable, got {token!r}")
    return VariableExpression(token)


def parse_expression(text: str) -> Expression:
    """Build the expression tree for a sentence such as ``"10 + x - 3"``.

    Operators are left-associative.

    Args:
        text: The sentence to parse

    Returns:
        Root of the expression tree

    Raises:
        ValueError: If the sentence is empty or malformed
    """
    tokens = _tokenize(text)
    if not tokens:
        raise ValueError("Empty expression")

    expression = _parse_term(tokens[0])
    rest = tokens[1:]

    while rest:
        if len(rest) < 2:
            raise ValueError(f"Dangling operator at end of {text!r}")
        operator, operand = rest[0], rest[1]
        if operator not in ("+", "-"):
            raise ValueError(f"Expected an operator, got {operator!r}")

        right = _parse_term(operand)
        if operator == "+":
            expression = AddExpression(expression, right)
        else:
            expression = SubtractExpression(expression, right)
        rest = rest[2:]

    return expression


@demo(
    name="interpreter",
    category=PatternCategory.BEHAVIORAL,
    description="Expression objects evaluate a tiny arithmetic language.",
)
def main(sentence: str = "", variables: Optional[Dict[str, int]] = None) -> int:
    """Interpret ``10 + 5``, or ``sentence`` when one is given."""
    if sentence:
        expression = parse_expression(sentence)
    else:
        expression = AddExpression(NumberExpression(10), NumberExpression(5))

    context = Context(variables)

    result = expression.interpret(context)
    print(f"Result: {result}")
    return result


if __name__ == "__main__":
    main()
