"""Tests for the interpreter pattern."""

import pytest

from pattern_catalog.patterns.interpreter import (
    AddExpression,
    Context,
    NumberExpression,
    SubtractExpression,
    VariableExpression,
    main,
    parse_expression,
)


class TestExpressions:
    def test_nested_tree(self):
        expression = SubtractExpression(
            AddExpression(NumberExpression(10), VariableExpression("x")),
            NumberExpression(3),
        )
        assert expression.interpret(Context({"x": 4})) == 11

    def test_unbound_variable_raises(self):
        with pytest.raises(KeyError, match="Unknown variable: y"):
            VariableExpression("y").interpret(Context())

    def test_assign(self):
        context = Context()
        context.assign("n", 2)
        assert VariableExpression("n").interpret(context) == 2


class TestParseExpression:
    """Sentences are parsed left-associatively."""

    @pytest.mark.parametrize(
        "sentence, expected",
        [
            ("7", 7),
            ("10 + 5", 15),
            ("10 - 4 - 3", 3),
            ("1+2-3+4", 4),
        ],
    )
    def test_evaluates(self, sentence, expected):
        assert parse_expression(sentence).interpret(Context()) == expected

    def test_variables(self):
        expression = parse_expression("a + b - 1")
        assert expression.interpret(Context({"a": 2, "b": 3})) == 4

    @pytest.mark.parametrize("sentence", ["", "   ", "1 +", "+ 1", "1 2", "2 * 3"])
    def test_malformed_sentences_raise(self, sentence):
        with pytest.raises(ValueError):
            parse_expression(sentence)


def test_main_output(capsys):
    assert main() == 15
    assert capsys.readouterr().out == "Result: 15\n"


def test_main_with_sentence(capsys):
    assert main(sentence="x + y - 5", variables={"x": 10, "y": 10}) == 15
    assert capsys.readouterr().out == "Result: 15\n"
