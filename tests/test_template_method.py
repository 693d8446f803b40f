"""Tests for the template method pattern."""

from unittest.mock import Mock, call

from pattern_catalog.patterns.template_method import AlgorithmSteps, run_template, main


def test_steps_run_in_fixed_order():
    manager = Mock()
    manager.first.return_value = 1
    manager.second.return_value = 2
    manager.third.return_value = 3

    result = run_template(AlgorithmSteps(manager.first, manager.second, manager.third))

    assert result == [1, 2, 3]
    assert manager.mock_calls == [call.first(), call.second(), call.third()]


def test_main_output(capsys):
    assert main() == ["Step 1", "Step 2", "Step 3"]
    assert capsys.readouterr().out == "Step 1\nStep 2\nStep 3\n"
