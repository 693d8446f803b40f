"""Tests for the visitor pattern."""

import pytest

from pattern_catalog.patterns.visitor import (
    Computer,
    Keyboard,
    Monitor,
    Mouse,
    display_parts,
    export_xml,
    main,
    price_parts,
    walk,
)


class TestWalk:
    def test_children_come_before_the_computer(self):
        computer = Computer()
        names = [type(part).__name__ for part in walk(computer)]

        assert names == ["Keyboard", "Monitor", "Mouse", "Computer"]


class TestOperations:
    """One dispatch function per operation."""

    def test_price_total(self, capsys):
        assert price_parts(Computer([Keyboard(10.0), Mouse(5.0)])) == 15.0
        assert capsys.readouterr().out.splitlines()[-1] == "Total computer price: $15.0"

    def test_price_of_a_single_part(self, capsys):
        assert price_parts(Monitor(99.0, 27)) == 99.0
        assert capsys.readouterr().out == 'Monitor price: $99.0 (Screen size: 27")\n'

    def test_display(self, capsys):
        display_parts(Computer([Mouse(1.0)]))
        assert capsys.readouterr().out == "Displaying Mouse\nDisplaying Computer\n"

    def test_unknown_part_raises_type_error(self):
        with pytest.raises(TypeError, match="Unsupported computer part: str"):
            price_parts(Computer(["speaker"]))
        with pytest.raises(TypeError):
            display_parts("speaker")
        with pytest.raises(TypeError):
            export_xml(Computer([42]))


def test_main_output(capsys):
    xml = main()

    assert xml == (
        "<Computer>\n"
        '<Keyboard price="50.0"/>\n'
        '<Monitor price="300.0" screenSize="24"/>\n'
        '<Mouse price="25.0"/>\n'
        "</Computer>"
    )
    assert capsys.readouterr().out == (
        "=== Price Calculation ===\n"
        "Keyboard price: $50.0\n"
        'Monitor price: $300.0 (Screen size: 24")\n'
        "Mouse price: $25.0\n"
        "Total computer price: $375.0\n"
        "\n"
        "=== Display Operation ===\n"
        "Displaying Keyboard\n"
        "Displaying Monitor\n"
        "Displaying Mouse\n"
        "Displaying Computer\n"
        "\n"
        "=== XML Export ===\n"
        f"{xml}\n"
    )
