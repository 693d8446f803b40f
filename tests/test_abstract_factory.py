"""Tests for the abstract factory pattern."""

import pytest

from pattern_catalog.patterns.abstract_factory import (
    ModernChair,
    ModernFurnitureFactory,
    ModernSofa,
    VictorianChair,
    VictorianFurnitureFactory,
    VictorianSofa,
    get_furniture_factory,
    main,
)


class TestFurnitureFactories:
    """Each factory produces one consistent family."""

    def test_modern_family(self):
        factory = ModernFurnitureFactory()
        assert isinstance(factory.create_chair(), ModernChair)
        assert isinstance(factory.create_sofa(), ModernSofa)

    def test_victorian_family(self):
        factory = VictorianFurnitureFactory()
        assert isinstance(factory.create_chair(), VictorianChair)
        assert isinstance(factory.create_sofa(), VictorianSofa)

    def test_products_print_and_return_their_message(self, capsys):
        assert VictorianChair().sit_on() == "Sitting on a Victorian chair"
        assert capsys.readouterr().out == "Sitting on a Victorian chair\n"


class TestGetFurnitureFactory:
    """Style lookup."""

    def test_lookup_is_case_insensitive(self):
        assert isinstance(get_furniture_factory("Modern"), ModernFurnitureFactory)
        assert isinstance(get_furniture_factory("VICTORIAN"), VictorianFurnitureFactory)

    def test_unknown_style_raises(self):
        with pytest.raises(ValueError, match="Unknown furniture style"):
            get_furniture_factory("baroque")


def test_main_output(capsys):
    """Driver furnishes a modern room, then a Victorian one."""
    main()

    assert capsys.readouterr().out == (
        "Sitting on a modern chair\n"
        "Lying on a modern sofa\n"
        "\n"
        "Sitting on a Victorian chair\n"
        "Lying on a Victorian sofa\n"
    )
