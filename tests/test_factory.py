"""Tests for the factory pattern."""

import logging

from pattern_catalog.patterns.factory import Circle, Shape, ShapeFactory, Square, main


class Triangle(Shape):
    def draw(self) -> str:
        return "Drawing a Triangle"


class TestShapeFactory:
    """Shape creation by name."""

    def setup_method(self):
        self.factory = ShapeFactory()

    def test_creates_known_shapes_case_insensitively(self):
        assert isinstance(self.factory.create_shape("CIRCLE"), Circle)
        assert isinstance(self.factory.create_shape("square"), Square)

    def test_each_call_creates_a_new_shape(self):
        assert self.factory.create_shape("Circle") is not self.factory.create_shape(
            "Circle"
        )

    def test_unknown_shape_returns_none_and_logs_warning(self, caplog):
        with caplog.at_level(logging.WARNING, logger="pattern_catalog"):
            assert self.factory.create_shape("Hexagon") is None

        assert "Unknown shape type: Hexagon" in caplog.text

    def test_register_shape(self):
        self.factory.register_shape("Triangle", Triangle)

        assert "triangle" in self.factory.list_shapes()
        assert isinstance(self.factory.create_shape("triangle"), Triangle)


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out == "Drawing a Circle\nDrawing a Square\n"


def test_main_reports_unknown_names(capsys):
    main(shape_types=["Circle", "Blob"])

    assert capsys.readouterr().out == "Drawing a Circle\nUnknown shape: Blob\n"
