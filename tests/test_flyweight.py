"""Tests for the flyweight pattern."""

from pattern_catalog.patterns.flyweight import Forest, TreeFactory, main


class TestTreeFactory:
    """Tree types are shared by key."""

    def setup_method(self):
        self.factory = TreeFactory()

    def test_same_key_returns_same_instance(self, capsys):
        first = self.factory.get_tree_type("Oak", "Green", "Rough")
        second = self.factory.get_tree_type("Oak", "Green", "Rough")

        assert first is second
        assert capsys.readouterr().out == (
            "Creating new TreeType: Oak_Green_Rough\n"
            "Reusing existing TreeType: Oak_Green_Rough\n"
        )

    def test_count_equals_unique_keys(self):
        for name, color in [("Oak", "Green"), ("Pine", "Green"), ("Oak", "Red")]:
            self.factory.get_tree_type(name, color, "Rough")
        self.factory.get_tree_type("Oak", "Green", "Rough")

        assert self.factory.tree_type_count == 3

    def test_factories_do_not_share_pools(self):
        other = TreeFactory()
        self.factory.get_tree_type("Oak", "Green", "Rough")

        assert other.tree_type_count == 0


class TestForest:
    def test_forests_can_share_a_factory(self):
        factory = TreeFactory()
        first = Forest(factory).plant_tree(1, 2, "Oak", "Green", "Rough")
        second = Forest(factory).plant_tree(3, 4, "Oak", "Green", "Rough")

        assert first.tree_type is second.tree_type
        assert factory.tree_type_count == 1


def test_main_output(capsys):
    assert main() == 2

    out = capsys.readouterr().out
    assert out.count("Creating new TreeType:") == 2
    assert out.count("Reusing existing TreeType: Oak_Green_Rough") == 3
    assert "Reusing existing TreeType: Pine_Dark Green_Smooth" in out
    assert "\nDrawing forest with 6 trees:\n" in out
    assert (
        "Drawing tree 'Oak' of color 'Green' with texture 'Rough' at position (10, 20)"
        in out
    )
    assert out.endswith(
        "\nTotal tree types created: 2\nMemory saved by using Flyweight pattern!\n"
    )
