"""Tests for the interactive entry point."""

from pathlib import Path

import pytest

import main as catalog_main

PROJECT_ROOT = Path(__file__).resolve().parent.parent


@pytest.fixture(autouse=True)
def default_environment(monkeypatch, tmp_path):
    """Start every test from defaults: no config file, no level override."""
    monkeypatch.setenv("CATALOG_CONFIG", str(tmp_path / "missing.yaml"))
    monkeypatch.delenv("CATALOG_LOG_LEVEL", raising=False)


def _answers(monkeypatch, *answers):
    replies = iter(answers)
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(replies))


class TestLoadConfig:
    def test_defaults_when_file_is_missing(self):
        config = catalog_main.load_config()
        assert config.demos == []
        assert config.log_level == "WARNING"

    def test_reads_file_and_level_override(self, monkeypatch):
        monkeypatch.setenv("CATALOG_CONFIG", str(PROJECT_ROOT / "config" / "catalog.yaml"))
        monkeypatch.setenv("CATALOG_LOG_LEVEL", "ERROR")

        config = catalog_main.load_config()

        assert config.log_level == "ERROR"
        assert config.options_for("state") == {"product_count": 3}


class TestResolveChoice:
    def test_numbers_and_names(self):
        numbered = ["builder", "proxy"]

        assert catalog_main.resolve_choice("2", numbered) == "proxy"
        assert catalog_main.resolve_choice("builder", numbered) == "builder"
        assert catalog_main.resolve_choice("0", numbered) is None
        assert catalog_main.resolve_choice("3", numbered) is None
        assert catalog_main.resolve_choice("visitor", numbered) is None


class TestMain:
    """One selection per invocation."""

    def test_quit(self, monkeypatch, capsys):
        _answers(monkeypatch, "q")

        assert catalog_main.main() == 0

        out = capsys.readouterr().out
        assert "Creational:" in out
        assert "Behavioral:" in out
        assert out.rstrip().endswith("Goodbye!")

    def test_run_by_name(self, monkeypatch, capsys):
        _answers(monkeypatch, "adapter")

        assert catalog_main.main() == 0
        assert "Square root: 4.0" in capsys.readouterr().out

    def test_invalid_choice(self, monkeypatch, capsys):
        _answers(monkeypatch, "nonsense")

        assert catalog_main.main() == 1
        assert "Invalid choice" in capsys.readouterr().out

    def test_run_category(self, monkeypatch, capsys):
        _answers(monkeypatch, "c", "structural")

        assert catalog_main.main() == 0

        out = capsys.readouterr().out
        assert "Computer is starting..." in out
        assert "Ran 7 demos, 0 failed" in out

    def test_unknown_category_is_an_error(self, monkeypatch, capsys):
        _answers(monkeypatch, "c", "gothic")

        assert catalog_main.main() == 1
        assert "\nError: " in capsys.readouterr().out

    def test_run_all_with_shipped_config(self, monkeypatch, capsys):
        monkeypatch.setenv("CATALOG_CONFIG", str(PROJECT_ROOT / "config" / "catalog.yaml"))
        _answers(monkeypatch, "a")

        assert catalog_main.main() == 0

        out = capsys.readouterr().out
        assert "Ran 21 demos, 0 failed" in out
        assert "Result: 15" in out

    def test_keyboard_interrupt(self, monkeypatch, capsys):
        def interrupted(_prompt=""):
            raise KeyboardInterrupt

        monkeypatch.setattr("builtins.input", interrupted)

        assert catalog_main.main() == 0
        assert "Interrupted by user." in capsys.readouterr().out

    def test_mistyped_option_is_an_error(self, monkeypatch, capsys, tmp_path):
        config_file = tmp_path / "catalog.yaml"
        config_file.write_text(
            "demos:\n  - name: state\n    options:\n      product_count: \"3\"\n"
        )
        monkeypatch.setenv("CATALOG_CONFIG", str(config_file))
        _answers(monkeypatch, "state")

        assert catalog_main.main() == 1
        assert "\nError: '<' not supported" in capsys.readouterr().out
