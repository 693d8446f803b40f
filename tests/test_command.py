"""Tests for the command pattern."""

from unittest.mock import Mock, call

from pattern_catalog.patterns.command import (
    Command,
    Light,
    LightOffCommand,
    LightOnCommand,
    MacroCommand,
    RemoteController,
    Television,
    TelevisionOnCommand,
    main,
)


class TestCommands:
    def test_light_on_and_undo(self):
        light = Light("Hall")
        command = LightOnCommand(light)

        command.execute()
        assert light.is_on is True

        command.undo()
        assert light.is_on is False

    def test_light_off_undo_turns_light_back_on(self):
        light = Light("Hall")
        light.on()

        command = LightOffCommand(light)
        command.execute()
        command.undo()

        assert light.is_on is True

    def test_television_on_sets_default_volume(self):
        tv = Television()
        TelevisionOnCommand(tv).execute()

        assert tv.is_on is True
        assert tv.volume == TelevisionOnCommand.DEFAULT_VOLUME

    def test_macro_undoes_in_reverse_order(self):
        manager = Mock()
        first = Mock(spec=Command)
        second = Mock(spec=Command)
        manager.attach_mock(first, "first")
        manager.attach_mock(second, "second")

        macro = MacroCommand([first, second])
        macro.execute()
        macro.undo()

        assert manager.mock_calls == [
            call.first.execute(),
            call.second.execute(),
            call.second.undo(),
            call.first.undo(),
        ]


class TestRemoteController:
    """Invoker history and undo."""

    def setup_method(self):
        self.remote = RemoteController()

    def test_press_button_without_command_does_nothing(self):
        self.remote.press_button()
        assert self.remote.history_size == 0

    def test_undo_pops_most_recent_command(self):
        first = Mock(spec=Command)
        second = Mock(spec=Command)
        for command in (first, second):
            self.remote.set_command(command)
            self.remote.press_button()

        assert self.remote.press_undo() is True

        second.undo.assert_called_once_with()
        first.undo.assert_not_called()
        assert self.remote.history_size == 1

    def test_undo_with_empty_history(self, capsys):
        assert self.remote.press_undo() is False
        assert capsys.readouterr().out == "No commands to undo\n"


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out == (
        "--- Executing commands ---\n"
        "Living Room light is ON\n"
        "Kitchen light is ON\n"
        "Television is ON\n"
        "Television volume set to 15\n"
        "\n"
        "--- Undoing commands ---\n"
        "Television is OFF\n"
        "Undo executed\n"
        "Kitchen light is OFF\n"
        "Undo executed\n"
        "Living Room light is OFF\n"
        "Undo executed\n"
        "No commands to undo\n"
    )
