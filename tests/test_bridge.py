"""Tests for the bridge pattern."""

from unittest.mock import Mock

from pattern_catalog.patterns.bridge import (
    TV,
    AdvancedRemote,
    BasicRemote,
    Device,
    Radio,
    main,
)


class TestDevices:
    def test_default_volumes(self):
        assert TV().volume == 10
        assert Radio().volume == 5

    def test_devices_start_switched_off(self):
        assert TV().enabled is False


class TestRemotes:
    """Remotes only talk to the device interface."""

    def test_toggle_power_turns_on_then_off(self, capsys):
        tv = TV()
        remote = BasicRemote(tv)

        remote.toggle_power()
        assert tv.enabled is True

        remote.toggle_power()
        assert tv.enabled is False

        assert capsys.readouterr().out == (
            "Remote: Toggling power\n"
            "TV: Turning on, current volume: 10\n"
            "Remote: Toggling power\n"
            "TV: Turning off\n"
        )

    def test_any_remote_works_with_any_device(self):
        device = Mock(spec=Device)
        AdvancedRemote(device).set_volume(7)
        device.set_volume.assert_called_once_with(7)

    def test_mute_sets_volume_to_zero(self):
        radio = Radio()
        AdvancedRemote(radio).mute()
        assert radio.volume == 0


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out == (
        "Remote: Toggling power\n"
        "TV: Turning on, current volume: 10\n"
        "BasicRemote: Setting volume\n"
        "TV: Setting volume to 15\n"
        "\n"
        "Remote: Toggling power\n"
        "Radio: Turning on, current volume: 5\n"
        "AdvancedRemote: Setting volume with extra features\n"
        "Radio: Setting volume to 20\n"
        "AdvancedRemote: Muting device\n"
        "Radio: Setting volume to 0\n"
    )
