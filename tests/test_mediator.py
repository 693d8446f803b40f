"""Tests for the mediator pattern."""

import pytest

from pattern_catalog.patterns.mediator import ChatRoom, main


class TestChatRoom:
    """Messages reach everybody but the sender."""

    def setup_method(self):
        self.room = ChatRoom()
        self.alice = self.room.add_user("Alice")
        self.bob = self.room.add_user("Bob")
        self.carol = self.room.add_user("Carol")

    def test_handles_are_join_order(self):
        assert (self.alice, self.bob, self.carol) == (0, 1, 2)
        assert self.room.user_names == ["Alice", "Bob", "Carol"]

    def test_sender_does_not_receive_own_message(self):
        recipients = self.room.send_message("hi", self.bob)

        assert recipients == ["Alice", "Carol"]
        assert self.room.user(self.bob).inbox == []
        assert self.room.user(self.alice).inbox == ["hi"]

    def test_unknown_sender_raises(self):
        with pytest.raises(KeyError):
            self.room.send_message("hi", 99)

    def test_single_user_room(self, capsys):
        room = ChatRoom()
        solo = room.add_user("Solo")

        assert room.send_message("anyone?", solo) == []
        assert capsys.readouterr().out == "Solo sending: anyone?\n"


def test_main_output(capsys):
    main()

    assert capsys.readouterr().out == (
        "--- Chat Room Communication ---\n"
        "Alice sending: Hello everyone!\n"
        "Bob received: Hello everyone!\n"
        "Charlie received: Hello everyone!\n"
        "Diana received: Hello everyone!\n"
        "\n"
        "Bob sending: Hi Alice!\n"
        "Alice received: Hi Alice!\n"
        "Charlie received: Hi Alice!\n"
        "Diana received: Hi Alice!\n"
        "\n"
        "Charlie sending: Good morning!\n"
        "Alice received: Good morning!\n"
        "Bob received: Good morning!\n"
        "Diana received: Good morning!\n"
    )
