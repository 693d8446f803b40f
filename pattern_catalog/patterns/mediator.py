"""
Mediator pattern: a chat room.

Users never talk to each other directly; every message goes through the
room, which delivers it to everybody except the sender. The room owns the
user records and hands out integer handles, so users carry no reference
back to the room.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import List

from pattern_catalog.registry import PatternCategory, demo


@dataclass
class ChatUser:
    """A participant; ``inbox`` keeps every message delivered to it."""

    name: str
    inbox: List[str] = field(default_factory=list)

    def receive(self, message: str) -> None:
        self.inbox.append(message)
        print(f"{self.name} received: {message}")


class ChatMediator(ABC):
    @abstractmethod
    def add_user(self, name: str) -> int:
        """Register a participant and return its handle."""

    @abstractmethod
    def send_message(self, message: str, sender: int) -> List[str]:
        """Deliver ``message`` from ``sender`` to the other participants.

        Returns:
            Names of the recipients, in join order
        """


class ChatRoom(ChatMediator):
    def __init__(self) -> None:
        self._users: List[ChatUser] = []

    def add_user(self, name: str) -> int:
        self._users.append(ChatUser(name))
        return len(self._users) - 1

    def user(self, handle: int) -> ChatUser:
        """Look up a participant by handle.

        Raises:
            KeyError: If no participant has this handle
        """
        if not 0 <= handle < len(self._users):
            raise KeyError(f"Unknown user handle: {handle}")
        return self._users[handle]

    @property
    def user_names(self) -> List[str]:
        return [user.name for user in self._users]

    def send_message(self, message: str, sender: int) -> List[str]:
        sender_user = self.user(sender)
        print(f"{sender_user.name} sending: {message}")

        recipients: List[str] = []
        for handle, user in enumerate(self._users):
            if handle == sender:
                continue
            user.receive(message)
            recipients.append(user.name)
        return recipients


@demo(
    name="mediator",
    category=PatternCategory.BEHAVIORAL,
    description="Chat users exchange messages only through the chat room.",
)
def main() -> None:
    """Four users join a room and three of them speak."""
    chat_room = ChatRoom()

    alice = chat_room.add_user("Alice")
    bob = chat_room.add_user("Bob")
    charlie = chat_room.add_user("Charlie")
    chat_room.add_user("Diana")

    print("--- Chat Room Communication ---")
    chat_room.send_message("Hello everyone!", alice)

    print()
    chat_room.send_message("Hi Alice!", bob)

    print()
    chat_room.send_message("Good morning!", charlie)


if __name__ == "__main__":
    main()
