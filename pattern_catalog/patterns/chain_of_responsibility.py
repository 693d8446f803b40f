"""
Chain of Responsibility pattern: purchase approval.

A purchase request walks a chain of approvers. Each approver has a fixed
spending ceiling; the first one whose ceiling covers the amount approves
the request, otherwise it is passed on. Ceilings are checked in chain
order, not by closest match.
"""

from abc import ABC
from dataclasses import dataclass
from typing import Optional, Sequence

from pattern_catalog.observability.logging import get_logger
from pattern_catalog.registry import PatternCategory, demo

logger = get_logger("patterns.chain_of_responsibility")


@dataclass(frozen=True)
class PurchaseRequest:
    """A request to spend ``amount``."""

    amount: float


class PurchaseHandler(ABC):
    """An approver in the chain.

    Subclasses only declare who they are and how much they may approve.
    """

    title: str = ""
    approval_limit: float = 0.0

    def __init__(self) -> None:
        self._next_handler: Optional["PurchaseHandler"] = None

    @property
    def next_handler(self) -> Optional["PurchaseHandler"]:
        """The handler requests are passed to."""
        return self._next_handler

    def set_next(self, handler: "PurchaseHandler") -> "PurchaseHandler":
        """Link ``handler`` after this one.

        Args:
            handler: The next approver

        Returns:
            ``handler``, so that chains can be built in one expression
        """
        self._next_handler = handler
        return handler

    def can_approve(self, request: PurchaseRequest) -> bool:
        """Check whether the request is within this approver's ceiling."""
        return request.amount <= self.approval_limit

    def handle_request(self, request: PurchaseRequest) -> Optional[str]:
        """Approve the request or pass it along the chain.

        Args:
            request: The purchase request

        Returns:
            Title of the approver, or None when nobody could approve it
        """
        if self.can_approve(request):
            print(f"{self.title} can approve purchase request: {request}")
            return self.title

        if self._next_handler is not None:
            return self._next_handler.handle_request(request)

        print(f"No handler can approve purchase request: {request}")
        logger.info(
            "Purchase request left unapproved",
            data={"amount": request.amount, "last_handler": self.title},
        )
        return None


class ManagerHandler(PurchaseHandler):
    title = "Manager"
    approval_limit = 1000.0


class DirectorHandler(PurchaseHandler):
    title = "Director"
    approval_limit = 5000.0


class CEOHandler(PurchaseHandler):
    title = "CEO"
    approval_limit = 10000.0


def build_approval_chain() -> PurchaseHandler:
    """Wire manager -> director -> CEO and return the head of the chain."""
    manager = ManagerHandler()
    manager.set_next(DirectorHandler()).set_next(CEOHandler())
    return manager


@demo(
    name="chain_of_responsibility",
    category=PatternCategory.BEHAVIORAL,
    description="Purchase requests climb an approval chain by amount.",
)
def main(amounts: Sequence[float] = (500, 5000, 15000)) -> None:
    """Send purchase requests through the approval chain."""
    manager = build_approval_chain()

    for amount in amounts:
        manager.handle_request(PurchaseRequest(float(amount)))


if __name__ == "__main__":
    main()
