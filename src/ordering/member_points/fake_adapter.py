"""Configurable fake member points service for development and testing.

Every deduction succeeds and reports a fixed balance unless the adapter is
configured otherwise.
"""

from ordering.member_points.port import MemberPoints

DEFAULT_BALANCE = 250.0


class FakeMemberPoints(MemberPoints):
    def __init__(self) -> None:
        self.new_balance: float = DEFAULT_BALANCE
        self.failure: Exception | None = None
        self.calls: list[dict] = []

    def configure(self, new_balance: float = DEFAULT_BALANCE, failure: Exception | None = None) -> None:
        """Configure adapter behavior at runtime."""
        self.new_balance = new_balance
        self.failure = failure

    def deduct(self, member_card_no: str | None, points: float, point_transaction_id: str | None) -> float:
        call = {
            "method": "deduct",
            "member_card_no": member_card_no,
            "points": points,
            "point_transaction_id": point_transaction_id,
        }
        self.calls.append(call)

        if self.failure is not None:
            raise self.failure
        return self.new_balance
