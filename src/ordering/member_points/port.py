"""Member points port (abstract interface).

Orders are settled with loyalty points. The adapter deducts the points from
the member's balance and reports the balance left afterwards.
"""

from abc import ABC, abstractmethod


class MemberPoints(ABC):
    @abstractmethod
    def deduct(self, member_card_no: str | None, points: float, point_transaction_id: str | None) -> float:
        """Deduct ``points`` from the member and return the new balance."""
        ...
