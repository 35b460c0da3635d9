"""Member points factory.

Provides get_member_points() / set_member_points() to swap implementations.
Defaults to FakeMemberPoints.
"""

from ordering.member_points.fake_adapter import FakeMemberPoints
from ordering.member_points.port import MemberPoints

_current_points: MemberPoints | None = None


def get_member_points() -> MemberPoints:
    """Return the current member points service. Defaults to FakeMemberPoints."""
    global _current_points
    if _current_points is None:
        _current_points = FakeMemberPoints()
    return _current_points


def set_member_points(points: MemberPoints) -> None:
    global _current_points
    _current_points = points


def reset_member_points() -> None:
    """Reset to the default service."""
    global _current_points
    _current_points = None
