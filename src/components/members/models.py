"""
Members component - Data models.
"""

from __future__ import annotations

from dataclasses import dataclass

from src.domain.entities import House, Member

# --- Errors ---


class MemberQueryError(ValueError):
    """Raised when a query is called with an argument outside its contract."""

    def __init__(self, code: str, message: str, field: str | None = None) -> None:
        self.code = code
        self.field = field
        super().__init__(message)


@dataclass(frozen=True)
class MemberQueryIssue:
    """Query problem reported by the shell layer."""

    code: str
    message: str
    field: str | None = None


# --- Query Results ---


@dataclass(frozen=True)
class HouseSalaryStats:
    """Salary summary for one house."""

    count: int
    total: float
    minimum: float
    maximum: float
    average: float


@dataclass(frozen=True)
class RoyaltyPartition:
    """Members split by royal title (KING or QUEEN)."""

    royal: list[Member]
    non_royal: list[Member]


# --- Input Models ---


@dataclass(frozen=True)
class FindMemberInput:
    """Input for a single-member lookup. Set exactly one of the fields."""

    member_id: int | None = None
    name: str | None = None


@dataclass(frozen=True)
class HouseQueryInput:
    """Input for queries scoped to one house."""

    house: House
    order_by: str = "collection"  # collection | dob | name


@dataclass(frozen=True)
class SalaryQueryInput:
    """Input for salary threshold queries."""

    threshold: float


@dataclass(frozen=True)
class TopEarnersInput:
    """Input for the top earners query."""

    house: House
    limit: int


# --- Output Models ---


@dataclass(frozen=True)
class MemberLookupOutput:
    """Output from a single-member lookup."""

    member: Member | None
    errors: tuple[MemberQueryIssue, ...]
    success: bool


@dataclass(frozen=True)
class MemberListOutput:
    """Output from a list query."""

    members: tuple[Member, ...]
    total: int
    errors: tuple[MemberQueryIssue, ...] = ()
    success: bool = True


@dataclass(frozen=True)
class HouseReportOutput:
    """Per-house counts and salary statistics."""

    counts: dict[House, int]
    stats: dict[House, HouseSalaryStats]
    total_members: int
    average_salary: float


@dataclass(frozen=True)
class RoyaltyOutput:
    """Output from the royalty partition."""

    royal: tuple[Member, ...]
    non_royal: tuple[Member, ...]
