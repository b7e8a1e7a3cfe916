"""
MemberQueryService - Read-only queries over the member collection.

Filtering, sorting, grouping and aggregation over a fixed snapshot
of members taken when the service is built.

Functional Core - pure business logic.

Ordering rules:
- "Collection order" is the order the source returned the members in.
- Every sort is stable, so ties keep collection order.
- Salary ties for highest_salary_member and top_earners go to the
  member encountered first.
"""

from __future__ import annotations

import math

from src.domain.entities import (
    House,
    Member,
    Title,
    house_order,
    natural_order,
)

from .models import HouseSalaryStats, MemberQueryError, RoyaltyPartition
from .ports import MemberSourcePort

# --- Member Query Service ---


class MemberQueryService:
    """
    Member query service.

    Answers queries over an immutable snapshot of the source's members.
    """

    def __init__(self, source: MemberSourcePort) -> None:
        """Initialize service with a snapshot of the source."""
        self._members: tuple[Member, ...] = tuple(source.get_all_members())

    def _in_house(self, house: House) -> list[Member]:
        return [member for member in self._members if member.house == house]

    # --- Lookups ---

    def find_by_id(self, member_id: int) -> Member | None:
        """Get member by ID."""
        return next((m for m in self._members if m.id == member_id), None)

    def find_by_name(self, name: str) -> Member | None:
        """Get the first member with the given name."""
        return next((m for m in self._members if m.name == name), None)

    def find_all_by_house(self, house: House) -> list[Member]:
        """Get all members of a house in collection order."""
        return self._in_house(house)

    def get_all(self) -> tuple[Member, ...]:
        """Get the full collection."""
        return self._members

    # --- Sorted views ---

    def starts_with_s_alphabetical(self) -> list[Member]:
        """Members whose name starts with "S", in natural order."""
        return sorted(
            (m for m in self._members if m.name.startswith("S")),
            key=natural_order,
        )

    def lannisters_by_name(self) -> list[Member]:
        return sorted(self._in_house(House.LANNISTER), key=lambda m: m.name)

    def salary_less_than_sorted_by_house(self, max_salary: float) -> list[Member]:
        """Members earning strictly less than max_salary, sorted by house."""
        return sorted(
            (m for m in self._members if m.salary < max_salary),
            key=house_order,
        )

    def sort_by_house_then_name(self) -> list[Member]:
        """
        Sort by house, then sort the result again by name.

        The second sort decides the order. House order only survives
        between members that share a name.
        """
        by_house = sorted(self._members, key=house_order)
        return sorted(by_house, key=lambda m: m.name)

    def house_sorted_by_dob(self, house: House) -> list[Member]:
        """Members of a house, oldest first."""
        return sorted(self._in_house(house), key=lambda m: m.dob)

    def kings_by_name_desc(self) -> list[Member]:
        kings = [m for m in self._members if m.title == Title.KING]
        return sorted(kings, key=lambda m: m.name, reverse=True)

    def names_sorted_by_house(self, house: House) -> list[str]:
        return sorted(m.name for m in self._in_house(house))

    # --- Predicates and counts ---

    def average_salary(self) -> float:
        """Mean salary, 0.0 for an empty collection."""
        if not self._members:
            return 0.0
        return math.fsum(m.salary for m in self._members) / len(self._members)

    def any_salary_greater_than(self, max_salary: float) -> bool:
        return any(m.salary > max_salary for m in self._members)

    def any_members_in_house(self, house: House) -> bool:
        return any(m.house == house for m in self._members)

    def count_in_house(self, house: House) -> int:
        return len(self._in_house(house))

    def house_member_names_joined(self, house: House) -> str:
        """Comma-separated names of a house in collection order."""
        return ", ".join(m.name for m in self._in_house(house))

    def highest_salary_member(self) -> Member | None:
        """Member with the highest salary, first encountered on ties."""
        return max(self._members, key=lambda m: m.salary, default=None)

    # --- Grouping ---

    def royalty_partition(self) -> RoyaltyPartition:
        """Split members into royals (KING or QUEEN) and everyone else."""
        royal: list[Member] = []
        non_royal: list[Member] = []
        for member in self._members:
            (royal if member.is_royal else non_royal).append(member)
        return RoyaltyPartition(royal=royal, non_royal=non_royal)

    def members_by_house(self) -> dict[House, list[Member]]:
        """
        Group members by house.

        Only houses with members appear. Keys follow the order in which
        each house is first encountered.
        """
        groups: dict[House, list[Member]] = {}
        for member in self._members:
            groups.setdefault(member.house, []).append(member)
        return groups

    def count_by_house(self) -> dict[House, int]:
        return {house: len(group) for house, group in self.members_by_house().items()}

    def house_salary_stats(self) -> dict[House, HouseSalaryStats]:
        """Min, max, average, count and total salary per house."""
        stats: dict[House, HouseSalaryStats] = {}
        for house, group in self.members_by_house().items():
            salaries = [m.salary for m in group]
            total = math.fsum(salaries)
            stats[house] = HouseSalaryStats(
                count=len(salaries),
                total=total,
                minimum=min(salaries),
                maximum=max(salaries),
                average=total / len(salaries),
            )
        return stats

    def top_earners(self, n: int, house: House) -> list[Member]:
        """
        Top n earners of a house, highest salary first.

        Raises:
            MemberQueryError: If n is negative.
        """
        if n < 0:
            raise MemberQueryError(
                code="negative_limit",
                message=f"Top earners limit must be zero or more, got {n}",
                field="limit",
            )
        ranked = sorted(self._in_house(house), key=lambda m: m.salary, reverse=True)
        return ranked[:n]
