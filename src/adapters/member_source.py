"""
In-memory member source.

Holds the fixed member directory the query service reads from.
The collection is copied once at construction and never changes.
"""

from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Iterable
from datetime import date

from src.domain.entities import House, Member, Title

logger = logging.getLogger(__name__)


class MemberDataError(ValueError):
    """Raised when a member collection breaks the unique-id rule."""

    def __init__(self, duplicate_ids: list[int]) -> None:
        self.duplicate_ids = duplicate_ids
        super().__init__(f"Duplicate member ids: {duplicate_ids}")


def _member(
    member_id: int, title: Title, name: str, dob: date, salary: float, house: House
) -> Member:
    return Member(id=member_id, name=name, house=house, title=title, salary=salary, dob=dob)


SEED_MEMBERS: tuple[Member, ...] = (
    _member(1, Title.LORD, "Eddard", date(1959, 4, 17), 100000.0, House.STARK),
    _member(2, Title.LADY, "Catelyn", date(1964, 1, 17), 80000.0, House.STARK),
    _member(3, Title.LADY, "Arya", date(1997, 4, 15), 50000.0, House.STARK),
    _member(4, Title.LADY, "Sansa", date(1996, 2, 21), 60000.0, House.STARK),
    _member(5, Title.SIR, "Bran", date(1999, 4, 9), 10000.0, House.STARK),
    _member(6, Title.KING, "Robb", date(1986, 6, 18), 100000.0, House.STARK),
    _member(7, Title.KING, "Jon", date(1986, 12, 26), 90000.0, House.SNOW),
    _member(8, Title.SIR, "Jaime", date(1970, 7, 27), 120000.0, House.LANNISTER),
    _member(9, Title.LORD, "Tyrion", date(1969, 6, 11), 70000.0, House.LANNISTER),
    _member(10, Title.LORD, "Tywin", date(1946, 10, 10), 200000.0, House.LANNISTER),
    _member(11, Title.LADY, "Cersei", date(1973, 10, 3), 120000.0, House.LANNISTER),
    _member(12, Title.QUEEN, "Daenerys", date(1987, 5, 1), 130000.0, House.TARGARYEN),
    _member(13, Title.LORD, "Viserys", date(1983, 11, 17), 100000.0, House.TARGARYEN),
    _member(14, Title.KING, "Robert", date(1964, 1, 14), 180000.0, House.BARATHEON),
    _member(15, Title.KING, "Joffrey", date(1992, 5, 20), 100000.0, House.BARATHEON),
    _member(16, Title.KING, "Tommen", date(1997, 9, 7), 60000.0, House.BARATHEON),
    _member(17, Title.KING, "Stannis", date(1957, 3, 27), 123456.0, House.BARATHEON),
    _member(18, Title.QUEEN, "Margaery", date(1982, 2, 11), 80000.0, House.TYRELL),
    _member(19, Title.SIR, "Loras", date(1988, 3, 24), 70000.0, House.TYRELL),
    _member(20, Title.LADY, "Olenna", date(1938, 7, 20), 130000.0, House.TYRELL),
    _member(21, Title.LORD, "Roose", date(1963, 9, 12), 100000.0, House.BOLTON),
    _member(22, Title.LORD, "Ramsay", date(1985, 5, 13), 140000.0, House.BOLTON),
)


class InMemoryMemberSource:
    """Member source backed by an immutable tuple."""

    def __init__(self, members: Iterable[Member] = SEED_MEMBERS) -> None:
        self._members = tuple(members)

        counts = Counter(member.id for member in self._members)
        duplicates = sorted(member_id for member_id, n in counts.items() if n > 1)
        if duplicates:
            raise MemberDataError(duplicates)

        logger.info("Loaded %d members", len(self._members))

    def get_all_members(self) -> list[Member]:
        """Return every member in collection order."""
        return list(self._members)
