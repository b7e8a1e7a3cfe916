"""
Members component - Port interfaces.
"""

from __future__ import annotations

from typing import Protocol

from src.domain.entities import Member


class MemberSourcePort(Protocol):
    """Read-only source of the member collection."""

    def get_all_members(self) -> list[Member]:
        """Return every member in collection order."""
        ...
