from __future__ import annotations

from dataclasses import dataclass

from src.adapters.member_source import InMemoryMemberSource
from src.components.members import MemberQueryService, MemberSourcePort
from src.rules.models import Rules


@dataclass
class ServiceContext:
    query_service: MemberQueryService
    member_source: MemberSourcePort
    rules: Rules

    @classmethod
    def create(cls, rules: Rules, source: MemberSourcePort | None = None) -> ServiceContext:
        # Adapters
        member_source = source if source is not None else InMemoryMemberSource()

        # Services
        query_service = MemberQueryService(member_source)

        return cls(
            query_service=query_service,
            member_source=member_source,
            rules=rules,
        )
