"""
Members component - Member directory queries.

Wraps MemberQueryService for callers that want
input/output models instead of raw values.

Shell Layer - handles logging and error conversion.
"""

from __future__ import annotations

import logging

from src.domain.entities import Member

from ._impl import MemberQueryService
from .models import (
    FindMemberInput,
    HouseQueryInput,
    HouseReportOutput,
    MemberListOutput,
    MemberLookupOutput,
    MemberQueryError,
    MemberQueryIssue,
    RoyaltyOutput,
    SalaryQueryInput,
    TopEarnersInput,
)

logger = logging.getLogger(__name__)

HOUSE_ORDERINGS = ("collection", "dob", "name")


def _issue(error: MemberQueryError) -> MemberQueryIssue:
    return MemberQueryIssue(code=error.code, message=str(error), field=error.field)


def _list_output(members: list[Member]) -> MemberListOutput:
    return MemberListOutput(members=tuple(members), total=len(members))


# --- Shell Layer Functions ---


def run_find(
    input_data: FindMemberInput,
    service: MemberQueryService,
) -> MemberLookupOutput:
    """Find a member by ID or by name."""
    if (input_data.member_id is None) == (input_data.name is None):
        return MemberLookupOutput(
            member=None,
            errors=(
                MemberQueryIssue(
                    code="lookup_key_required",
                    message="Provide exactly one of member_id or name",
                ),
            ),
            success=False,
        )

    if input_data.member_id is not None:
        member = service.find_by_id(input_data.member_id)
        key = f"ID {input_data.member_id}"
    else:
        member = service.find_by_name(input_data.name or "")
        key = f"name '{input_data.name}'"

    if member is None:
        logger.debug("No member with %s", key)
        return MemberLookupOutput(
            member=None,
            errors=(
                MemberQueryIssue(
                    code="member_not_found",
                    message=f"Member with {key} not found",
                ),
            ),
            success=False,
        )

    return MemberLookupOutput(member=member, errors=(), success=True)


def run_house_members(
    input_data: HouseQueryInput,
    service: MemberQueryService,
) -> MemberListOutput:
    """List the members of a house in the requested order."""
    order_by = input_data.order_by
    if order_by == "dob":
        members = service.house_sorted_by_dob(input_data.house)
    elif order_by == "name":
        members = sorted(service.find_all_by_house(input_data.house), key=lambda m: m.name)
    elif order_by == "collection":
        members = service.find_all_by_house(input_data.house)
    else:
        logger.warning("Rejected house query ordering %r", order_by)
        return MemberListOutput(
            members=(),
            total=0,
            errors=(
                MemberQueryIssue(
                    code="invalid_order",
                    message=f"order_by must be one of {', '.join(HOUSE_ORDERINGS)}",
                    field="order_by",
                ),
            ),
            success=False,
        )

    logger.debug("House %s: %d members", input_data.house.value, len(members))
    return _list_output(members)


def run_salary_below(
    input_data: SalaryQueryInput,
    service: MemberQueryService,
) -> MemberListOutput:
    """Members earning less than the threshold, sorted by house."""
    return _list_output(service.salary_less_than_sorted_by_house(input_data.threshold))


def run_kings(service: MemberQueryService) -> MemberListOutput:
    """All kings, names descending."""
    return _list_output(service.kings_by_name_desc())


def run_top_earners(
    input_data: TopEarnersInput,
    service: MemberQueryService,
) -> MemberListOutput:
    """Highest paid members of a house."""
    try:
        members = service.top_earners(input_data.limit, input_data.house)
    except MemberQueryError as e:
        logger.warning("Rejected top earners query: %s", e)
        return MemberListOutput(members=(), total=0, errors=(_issue(e),), success=False)

    return _list_output(members)


def run_house_report(service: MemberQueryService) -> HouseReportOutput:
    """Counts and salary statistics for every populated house."""
    return HouseReportOutput(
        counts=service.count_by_house(),
        stats=service.house_salary_stats(),
        total_members=len(service.get_all()),
        average_salary=service.average_salary(),
    )


def run_royalty(service: MemberQueryService) -> RoyaltyOutput:
    """Royal and non-royal members."""
    partition = service.royalty_partition()
    return RoyaltyOutput(
        royal=tuple(partition.royal),
        non_royal=tuple(partition.non_royal),
    )
