"""
Members component - Read-only queries over the member directory.
"""

from ._impl import MemberQueryService
from .component import (
    run_find,
    run_house_members,
    run_house_report,
    run_kings,
    run_royalty,
    run_salary_below,
    run_top_earners,
)
from .models import (
    FindMemberInput,
    HouseQueryInput,
    HouseReportOutput,
    HouseSalaryStats,
    MemberListOutput,
    MemberLookupOutput,
    MemberQueryError,
    MemberQueryIssue,
    RoyaltyOutput,
    RoyaltyPartition,
    SalaryQueryInput,
    TopEarnersInput,
)
from .ports import MemberSourcePort

__all__ = [
    # Core service
    "MemberQueryService",
    # Entry points
    "run_find",
    "run_house_members",
    "run_salary_below",
    "run_kings",
    "run_top_earners",
    "run_house_report",
    "run_royalty",
    # Input models
    "FindMemberInput",
    "HouseQueryInput",
    "SalaryQueryInput",
    "TopEarnersInput",
    # Output models
    "MemberLookupOutput",
    "MemberListOutput",
    "HouseReportOutput",
    "RoyaltyOutput",
    "HouseSalaryStats",
    "RoyaltyPartition",
    # Errors
    "MemberQueryError",
    "MemberQueryIssue",
    # Ports
    "MemberSourcePort",
]
