import argparse
import logging
import os
import sys
from collections.abc import Sequence
from pathlib import Path

from src.app_shell.context import ServiceContext
from src.components.members import (
    FindMemberInput,
    HouseQueryInput,
    MemberListOutput,
    SalaryQueryInput,
    TopEarnersInput,
    run_find,
    run_house_members,
    run_house_report,
    run_kings,
    run_royalty,
    run_salary_below,
    run_top_earners,
)
from src.components.members.component import HOUSE_ORDERINGS
from src.domain.entities import House, Member
from src.rules.loader import load_rules

logger = logging.getLogger("cli")

RULES_PATH = "rules.yaml"


def get_context() -> ServiceContext:
    rules_path = Path(os.environ.get("RULES_PATH", RULES_PATH))
    if not rules_path.exists():
        logger.error(f"Rules file {rules_path} not found.")
        sys.exit(1)

    rules = load_rules(rules_path)
    logging.basicConfig(level=rules.logging.level, format=rules.logging.format)
    return ServiceContext.create(rules)


def format_member(member: Member) -> str:
    return (
        f"{member.id:>3}  {member.name:<10} {member.house.value:<10} "
        f"{member.title.value:<6} {member.salary:>12,.2f}  {member.dob.isoformat()}"
    )


def print_members(output: MemberListOutput) -> None:
    if not output.success:
        for error in output.errors:
            logger.error(error.message)
        sys.exit(1)

    for member in output.members:
        print(format_member(member))
    print(f"({output.total} members)")


def handle_find(ctx: ServiceContext, args: argparse.Namespace) -> None:
    if args.command == "find-id":
        input_data = FindMemberInput(member_id=args.member_id)
    else:
        input_data = FindMemberInput(name=args.name)

    result = run_find(input_data, ctx.query_service)
    if not result.success or result.member is None:
        for error in result.errors:
            logger.error(error.message)
        sys.exit(1)

    print(format_member(result.member))


def handle_house(ctx: ServiceContext, args: argparse.Namespace) -> None:
    house = House(args.house)
    if args.names:
        print(ctx.query_service.house_member_names_joined(house))
        return

    input_data = HouseQueryInput(house=house, order_by=args.order)
    print_members(run_house_members(input_data, ctx.query_service))


def handle_below(ctx: ServiceContext, args: argparse.Namespace) -> None:
    threshold = args.amount
    if threshold is None:
        threshold = ctx.rules.queries.salary_threshold

    print_members(run_salary_below(SalaryQueryInput(threshold=threshold), ctx.query_service))


def handle_above(ctx: ServiceContext, args: argparse.Namespace) -> None:
    threshold = args.amount
    if threshold is None:
        threshold = ctx.rules.queries.salary_threshold

    found = ctx.query_service.any_salary_greater_than(threshold)
    print(f"Salaries above {threshold:,.2f}: {'yes' if found else 'no'}")


def handle_top(ctx: ServiceContext, args: argparse.Namespace) -> None:
    limit = args.limit
    if limit is None:
        limit = ctx.rules.queries.top_earners_limit

    input_data = TopEarnersInput(house=House(args.house), limit=limit)
    print_members(run_top_earners(input_data, ctx.query_service))


def handle_royalty(ctx: ServiceContext, args: argparse.Namespace) -> None:
    result = run_royalty(ctx.query_service)
    print("Royalty:")
    for member in result.royal:
        print(format_member(member))
    print("Everyone else:")
    for member in result.non_royal:
        print(format_member(member))


def handle_report(ctx: ServiceContext, args: argparse.Namespace) -> None:
    report = run_house_report(ctx.query_service)
    print(f"{'House':<10} {'Count':>5} {'Min':>12} {'Max':>12} {'Average':>12} {'Total':>14}")
    for house, stats in report.stats.items():
        print(
            f"{house.value:<10} {report.counts[house]:>5} {stats.minimum:>12,.2f} "
            f"{stats.maximum:>12,.2f} {stats.average:>12,.2f} {stats.total:>14,.2f}"
        )
    print(f"{report.total_members} members, average salary {report.average_salary:,.2f}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Great houses member directory")
    subparsers = parser.add_subparsers(dest="command", required=True)
    houses = [house.value for house in House]

    # find-id / find-name
    find_id_parser = subparsers.add_parser("find-id", help="Look up a member by ID")
    find_id_parser.add_argument("member_id", type=int)
    find_name_parser = subparsers.add_parser("find-name", help="Look up a member by name")
    find_name_parser.add_argument("name")

    # house
    house_parser = subparsers.add_parser("house", help="List the members of a house")
    house_parser.add_argument("house", type=str.upper, choices=houses)
    house_parser.add_argument("--order", choices=HOUSE_ORDERINGS, default="collection")
    house_parser.add_argument(
        "--names", action="store_true", help="Print names only, comma separated"
    )

    # salaries
    below_parser = subparsers.add_parser("below", help="Members earning less than AMOUNT")
    below_parser.add_argument("amount", type=float, nargs="?")
    above_parser = subparsers.add_parser("above", help="Does anyone earn more than AMOUNT?")
    above_parser.add_argument("amount", type=float, nargs="?")

    # top
    top_parser = subparsers.add_parser("top", help="Top earners of a house")
    top_parser.add_argument("house", type=str.upper, choices=houses)
    top_parser.add_argument("-n", "--limit", type=int)

    subparsers.add_parser("kings", help="All kings, names descending")
    subparsers.add_parser("royalty", help="Kings and queens versus everyone else")
    subparsers.add_parser("report", help="Salary statistics per house")

    return parser


HANDLERS = {
    "find-id": handle_find,
    "find-name": handle_find,
    "house": handle_house,
    "below": handle_below,
    "above": handle_above,
    "top": handle_top,
    "kings": lambda ctx, args: print_members(run_kings(ctx.query_service)),
    "royalty": handle_royalty,
    "report": handle_report,
}


def main(argv: Sequence[str] | None = None) -> None:
    args = build_parser().parse_args(argv)

    ctx = get_context()
    HANDLERS[args.command](ctx, args)


if __name__ == "__main__":
    main()
