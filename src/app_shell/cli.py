import argparse
import getpass
import logging
import sys

from src.app_shell.context import ServiceContext
from src.components.auth import CreateStaffInput
from src.components.order_filter import FilterCriteria, WindowKind
from src.config.loader import load_config

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger("cli")


def get_context(config_path: str | None) -> ServiceContext:
    try:
        config = load_config(config_path)
    except ValueError as e:
        logger.error(f"Config invalid: {e}")
        sys.exit(1)
    return ServiceContext.create(config)


def handle_stats(ctx: ServiceContext, args: argparse.Namespace) -> None:
    try:
        criteria = FilterCriteria(
            branch=args.branch, window=args.window, start=args.start, end=args.end
        )
    except ValueError as e:
        logger.error(f"Invalid filter: {e}")
        sys.exit(2)

    view = ctx.dashboard.view(criteria)
    snapshot = view.snapshot
    symbol = view.currency_symbol
    print(f"Window:   {criteria.window.value} ({criteria.branch})")
    print(f"Revenue:  {symbol}{snapshot.total_revenue}")
    print(f"Orders:   {snapshot.total_orders}")
    print(f"Average:  {symbol}{snapshot.average_order_value}")
    for point in snapshot.series:
        print(f"  {point.label:<12} {symbol}{point.sales:>12}  ({point.orders})")
    for row in snapshot.by_branch:
        print(f"  [{row.name}] {symbol}{row.revenue} ({row.orders})")


def handle_create_staff(ctx: ServiceContext, args: argparse.Namespace) -> None:
    password = getpass.getpass(f"Password for {args.username}: ")
    try:
        member = ctx.auth_service.create_staff(
            CreateStaffInput(
                name=args.name,
                username=args.username,
                password=password,
                role=args.role,
                assigned_branch_ids=args.branch or [],
            )
        )
    except ValueError as e:
        logger.error(str(e))
        sys.exit(1)
    print(f"Created staff member {member.username} ({member.role}).")


def report_storage_warnings(ctx: ServiceContext) -> None:
    for failure in ctx.store.clear_warnings():
        print(f"Warning: {failure}", file=sys.stderr)


def main() -> None:
    parser = argparse.ArgumentParser(description="Restro POS CLI")
    parser.add_argument("--config", help="Path to pos.yaml")
    subparsers = parser.add_subparsers(dest="command", required=True)

    # stats
    stats_parser = subparsers.add_parser("stats", help="Print sales statistics")
    stats_parser.add_argument("--branch", default="ALL", help="Branch id or ALL")
    stats_parser.add_argument(
        "--window",
        default=WindowKind.DAILY.value,
        choices=[w.value for w in WindowKind],
    )
    stats_parser.add_argument("--start", default="", help="CUSTOM start (YYYY-MM-DD)")
    stats_parser.add_argument("--end", default="", help="CUSTOM end (YYYY-MM-DD)")

    # create-staff
    staff_parser = subparsers.add_parser("create-staff", help="Add a staff member")
    staff_parser.add_argument("--username", required=True)
    staff_parser.add_argument("--name", required=True)
    staff_parser.add_argument("--role", default="CASHIER")
    staff_parser.add_argument("--branch", action="append", help="Assigned branch id")

    args = parser.parse_args()

    ctx = get_context(args.config)
    ctx.bootstrap()

    if args.command == "stats":
        handle_stats(ctx, args)
    elif args.command == "create-staff":
        handle_create_staff(ctx, args)

    report_storage_warnings(ctx)


if __name__ == "__main__":
    main()
