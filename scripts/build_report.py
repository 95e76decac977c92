#!/usr/bin/env python3
"""Build one report for one account and print or save it as JSON.

Connection settings, retries, caching and preview mode come from the
environment (see ``ReportingConfig.from_env``).

Usage::

    python scripts/build_report.py dashboard-summary --company <uuid>
    ESTATE_REPORTS_PREVIEW_MODE=true python scripts/build_report.py financial --user <uuid>
"""

import argparse
import sys
from datetime import datetime
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from estate_reports.config import ReportingConfig
from estate_reports.exceptions import ReportingError
from estate_reports.logging import get_logger, setup_logging
from estate_reports.models.base import AccountScope, DateRange, Granularity
from estate_reports.reports import ReportRequest, ReportType, Role, build_assembler
from estate_reports.sinks import ConsoleSink, JsonFileSink

logger = get_logger("scripts.build_report")


def parse_date(value: str) -> datetime:
    """argparse type for ISO dates and datetimes."""
    try:
        return datetime.fromisoformat(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"not an ISO date: {value!r}") from None


def window(
    parser: argparse.ArgumentParser,
    start: datetime | None,
    end: datetime | None,
    flags: str,
) -> DateRange | None:
    """Both bounds or neither; a lone bound is a usage error."""
    if start is None and end is None:
        return None
    if start is None or end is None:
        parser.error(f"{flags} must be given together")
    try:
        return DateRange(start, end)
    except ValueError as e:
        parser.error(str(e))


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Assemble a reporting view model as JSON")
    parser.add_argument(
        "report_type",
        choices=[t.value for t in ReportType],
        help="Report to build",
    )
    parser.add_argument("--company", type=str, help="Company account id")
    parser.add_argument("--user", type=str, help="User id (used when no company is given)")
    parser.add_argument(
        "--role",
        choices=[r.value for r in Role],
        default=Role.ADMIN.value,
        help="Session role (default: admin)",
    )
    parser.add_argument("--start", type=parse_date, help="Cumulative window start (default: all time)")
    parser.add_argument("--end", type=parse_date, help="Cumulative window end")
    parser.add_argument("--trend-start", type=parse_date, help="Trend window start")
    parser.add_argument("--trend-end", type=parse_date, help="Trend window end")
    parser.add_argument(
        "--granularity",
        choices=[g.value for g in Granularity],
        help="Trend period length (default depends on report)",
    )
    parser.add_argument("--as-of", type=parse_date, help="Reference time (default: now)")
    parser.add_argument("--output-dir", type=Path, help="Write <report>.json here instead of stdout")
    parser.add_argument(
        "--snake-case",
        action="store_true",
        help="Keep snake_case keys (default output is camelCase)",
    )
    args = parser.parse_args(argv)
    date_range = window(parser, args.start, args.end, "--start and --end")
    trend_range = window(parser, args.trend_start, args.trend_end, "--trend-start and --trend-end")

    config = ReportingConfig.from_env()
    setup_logging(level=config.log_level, format_type=config.log_format)

    try:
        scope = AccountScope.resolve(args.company, args.user)
        request = ReportRequest(
            scope=scope,
            report_type=ReportType(args.report_type),
            role=args.role,
            date_range=date_range,
            trend_range=trend_range,
            granularity=Granularity(args.granularity) if args.granularity else None,
            as_of=args.as_of,
        )
        report = build_assembler(config).assemble(request)
    except (ReportingError, ValueError) as e:
        logger.error("Report failed: %s", e)
        return 1

    camel_case = not args.snake_case
    if args.output_dir:
        path = JsonFileSink(args.output_dir, pretty=True, camel_case=camel_case).write_report(
            args.report_type, report
        )
        logger.info("Wrote %s", path)
    else:
        ConsoleSink(pretty=True, camel_case=camel_case).write_report(args.report_type, report)
    return 0


if __name__ == "__main__":
    sys.exit(main())
