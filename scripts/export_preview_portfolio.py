#!/usr/bin/env python3
"""Generate a preview portfolio and write it to JSON files.

One file per entity collection is written to the output directory, in the
same shape the reports are computed from.
"""

import argparse
import sys
import time
import uuid
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from estate_reports.logging import get_logger, setup_logging
from estate_reports.models.base import AccountScope
from estate_reports.scenarios import PreviewPortfolioScenario
from estate_reports.sinks import ConsoleSink, JsonFileSink

logger = get_logger("scripts.export_preview_portfolio")


def main() -> None:
    """Main entry point."""
    parser = argparse.ArgumentParser(description="Export a generated preview portfolio")
    parser.add_argument(
        "--company",
        type=str,
        default=None,
        help="Company account id (default: a random id)",
    )
    parser.add_argument(
        "--buildings",
        type=int,
        default=3,
        help="Number of buildings to generate (default: 3)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=42,
        help="Random seed for reproducibility (default: 42)",
    )
    parser.add_argument(
        "--output-dir",
        type=Path,
        default=Path("local/preview"),
        help="Output directory (default: local/preview)",
    )
    parser.add_argument(
        "--console",
        action="store_true",
        help="Also print the first records of each collection",
    )
    args = parser.parse_args()

    setup_logging(level="INFO")

    scope = AccountScope.company(args.company or str(uuid.uuid4()))
    t0 = time.perf_counter()
    scenario = PreviewPortfolioScenario(scope, num_buildings=args.buildings, seed=args.seed)
    store = scenario.generate()
    logger.info("Generated portfolio for %s in %.1fs", scope, time.perf_counter() - t0)

    sinks = [JsonFileSink(args.output_dir, pretty=True)]
    if args.console:
        sinks.append(ConsoleSink(max_records=3))
    scenario.export(sinks)
    for sink in sinks:
        sink.close()

    logger.info("Portfolio summary: %s", store.summary())


if __name__ == "__main__":
    main()
