#!/usr/bin/env python
"""Run the functional verification scenarios against a server platform.

Usage:
    python main.py --endpoint https://localhost:9443 --server serverinmem --server servergraph
"""

from __future__ import annotations

import argparse
import sys

from metadata_fvt.connection import build_connection_table
from metadata_fvt.core.config import settings
from metadata_fvt.core.logging import setup_logging
from metadata_fvt.runner import SCENARIOS, FVTRunner


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description=__doc__.splitlines()[0])
    parser.add_argument("--endpoint", default=settings.platform_url, help="Server platform root URL")
    parser.add_argument(
        "--server",
        action="append",
        dest="servers",
        help="Server name (backend variant); repeat for several. Defaults to FVT_SERVERS.",
    )
    parser.add_argument("--user", default=settings.user_id, help="Caller identity")
    parser.add_argument(
        "--scenario",
        action="append",
        dest="scenarios",
        choices=sorted(SCENARIOS),
        help="Scenario to run; repeat for several. Defaults to all.",
    )
    parser.add_argument("--log-level", default=None, help="Override FVT_LOG_LEVEL")
    parser.add_argument("--log-format", choices=["json", "text"], default=None, help="Override FVT_LOG_FORMAT")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(level=args.log_level, fmt=args.log_format)

    table = build_connection_table(args.endpoint, args.user, args.servers or settings.server_names)
    report = FVTRunner(scenarios=args.scenarios).run(table)

    print(report.summary())
    return 0 if report.passed else 1


if __name__ == "__main__":
    sys.exit(main())
