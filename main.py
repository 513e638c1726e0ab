"""Quicklog demo — record a few entries and print them the way an admin page would."""

import json
import logging
import sys
from argparse import ArgumentParser

from quicklog.config import QuicklogConfig, load_config, load_config_file
from quicklog.handler import QuicklogHandler
from quicklog.quicklog import new_quicklog


def build_parser() -> ArgumentParser:
    parser = ArgumentParser(
        prog="quicklog-demo",
        description="Record sample entries into an in-memory quicklog and print them.",
    )
    parser.add_argument("--config", help="YAML config file (defaults to environment variables)")
    parser.add_argument("--capacity", type=int, help="Entries kept per group")
    parser.add_argument("--timezone", help="IANA timezone used for rendering, e.g. America/New_York")
    parser.add_argument("--exact-time", action="store_true", help="Print absolute timestamps")
    parser.add_argument("--json", action="store_true", help="Print the full snapshot as JSON")
    return parser


def resolve_config(args) -> QuicklogConfig:
    """File or environment config, then CLI flags on top."""
    config = load_config_file(args.config) if args.config else load_config()
    return QuicklogConfig(
        enabled=config.enabled,
        capacity=args.capacity if args.capacity is not None else config.capacity,
        timezone=args.timezone if args.timezone is not None else config.timezone,
        exact_time=args.exact_time or config.exact_time,
    )


def run_demo(config: QuicklogConfig, as_json: bool = False):
    ql = new_quicklog(config)

    ql.info("g1", "hi")
    ql.info("g1", "test")
    ql.warn("g1", "test")
    ql.warn("g1", "test")
    ql.warn("g2", "disk usage at %d%%", 91)

    # stdlib loggers can feed the same quicklog
    worker_logger = logging.getLogger("demo.worker")
    handler = QuicklogHandler(ql)
    worker_logger.addHandler(handler)
    try:
        worker_logger.warning("retrying job %s", "job-42")
        worker_logger.warning("retrying job %s", "job-42")
    finally:
        worker_logger.removeHandler(handler)

    if as_json:
        print(json.dumps(ql.export_snapshot(config.timezone, config.exact_time), indent=2))
        return

    for group in sorted(ql.groups()):
        print(f"== {group}")
        for entry in ql.entries(group):
            print(entry.formatted_message(config.timezone, config.exact_time))


def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )
    args = build_parser().parse_args()
    run_demo(resolve_config(args), as_json=args.json)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:
        sys.exit(0)
