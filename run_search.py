#!/usr/bin/env python3
"""Search JSearch from the command line and optionally open one job's details.

Usage:
  python run_search.py "python developer in pune"
  python run_search.py "data engineer" --select 1
  python run_search.py --job-id "abc123=="
"""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).resolve().parent))

from jobhub.config import load_settings
from jobhub.errors import ConfigError
from jobhub.hub import JobHub
from jobhub.log import get_logger
from jobhub.presenter import detail_lines, summary_lines

log = get_logger(__name__)


def _parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Search jobs via the JSearch API")
    p.add_argument("query", nargs="?", default=None, help="free-text search (default from settings)")
    p.add_argument("--job-id", help="fetch details for this job id and skip the search")
    p.add_argument("--select", type=int, metavar="N", help="fetch details for the N-th search result")
    return p.parse_args(argv)


def _print(lines: list[str]) -> None:
    print("\n".join(lines))


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    try:
        settings = load_settings()
    except ConfigError as exc:
        log.error("%s", exc)
        return 1

    with JobHub(settings) as hub:
        if not args.job_id:
            state = hub.search(args.query or settings.default_query)
            if state.is_error:
                log.error(state.message)
                return 1
            if not hub.jobs:
                print("No jobs found.")
            for i, job in enumerate(hub.jobs, start=1):
                _print(summary_lines(i, job))
            if args.select is None:
                return 0
            if not 1 <= args.select <= len(hub.jobs):
                log.error("--select must be between 1 and %d", len(hub.jobs))
                return 1
            hub.select_job(hub.jobs[args.select - 1].id)
        else:
            hub.select_job(args.job_id)

        state = hub.fetch_detail()
        if state.is_error:
            log.error(state.message)
            return 1
        if hub.detail is None:
            print(f"No details found for job {hub.view.selected_job_id}.")
            return 0
        print()
        _print(detail_lines(hub.detail))
    return 0


if __name__ == "__main__":
    sys.exit(main())
