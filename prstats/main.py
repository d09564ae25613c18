"""prstats entry point.

Prints two reports for a fixed GitHub repository, one after the other:
authors with the most open pull requests, then the longest-lived closed
pull requests. Takes no options; API access and logging come from
config.yaml and env (GITHUB_TOKEN, LOGGING_LEVEL).
"""

import argparse
import logging
import sys
from pathlib import Path

from rich.console import Console

from prstats.adapters.base import GitPlatformAdapter
from prstats.adapters.github import GitHubAdapter
from prstats.config import PAGE_SIZE, REPOSITORY, TARGET_BRANCH, load_config
from prstats.logging import PrStatsLogging
from prstats.report import AUTHOR_COLUMNS, DURATION_COLUMNS, print_report
from prstats.stats import author_counts_to_rows, collect_lifetimes, count_open_authors, rank_top

AUTHORS_CAPTION = "Authors and open PRs"
LIFETIMES_CAPTION = "Lifetime of PRs"


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments (none besides --help)."""
    parser = argparse.ArgumentParser(
        prog="prstats",
        description=(
            f"Top authors by open pull requests and longest-lived closed pull requests "
            f"for {REPOSITORY} ({TARGET_BRANCH})"
        ),
    )
    return parser.parse_args(argv)


def print_top_authors(adapter: GitPlatformAdapter, console: Console) -> None:
    """Fetch open pull requests and print the top authors by count."""
    pulls = adapter.list_pulls(REPOSITORY, "open", TARGET_BRANCH, per_page=PAGE_SIZE)
    rows = author_counts_to_rows(count_open_authors(pulls))
    top = rank_top(rows, key=lambda row: row.open_count)
    print_report(console, AUTHORS_CAPTION, top, AUTHOR_COLUMNS)


def print_lifetimes(adapter: GitPlatformAdapter, console: Console) -> None:
    """Fetch closed pull requests and print the longest-lived ones."""
    pulls = adapter.list_pulls(REPOSITORY, "closed", TARGET_BRANCH, per_page=PAGE_SIZE)
    top = rank_top(collect_lifetimes(pulls), key=lambda row: row.duration_hours)
    print_report(console, LIFETIMES_CAPTION, top, DURATION_COLUMNS)


def main(argv: list[str] | None = None) -> int:
    """Entry point: run both reports sequentially."""
    parse_args(argv)
    config = load_config(Path("config.yaml"))
    PrStatsLogging(config.logging).setup()
    log = logging.getLogger("prstats")

    token = config.github_token_resolved
    if not token:
        log.debug("No GitHub token configured, using anonymous requests")
    adapter = GitHubAdapter(token=token, api_url=config.github.api_url)
    console = Console(highlight=False)

    try:
        print_top_authors(adapter, console)
        print_lifetimes(adapter, console)
    except KeyboardInterrupt:
        return 130
    except Exception as e:
        log.exception("Fatal error: %s", e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
