"""Aggregation and ranking of fetched pull requests.

Two aggregates are computed:
- open pull request count per author (records without an author are skipped)
- lifetime in hours of every closed pull request with both timestamps
  (a missing author there is an error, not a skip)
"""

import logging
from datetime import datetime
from typing import Callable, Dict, Iterable, List, TypeVar

from prstats.adapters.base import MissingFieldError
from prstats.config import TOP_N
from prstats.models import AuthorOpenCount, PullRequest, PullRequestDuration

log = logging.getLogger("prstats.stats")

T = TypeVar("T")

_SECONDS_PER_HOUR = 3600


def count_open_authors(pulls: Iterable[PullRequest]) -> Dict[str, int]:
    """Count pull requests per author login."""
    counts: Dict[str, int] = {}
    skipped = 0
    for pr in pulls:
        if not pr.author:
            skipped += 1
            continue
        counts[pr.author] = counts.get(pr.author, 0) + 1
    if skipped:
        log.debug("Skipped %s pull requests without author", skipped)
    return counts


def author_counts_to_rows(counts: Dict[str, int]) -> List[AuthorOpenCount]:
    return [AuthorOpenCount(name=name, open_count=count) for name, count in counts.items()]


def pull_duration_hours(created_at: datetime, closed_at: datetime) -> int:
    """Whole hours from created_at to closed_at, truncated toward zero."""
    seconds = int((closed_at - created_at).total_seconds())
    hours = abs(seconds) // _SECONDS_PER_HOUR
    return hours if seconds >= 0 else -hours


def collect_lifetimes(pulls: Iterable[PullRequest]) -> List[PullRequestDuration]:
    """Build one duration row per pull request that has both timestamps.

    Raises:
        MissingFieldError: If such a pull request has no author
    """
    lifetimes: List[PullRequestDuration] = []
    for pr in pulls:
        if pr.created_at is None or pr.closed_at is None:
            continue
        if not pr.author:
            raise MissingFieldError("user.login", pr.number)
        lifetimes.append(
            PullRequestDuration(
                name=pr.author,
                duration_hours=pull_duration_hours(pr.created_at, pr.closed_at),
            )
        )
    return lifetimes


def rank_top(entries: Iterable[T], key: Callable[[T], int], limit: int = TOP_N) -> List[T]:
    """Return at most `limit` entries ordered by `key` descending.

    The sort is stable: equal entries keep their input order, so ranking an
    already ranked list returns it unchanged.
    """
    ranked = sorted(entries, key=key, reverse=True)
    return ranked[:limit]
