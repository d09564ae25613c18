"""Data models for fetched pull requests and derived report rows (Pydantic)."""

from datetime import datetime

from pydantic import BaseModel


class PullRequest(BaseModel):
    """Pull request as returned by the platform API.

    Any field may be absent on the wire; absence is kept as None so
    aggregation can decide whether to skip or fail.
    """

    number: int | None = None
    author: str | None = None
    state: str = "open"
    created_at: datetime | None = None
    closed_at: datetime | None = None


class AuthorOpenCount(BaseModel):
    """Author and number of their open pull requests."""

    name: str
    open_count: int


class PullRequestDuration(BaseModel):
    """Author of a closed pull request and how long it stayed open."""

    name: str
    duration_hours: int
