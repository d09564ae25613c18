"""Abstract base class for Git platform adapters."""

from abc import ABC, abstractmethod
from typing import Iterator, List

from prstats.models import PullRequest


class GitPlatformError(Exception):
    """Raised when a Git platform API call fails."""

    pass


class MissingFieldError(GitPlatformError):
    """Raised when a record lacks a field the computation cannot do
    without."""

    def __init__(self, field: str, number: int | None = None) -> None:
        self.field = field
        self.number = number
        where = f"pull request #{number}" if number is not None else "pull request"
        super().__init__(f"Missing field '{field}' on {where}")


class GitPlatformAdapter(ABC):
    """Abstract interface for Git hosting platforms."""

    @abstractmethod
    def iter_pull_pages(
        self,
        repo: str,
        state: str,
        head: str,
        per_page: int = 100,
    ) -> Iterator[List[PullRequest]]:
        """Yield pages of pull requests in the order the server returns
        them.

        Args:
            repo: Repository in format owner/repo
            state: open or closed
            head: Branch filter passed through to the API
            per_page: Page size requested from the API

        Yields:
            One list of PullRequest per fetched page

        Raises:
            GitPlatformError: If any page request fails or cannot be decoded
        """
        pass

    def list_pulls(
        self,
        repo: str,
        state: str,
        head: str,
        per_page: int = 100,
    ) -> List[PullRequest]:
        """Fetch every page and return the records as one flat list."""
        pulls: List[PullRequest] = []
        for page in self.iter_pull_pages(repo, state, head, per_page=per_page):
            pulls.extend(page)
        return pulls
