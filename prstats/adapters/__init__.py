"""Git platform adapters."""

from prstats.adapters.base import GitPlatformAdapter, GitPlatformError, MissingFieldError
from prstats.adapters.github import GitHubAdapter

__all__ = ["GitPlatformAdapter", "GitPlatformError", "MissingFieldError", "GitHubAdapter"]
