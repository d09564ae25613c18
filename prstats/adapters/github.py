"""GitHub API adapter."""

import logging
from datetime import datetime
from typing import Any, Dict, Iterator, List

import requests

from prstats.adapters.base import GitPlatformAdapter, GitPlatformError
from prstats.models import PullRequest

log = logging.getLogger("prstats.github")


def _parse_iso(s: str | None) -> datetime | None:
    if not s:
        return None
    return datetime.fromisoformat(s.replace("Z", "+00:00"))


def _pull_from_api(data: Dict[str, Any]) -> PullRequest:
    user = data.get("user") or {}
    return PullRequest(
        number=data.get("number"),
        author=user.get("login"),
        state=data.get("state", "open"),
        created_at=_parse_iso(data.get("created_at")),
        closed_at=_parse_iso(data.get("closed_at")),
    )


class GitHubAdapter(GitPlatformAdapter):
    """GitHub API implementation of GitPlatformAdapter."""

    def __init__(
        self,
        token: str | None = None,
        api_url: str = "https://api.github.com",
    ) -> None:
        self.token = token
        self.api_url = api_url.rstrip("/")
        self._session = requests.Session()
        self._session.headers.update(
            {
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
            }
        )
        if token:
            self._session.headers["Authorization"] = f"Bearer {token}"

    def _request(self, method: str, path: str, **kwargs: object) -> requests.Response:
        # Pagination links are absolute URLs
        url = path if path.startswith(("http://", "https://")) else f"{self.api_url}{path}"
        resp = self._session.request(method, url, timeout=30, **kwargs)
        if resp.status_code == 404:
            raise GitPlatformError(f"Not found: {path}")
        if resp.status_code >= 400:
            msg = resp.text
            try:
                data = resp.json()
            except ValueError:
                data = None
            if isinstance(data, dict) and "message" in data:
                msg = data["message"]
            raise GitPlatformError(f"GitHub API error {resp.status_code}: {msg}")
        return resp

    def _decode_pulls(self, resp: requests.Response) -> List[PullRequest]:
        try:
            data_list = resp.json()
        except ValueError as e:
            raise GitPlatformError(f"Invalid JSON from GitHub: {e}") from e
        if not isinstance(data_list, list):
            raise GitPlatformError(f"Unexpected pull request payload: {type(data_list).__name__}")
        for data in data_list:
            if not isinstance(data, dict):
                raise GitPlatformError(f"Unexpected pull request entry: {type(data).__name__}")
        return [_pull_from_api(data) for data in data_list]

    def iter_pull_pages(
        self,
        repo: str,
        state: str,
        head: str,
        per_page: int = 100,
    ) -> Iterator[List[PullRequest]]:
        """Walk /repos/{repo}/pulls page by page.

        Follows the ``next`` relation of the Link header until a response
        has none. Every page, including the first, is yielded exactly once.
        """
        path = f"/repos/{repo}/pulls"
        params: dict | None = {"state": state, "head": head, "per_page": per_page}
        pages = 0
        records = 0
        while path:
            log.debug("GitHub pulls page: repo=%s state=%s page=%s", repo, state, pages + 1)
            resp = self._request("GET", path, params=params)
            page = self._decode_pulls(resp)
            pages += 1
            records += len(page)
            yield page
            # The next link already carries the query string
            path = (resp.links or {}).get("next", {}).get("url")
            params = None
        log.info("GitHub pulls fetched: repo=%s state=%s pages=%s records=%s", repo, state, pages, records)
