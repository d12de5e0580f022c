"""
Minimal GitHub REST client for the two calls the bot needs: list the comments
on a pull request and post a new one.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from ..config import DEFAULT_API_URL
from ..errors import GitHubError
from ..models import Comment
from .context import EventContext

log = logging.getLogger(__name__)

PER_PAGE = 100


class GitHubClient:
    def __init__(
        self,
        token: str,
        *,
        api_url: str = DEFAULT_API_URL,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        self._client = httpx.Client(
            base_url=api_url,
            timeout=timeout,
            transport=transport,
            headers={
                "Authorization": f"Bearer {token}",
                "Accept": "application/vnd.github+json",
                "X-GitHub-Api-Version": "2022-11-28",
                "User-Agent": "testgen-action",
            },
        )

    def __enter__(self) -> "GitHubClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def _request(self, method: str, url: str, **kwargs: Any) -> httpx.Response:
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            raise GitHubError(f"GitHub API {method} {url} failed with status {status}", status) from e
        except httpx.HTTPError as e:
            raise GitHubError(f"GitHub API {method} {url} failed: {e}") from e
        return response

    def list_issue_comments(self, ctx: EventContext) -> List[Comment]:
        """All comments on the issue/PR, following `Link: rel="next"` pages."""
        comments: List[Comment] = []
        url: Optional[str] = ctx.comments_path
        params: Optional[Dict[str, Any]] = {"per_page": PER_PAGE}
        while url:
            response = self._request("GET", url, params=params)
            comments.extend(Comment.from_api(item) for item in response.json())
            url = response.links.get("next", {}).get("url")
            # The next link already carries the query string.
            params = None
        log.debug(f"fetched {len(comments)} comments from {ctx.comments_path}")
        return comments

    def create_issue_comment(self, ctx: EventContext, body: str) -> Comment:
        response = self._request("POST", ctx.comments_path, json={"body": body})
        return Comment.from_api(response.json())
