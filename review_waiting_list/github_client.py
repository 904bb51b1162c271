"""GitHub GraphQL client fetching open pull requests."""

import os
import logging
from typing import Any, Optional

import requests

from .config import DEFAULT_PAGE_SIZE, GITHUB_API_URL, GITHUB_GRAPHQL_PATH, REQUEST_TIMEOUT_S, USER_AGENT
from .github_queries import SEARCH_PULL_REQUESTS_QUERY

logger = logging.getLogger(__name__)


class GitHubAPIError(Exception):
    pass


class GitHubClient:
    """Handles communication with the GitHub GraphQL API."""

    BASE_URL = GITHUB_API_URL

    def __init__(self, token: Optional[str] = None):
        self.token = token or os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")
        if not self.token:
            raise GitHubAPIError(
                "No GitHub token found. Pass --token or set GITHUB_TOKEN (or GH_TOKEN)."
            )
        self.session = requests.Session()
        self.session.headers.update({
            "Authorization": f"bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "User-Agent": USER_AGENT,
        })

    def graphql(self, query: str, variables: Optional[dict] = None) -> dict:
        url = f"{self.BASE_URL}{GITHUB_GRAPHQL_PATH}"
        logger.debug("POST %s variables=%s", url, variables)
        try:
            response = self.session.post(
                url,
                json={"query": query, "variables": variables or {}},
                timeout=REQUEST_TIMEOUT_S,
            )
        except requests.exceptions.RequestException as e:
            logger.warning("GraphQL request failed: %s", e)
            raise GitHubAPIError(f"GitHub request failed: {e}") from e

        if response.status_code >= 400:
            logger.warning("GraphQL request returned HTTP %d", response.status_code)
            raise GitHubAPIError(f"GitHub API error {response.status_code}: {response.text[:500]}")

        payload = response.json()
        if payload.get("errors"):
            raise GitHubAPIError(f"GitHub GraphQL errors: {payload['errors']}")
        return payload.get("data") or {}

    def search_pull_requests(self, search_query: str, first: int = DEFAULT_PAGE_SIZE) -> list[dict[str, Any]]:
        """Fetch a single page of pull requests matching a search query."""
        data = self.graphql(SEARCH_PULL_REQUESTS_QUERY, {"query": search_query, "first": first})
        nodes = (data.get("search") or {}).get("nodes") or []
        # Non-PR search hits come back as empty objects.
        pull_requests = [n for n in nodes if isinstance(n, dict) and n.get("url")]
        logger.info("Fetched %d pull requests for query: %s", len(pull_requests), search_query)
        return pull_requests
