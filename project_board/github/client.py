"""Cached GitHub REST and GraphQL transport"""

import json
from typing import Optional

import requests
import structlog

from project_board.config import (
    GITHUB_API_BASE,
    GITHUB_API_VERSION,
    GITHUB_GRAPHQL_URL,
    REQUEST_TIMEOUT,
)
from project_board.github.cache import TTLCache
from project_board.github.errors import GitHubAPIError, GraphQLError

logger = structlog.get_logger(__name__)


class GitHubClient:
    """GitHub client that consults the shared cache before every request"""

    def __init__(self, token: Optional[str] = None, cache: Optional[TTLCache] = None,
                 session: Optional[requests.Session] = None,
                 api_base: str = GITHUB_API_BASE,
                 graphql_url: str = GITHUB_GRAPHQL_URL,
                 timeout: float = REQUEST_TIMEOUT):
        """
        Initialize the client

        Args:
            token: GitHub personal access token; requests go out unauthenticated without one
            cache: Cache shared by both request paths (a private one is created if omitted)
            session: requests session to send through
            api_base: REST base URL
            graphql_url: GraphQL endpoint URL
            timeout: Seconds before a request is abandoned
        """
        self.token = token
        self.cache = cache if cache is not None else TTLCache()
        self.session = session or requests.Session()
        self.api_base = api_base.rstrip("/")
        self.graphql_url = graphql_url
        self.timeout = timeout

    def _auth_headers(self) -> dict:
        if self.token:
            return {"Authorization": f"Bearer {self.token}"}
        return {}

    def rest_request(self, endpoint: str):
        """
        GET a REST endpoint (path plus query string, e.g. /orgs/acme)

        Returns:
            Parsed JSON body

        Raises:
            GitHubAPIError: On a non-2xx response
            ValueError: If the body is not valid JSON
        """
        cache_key = f"rest:{endpoint}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        headers = {
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            **self._auth_headers(),
        }

        url = f"{self.api_base}{endpoint}"
        response = self.session.get(url, headers=headers, timeout=self.timeout)

        if not 200 <= response.status_code < 300:
            logger.error("github_api_error", url=url, status=response.status_code, reason=response.reason)
            raise GitHubAPIError(response.status_code, response.reason, url)

        data = response.json()
        self.cache.put(cache_key, data)
        return data

    def graphql_request(self, query: str, variables: Optional[dict] = None):
        """
        Execute a GraphQL query

        The cache key uses the raw query text, so queries that differ only in
        whitespace are cached separately.

        Returns:
            The "data" member of the response

        Raises:
            GitHubAPIError: On a non-2xx response
            GraphQLError: If the response carries an errors array
        """
        cache_key = f"graphql:{query}:{json.dumps(variables or {})}"
        cached = self.cache.get(cache_key)
        if cached is not None:
            return cached

        headers = {
            "Accept": "application/vnd.github+json",
            "Content-Type": "application/json",
            **self._auth_headers(),
        }

        response = self.session.post(
            self.graphql_url,
            headers=headers,
            json={"query": query, "variables": variables},
            timeout=self.timeout,
        )

        if not 200 <= response.status_code < 300:
            logger.error("github_graphql_error", status=response.status_code, reason=response.reason)
            raise GitHubAPIError(response.status_code, response.reason, self.graphql_url)

        result = response.json()

        if result.get("errors") is not None:
            logger.error("graphql_errors", errors=result["errors"])
            raise GraphQLError(result["errors"])

        data = result.get("data")
        self.cache.put(cache_key, data)
        return data
