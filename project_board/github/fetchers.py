"""Fetch issues, pull requests, discussions and repository metadata for the board"""

import base64
import threading
from collections import Counter
from typing import Optional

import structlog

from project_board.config import BoardConfig
from project_board.github.client import GitHubClient
from project_board.github.normalizer import (
    filter_by_user,
    transform_discussion_node,
    transform_github_item,
)
from project_board.github.queries import (
    DISCUSSIONS_QUERY,
    build_query_string,
    build_search_query,
)

logger = structlog.get_logger(__name__)

# Per-repository list endpoints always ask for a full page
REPO_PAGE_SIZE = 100


class BoardFetcher:
    """
    Fetches board data for an organization.

    Every public method degrades instead of raising: item lookups return an
    empty list and singular lookups return None. Suppressed failures are
    logged and counted per operation; read the counts with failure_counts().
    """

    def __init__(self, client: GitHubClient, config: BoardConfig):
        self.client = client
        self.config = config
        self.failures = Counter()
        self._failures_lock = threading.Lock()

    def record_failure(self, operation: str, **fields) -> None:
        """Count and log a suppressed failure; call from inside an except block"""
        with self._failures_lock:
            self.failures[operation] += 1
        logger.exception(f"{operation}_failed", **fields)

    def failure_counts(self) -> dict:
        with self._failures_lock:
            return dict(self.failures)

    def _list_repo_items(self, org: str, repo: str, endpoint: str, state: str) -> list:
        params = build_query_string({
            "state": state,
            "per_page": REPO_PAGE_SIZE,
            "sort": "updated",
            "direction": "desc",
        })
        return self.client.rest_request(f"/repos/{org}/{repo}/{endpoint}?{params}")

    def _search_items(self, org: str, allowed_repos, kind: str, state: str) -> list:
        params = build_query_string({
            "q": build_search_query(org, allowed_repos, kind, state),
            "per_page": self.config.max_items_per_page,
            "sort": "updated",
            "order": "desc",
        })
        result = self.client.rest_request(f"/search/issues?{params}")
        if not result or not result.get("items"):
            return []
        return result["items"]

    def fetch_issues(self, org: str, state: str = "open", allowed_repos=()) -> list:
        """
        Fetch issues for the organization

        With an allow-list each repository is listed directly and tagged with
        its name; otherwise the org-wide search API is used.

        Args:
            org: Organization login
            state: "open", "closed" or "all"
            allowed_repos: Repository short names to restrict to

        Returns:
            List of board items with type "issue"
        """
        try:
            if allowed_repos:
                issues = []
                for repo in allowed_repos:
                    try:
                        raw_items = self._list_repo_items(org, repo, "issues", state)
                        # The issues endpoint also returns pull requests
                        for raw in raw_items:
                            if raw.get("pull_request"):
                                continue
                            issue = transform_github_item(raw, "issue")
                            issue["repository"] = repo
                            issues.append(issue)
                    except Exception:
                        self.record_failure("repo_issues", org=org, repo=repo)
                return filter_by_user(issues, self.config.excluded_users)

            raw_items = self._search_items(org, allowed_repos, "issue", state)
            issues = [transform_github_item(raw, "issue") for raw in raw_items]
            return filter_by_user(issues, self.config.excluded_users)
        except Exception:
            self.record_failure("issues", org=org)
            return []

    def fetch_pull_requests(self, org: str, state: str = "open", allowed_repos=()) -> list:
        """Fetch pull requests, with the same strategy as fetch_issues"""
        try:
            if allowed_repos:
                prs = []
                for repo in allowed_repos:
                    try:
                        for raw in self._list_repo_items(org, repo, "pulls", state):
                            pr = transform_github_item(raw, "pr")
                            pr["repository"] = repo
                            prs.append(pr)
                    except Exception:
                        self.record_failure("repo_pull_requests", org=org, repo=repo)
                return filter_by_user(prs, self.config.excluded_users)

            raw_items = self._search_items(org, allowed_repos, "pr", state)
            prs = [transform_github_item(raw, "pr") for raw in raw_items]
            return filter_by_user(prs, self.config.excluded_users)
        except Exception:
            self.record_failure("pull_requests", org=org)
            return []

    def fetch_discussions(self, org: str, allowed_repos=()) -> list:
        """
        Fetch the most recently updated discussions of each repository via GraphQL

        There is no org-wide discussion search, so without an allow-list the
        organization's repositories are listed first.
        """
        try:
            repos_to_fetch = list(allowed_repos) if allowed_repos else self.get_org_repositories(org)
            if not repos_to_fetch:
                return []

            discussions = []
            for repo in repos_to_fetch:
                try:
                    data = self.client.graphql_request(DISCUSSIONS_QUERY, {"owner": org, "repo": repo})
                    repository = (data or {}).get("repository") or {}
                    nodes = (repository.get("discussions") or {}).get("nodes")
                    if not nodes:
                        continue
                    discussions.extend(transform_discussion_node(node, repo) for node in nodes)
                except Exception:
                    self.record_failure("repo_discussions", org=org, repo=repo)

            return filter_by_user(discussions, self.config.excluded_users)
        except Exception:
            self.record_failure("discussions", org=org)
            return []

    def get_org_repositories(self, org: str) -> list:
        """
        List the organization's repository names, most recently updated first

        When an allow-list is configured only allowed names are kept, in the
        search API's order.
        """
        try:
            params = build_query_string({
                "q": f"org:{org}",
                "per_page": 100,
                "sort": "updated",
                "order": "desc",
            })
            result = self.client.rest_request(f"/search/repositories?{params}")
            if not result or not result.get("items"):
                return []

            repos = [repo.get("name") for repo in result["items"] if repo.get("name")]

            allowed = self.config.allowed_repositories
            if allowed:
                return [name for name in repos if name in allowed]
            return repos
        except Exception:
            self.record_failure("repositories", org=org)
            return []

    def fetch_organization(self, org: str) -> Optional[dict]:
        """Fetch organization details (login, avatar_url, description, ...)"""
        try:
            return self.client.rest_request(f"/orgs/{org}")
        except Exception:
            self.record_failure("organization", org=org)
            return None

    def fetch_readme(self, org: str, repo: str) -> Optional[str]:
        """Fetch a repository README as plain text"""
        try:
            response = self.client.rest_request(f"/repos/{org}/{repo}/readme")

            if response.get("encoding") == "base64":
                content = response["content"].replace("\n", "")
                return base64.b64decode(content).decode("utf-8", errors="replace")

            return response.get("content")
        except Exception:
            self.record_failure("readme", org=org, repo=repo)
            return None
