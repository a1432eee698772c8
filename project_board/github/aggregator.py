"""Combine the per-type fetchers into the board's item list"""

from datetime import datetime
from typing import Optional

import structlog

from project_board.github.fetchers import BoardFetcher

logger = structlog.get_logger(__name__)

VALID_STATES = ("open", "closed", "all")
VALID_TYPES = ("issue", "pr", "discussion", "all")


def _updated_timestamp(item: dict) -> float:
    try:
        return datetime.fromisoformat(item["updated_at"].replace("Z", "+00:00")).timestamp()
    except (KeyError, AttributeError, TypeError, ValueError):
        # Unparseable timestamps sort last
        return float("-inf")


def fetch_all_items(fetcher: BoardFetcher, org: str, state: str = "open",
                    type: str = "all", repository: Optional[str] = None,
                    allowed_repos=None) -> list:
    """
    Fetch issues, pull requests and discussions, most recently updated first

    Args:
        fetcher: Fetcher carrying the client and board configuration
        org: Organization login
        state: "open", "closed" or "all"
        type: "issue", "pr", "discussion" or "all"
        repository: Keep only this repository's items ("all" or None keeps everything)
        allowed_repos: Repositories to fetch from, defaults to the configured allow-list

    Returns:
        Board items sorted by updated_at descending (stable for ties)
    """
    config = fetcher.config
    if allowed_repos is None:
        allowed_repos = config.allowed_repositories

    try:
        items = []

        if type in ("all", "issue"):
            items.extend(fetcher.fetch_issues(org, state, allowed_repos))

        if type in ("all", "pr"):
            items.extend(fetcher.fetch_pull_requests(org, state, allowed_repos))

        if type in ("all", "discussion") and config.enable_discussions:
            items.extend(fetcher.fetch_discussions(org, allowed_repos))

        if repository and repository != "all":
            items = [item for item in items if item.get("repository") == repository]

        return sorted(items, key=_updated_timestamp, reverse=True)
    except Exception:
        fetcher.record_failure("all_items", org=org, state=state, type=type)
        return []


def list_repositories(fetcher: BoardFetcher, org: str) -> list:
    """Repository names for the board's picker, ordered by the configured sort"""
    return sorted(fetcher.get_org_repositories(org), key=fetcher.config.repository_sort)


def default_repository(config, repos: list) -> Optional[str]:
    """The configured default if it is listed, else the first repository"""
    if config.default_repository and config.default_repository in repos:
        return config.default_repository
    return repos[0] if repos else None
