"""Centralized configuration for the project board"""

import copy
import os
from dataclasses import dataclass, field
from typing import Callable, Optional

from dotenv import load_dotenv

load_dotenv()


# =============================================================================
# GitHub Configuration
# =============================================================================

# API
GITHUB_API_BASE = "https://api.github.com"
GITHUB_GRAPHQL_URL = "https://api.github.com/graphql"
GITHUB_API_VERSION = "2022-11-28"

# Seconds before an upstream request is abandoned
REQUEST_TIMEOUT = 30


# =============================================================================
# Cache Configuration
# =============================================================================

CACHE_TTL_MS = 5 * 60 * 1000  # 5 minutes


# =============================================================================
# Board Configuration
# =============================================================================

# Organization shown on the board
BOARD_ORGANIZATION = "withstudiocms"

# Leave empty to show every repository in the organization
ALLOWED_REPOSITORIES = [
    "studiocms",
    "cfetch",
    "bots",
    "docs",
    "ui",
    "expressive-code-twoslash",
    "studiocms.dev",
]

# Bot and automation accounts hidden from the board
EXCLUDED_USERS = []

MAX_ITEMS_PER_PAGE = 100
ENABLE_DISCUSSIONS = True
DEFAULT_REPOSITORY = "studiocms"


# =============================================================================
# Roadmap Configuration
# =============================================================================

ROADMAP_REPOSITORY = "roadmap"

ROADMAP_CATEGORY_LABELS = {
    "discussions": "Stage 1: Proposals",
    "issues": "Stage 2: Accepted Proposals",
    "pull_requests": "Stage 3: RFC & Development",
}


# =============================================================================
# Open Graph Configuration
# =============================================================================

OPEN_GRAPH_TEMPLATES = {
    "index": {
        "title": "{{org}} Project Board",
        "description": "A project board for {{org}} GitHub issues, pull requests, and discussions.",
    },
    "roadmap": {
        "title": "{{org}} Project Roadmap",
        "description": "A roadmap for upcoming features and improvements. Stay tuned for what's next!",
    },
}


def alphabetical(name: str) -> tuple:
    """Default repository ordering (a-z, case-insensitive)"""
    return (name.lower(), name)


@dataclass(frozen=True)
class BoardConfig:
    """Read-only settings injected into the fetchers and the web layer"""

    organization: str
    github_token: Optional[str] = None
    allowed_repositories: tuple = ()
    max_items_per_page: int = MAX_ITEMS_PER_PAGE
    enable_discussions: bool = True
    excluded_users: tuple = ()
    default_repository: Optional[str] = None
    roadmap_repository: str = ROADMAP_REPOSITORY
    roadmap_category_labels: dict = field(default_factory=dict)
    open_graph: dict = field(default_factory=lambda: copy.deepcopy(OPEN_GRAPH_TEMPLATES))
    repository_sort: Callable[[str], object] = alphabetical


def _env_list(name: str, default: list) -> tuple:
    raw = os.getenv(name)
    if raw is None:
        return tuple(default)
    return tuple(part.strip() for part in raw.split(",") if part.strip())


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in ("1", "true", "yes", "on")


def load_config() -> BoardConfig:
    """
    Build the board configuration from the constants above, overridden by
    environment variables (a .env file is honoured).

    Raises:
        ValueError: If BOARD_MAX_ITEMS_PER_PAGE is not an integer
    """
    max_items = os.getenv("BOARD_MAX_ITEMS_PER_PAGE")

    return BoardConfig(
        organization=os.getenv("BOARD_ORGANIZATION", BOARD_ORGANIZATION),
        github_token=os.getenv("GITHUB_TOKEN") or None,
        allowed_repositories=_env_list("BOARD_ALLOWED_REPOSITORIES", ALLOWED_REPOSITORIES),
        max_items_per_page=int(max_items) if max_items else MAX_ITEMS_PER_PAGE,
        enable_discussions=_env_bool("BOARD_ENABLE_DISCUSSIONS", ENABLE_DISCUSSIONS),
        excluded_users=_env_list("BOARD_EXCLUDED_USERS", EXCLUDED_USERS),
        default_repository=os.getenv("BOARD_DEFAULT_REPOSITORY", DEFAULT_REPOSITORY) or None,
        roadmap_repository=os.getenv("BOARD_ROADMAP_REPOSITORY", ROADMAP_REPOSITORY),
        roadmap_category_labels=dict(ROADMAP_CATEGORY_LABELS),
    )
