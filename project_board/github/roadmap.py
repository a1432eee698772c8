"""Group the roadmap repository's items into stage columns"""

from project_board.github.aggregator import fetch_all_items
from project_board.github.fetchers import BoardFetcher

# Column key -> (item type, fallback label)
ROADMAP_STAGES = [
    ("discussions", "discussion", "Discussions"),
    ("issues", "issue", "Issues"),
    ("pull_requests", "pr", "Pull Requests"),
]


def build_roadmap(fetcher: BoardFetcher, org: str, state: str = "open") -> list:
    """
    Build the roadmap columns: proposals (discussions), accepted work (issues)
    and development (pull requests) of the configured roadmap repository.

    Returns:
        List of {"key", "label", "items"} dictionaries in stage order
    """
    config = fetcher.config
    labels = config.roadmap_category_labels or {}

    repo = config.roadmap_repository
    items = fetch_all_items(fetcher, org, state=state, repository=repo, allowed_repos=[repo])

    columns = []
    for key, item_type, fallback in ROADMAP_STAGES:
        columns.append({
            "key": key,
            "label": labels.get(key) or fallback,
            "items": [item for item in items if item["type"] == item_type],
        })
    return columns
