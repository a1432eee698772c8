"""Map REST and GraphQL payloads onto the board's item shape"""

import re

_NON_DIGITS = re.compile(r"\D")


def _normalize_user(login, avatar_url) -> dict:
    # Deleted accounts come back without an author
    return {
        "login": login or "unknown",
        "avatar_url": avatar_url or "",
    }


def _normalize_labels(labels) -> list:
    normalized = []
    for label in labels or []:
        if isinstance(label, str):
            normalized.append({"name": label, "color": "000000"})
        else:
            normalized.append({"name": label.get("name"), "color": label.get("color")})
    return normalized


def repository_name(item: dict) -> str:
    """Short repository name from repository_url, else the nested repository object"""
    repository_url = item.get("repository_url")
    if repository_url:
        return repository_url.split("/")[-1]

    repository = item.get("repository")
    if repository:
        return repository.get("name", "")

    return ""


def transform_github_item(item: dict, item_type: str) -> dict:
    """
    Convert a REST issue or pull request payload to a board item

    Args:
        item: Raw REST payload from the issues, pulls or search endpoint
        item_type: "issue" or "pr"

    Returns:
        Board item dictionary
    """
    user = item.get("user") or {}

    return {
        "id": item.get("id"),
        "number": item.get("number"),
        "title": item.get("title"),
        "state": item.get("state"),
        "created_at": item.get("created_at"),
        "updated_at": item.get("updated_at"),
        "html_url": item.get("html_url"),
        "user": _normalize_user(user.get("login"), user.get("avatar_url")),
        "labels": _normalize_labels(item.get("labels")),
        "repository": repository_name(item),
        "type": item_type,
    }


def discussion_id_from_node_id(node_id: str) -> int:
    """
    Synthesize an integer id from a GraphQL global node id.

    The result is not unique across GitHub's id formats; keep the node id
    alongside it when identity matters.
    """
    digits = _NON_DIGITS.sub("", node_id or "")
    return int(digits) if digits else 0


def transform_discussion_node(node: dict, repository: str) -> dict:
    """Convert a GraphQL discussion node to a board item"""
    author = node.get("author") or {}
    labels = (node.get("labels") or {}).get("nodes") or []

    return {
        "id": discussion_id_from_node_id(node.get("id")),
        "node_id": node.get("id"),
        "number": node.get("number"),
        "title": node.get("title"),
        "state": "closed" if node.get("closed") else "open",
        "created_at": node.get("createdAt"),
        "updated_at": node.get("updatedAt"),
        "html_url": node.get("url"),
        "user": _normalize_user(author.get("login"), author.get("avatarUrl")),
        "labels": [{"name": label.get("name"), "color": label.get("color")} for label in labels],
        "repository": repository,
        "type": "discussion",
    }


def filter_by_user(items: list, excluded_users) -> list:
    """Drop items authored by an excluded user (case-insensitive)"""
    if not excluded_users:
        return items

    excluded = {username.lower() for username in excluded_users}
    return [
        item for item in items
        if ((item.get("user") or {}).get("login") or "").lower() not in excluded
    ]
