"""Search query strings and GraphQL documents"""

import re
from urllib.parse import urlencode

# GitHub's search grammar needs quoting around repo tokens containing these
_NEEDS_QUOTES = re.compile(r"[.\-]")

# Page size and label limit are fixed; extra labels are truncated
DISCUSSIONS_QUERY = """
query($owner: String!, $repo: String!) {
  repository(owner: $owner, name: $repo) {
    discussions(first: 20, orderBy: {field: UPDATED_AT, direction: DESC}) {
      nodes {
        id
        number
        title
        url
        createdAt
        updatedAt
        author {
          login
          avatarUrl
        }
        labels(first: 10) {
          nodes {
            name
            color
          }
        }
        closed
        closedAt
      }
    }
  }
}
"""


def build_repo_filter(org: str, repos) -> str:
    """
    Build the repository scope of a search query.

    An empty repo list scopes the search to the whole organization. Tokens
    keep input order and duplicates are not removed.
    """
    if not repos:
        return f"org:{org}"

    tokens = []
    for repo in repos:
        if _NEEDS_QUOTES.search(repo):
            tokens.append(f'repo:"{org}/{repo}"')
        else:
            tokens.append(f"repo:{org}/{repo}")
    return " ".join(tokens)


def build_search_query(org: str, repos, kind: str, state: str) -> str:
    """Issue search query for kind "issue" or "pr"; state "all" adds no clause"""
    state_query = "" if state == "all" else f"is:{state}"
    return f"{build_repo_filter(org, repos)} is:{kind} {state_query}".strip()


def build_query_string(params: dict) -> str:
    """URL-encode parameters in insertion order so endpoints make stable cache keys"""
    return urlencode(params)
