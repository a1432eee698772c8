"""Fake GitHub session used by the fetcher, aggregator and API tests"""

from urllib.parse import parse_qs, urlsplit
from unittest.mock import Mock

from project_board.config import BoardConfig
from project_board.github.cache import TTLCache
from project_board.github.client import GitHubClient
from project_board.github.fetchers import BoardFetcher


def make_response(status_code=200, body=None, reason="OK"):
    response = Mock()
    response.status_code = status_code
    response.reason = reason
    response.json.return_value = body
    return response


class FakeSession:
    """
    Serves REST bodies keyed by URL path and GraphQL bodies keyed by repo name.
    A value that is an int is returned as that HTTP error status; an exception
    instance is raised as a transport failure.
    """

    def __init__(self, rest=None, discussions=None):
        self.rest = rest or {}
        self.discussions = discussions or {}
        self.get_calls = []
        self.post_calls = []

    def get(self, url, headers=None, timeout=None):
        parts = urlsplit(url)
        self.get_calls.append((parts.path, parse_qs(parts.query)))
        return self._respond(self.rest.get(parts.path, 404))

    def post(self, url, headers=None, json=None, timeout=None):
        repo = json["variables"]["repo"]
        self.post_calls.append(repo)
        return self._respond(self.discussions.get(repo, 404))

    def _respond(self, body):
        if isinstance(body, Exception):
            raise body
        if isinstance(body, int):
            return make_response(status_code=body, reason="Error")
        return make_response(body=body)


def make_fetcher(session, **config_overrides):
    settings = {"organization": "acme"}
    settings.update(config_overrides)
    config = BoardConfig(**settings)
    client = GitHubClient(token="secret", cache=TTLCache(), session=session)
    return BoardFetcher(client, config)


def rest_item(number, updated_at, repo="ui", login="octocat", **extra):
    item = {
        "id": 1000 + number,
        "number": number,
        "title": f"Item {number}",
        "state": "open",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": updated_at,
        "html_url": f"https://github.com/acme/{repo}/issues/{number}",
        "user": {"login": login, "avatar_url": ""},
        "labels": [],
        "repository_url": f"https://api.github.com/repos/acme/{repo}",
    }
    item.update(extra)
    return item


def discussion_node(number, updated_at, login="octocat"):
    return {
        "id": f"D_kwDO{number}",
        "number": number,
        "title": f"Discussion {number}",
        "url": f"https://github.com/acme/x/discussions/{number}",
        "createdAt": "2024-01-01T00:00:00Z",
        "updatedAt": updated_at,
        "author": {"login": login, "avatarUrl": ""},
        "labels": {"nodes": []},
        "closed": False,
        "closedAt": None,
    }


def discussions_body(*nodes):
    return {"data": {"repository": {"discussions": {"nodes": list(nodes)}}}}
