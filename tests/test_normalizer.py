"""Tests for payload normalization"""

import unittest

from project_board.github.normalizer import (
    discussion_id_from_node_id,
    filter_by_user,
    transform_discussion_node,
    transform_github_item,
)


def rest_issue(**overrides):
    item = {
        "id": 101,
        "number": 7,
        "title": "Crash on save",
        "state": "open",
        "created_at": "2024-01-01T00:00:00Z",
        "updated_at": "2024-01-02T00:00:00Z",
        "html_url": "https://github.com/acme/ui/issues/7",
        "user": {"login": "octocat", "avatar_url": "https://avatars/octocat"},
        "labels": [{"name": "bug", "color": "d73a4a"}],
        "repository_url": "https://api.github.com/repos/acme/ui",
    }
    item.update(overrides)
    return item


class TestTransformGitHubItem(unittest.TestCase):

    def test_maps_rest_fields(self):
        item = transform_github_item(rest_issue(), "issue")

        self.assertEqual(item["id"], 101)
        self.assertEqual(item["number"], 7)
        self.assertEqual(item["repository"], "ui")
        self.assertEqual(item["type"], "issue")
        self.assertEqual(item["user"], {"login": "octocat", "avatar_url": "https://avatars/octocat"})
        self.assertEqual(item["labels"], [{"name": "bug", "color": "d73a4a"}])

    def test_bare_string_label(self):
        """Test a bare string label gets the default color"""
        item = transform_github_item(rest_issue(labels=["bug"]), "issue")
        self.assertEqual(item["labels"], [{"name": "bug", "color": "000000"}])

    def test_missing_author_defaults(self):
        item = transform_github_item(rest_issue(user=None), "pr")
        self.assertEqual(item["user"], {"login": "unknown", "avatar_url": ""})

    def test_repository_from_nested_object(self):
        raw = rest_issue(repository={"name": "docs"})
        del raw["repository_url"]
        self.assertEqual(transform_github_item(raw, "pr")["repository"], "docs")

    def test_repository_missing(self):
        raw = rest_issue()
        del raw["repository_url"]
        self.assertEqual(transform_github_item(raw, "issue")["repository"], "")


class TestTransformDiscussion(unittest.TestCase):

    def test_maps_graphql_node(self):
        node = {
            "id": "D_kwDOABC123",
            "number": 3,
            "title": "Roadmap ideas",
            "url": "https://github.com/acme/roadmap/discussions/3",
            "createdAt": "2024-01-01T00:00:00Z",
            "updatedAt": "2024-03-01T00:00:00Z",
            "author": None,
            "labels": {"nodes": [{"name": "idea", "color": "00ff00"}]},
            "closed": True,
            "closedAt": "2024-03-01T00:00:00Z",
        }

        item = transform_discussion_node(node, "roadmap")

        self.assertEqual(item["id"], 123)
        self.assertEqual(item["node_id"], "D_kwDOABC123")
        self.assertEqual(item["state"], "closed")
        self.assertEqual(item["html_url"], "https://github.com/acme/roadmap/discussions/3")
        self.assertEqual(item["updated_at"], "2024-03-01T00:00:00Z")
        self.assertEqual(item["user"], {"login": "unknown", "avatar_url": ""})
        self.assertEqual(item["labels"], [{"name": "idea", "color": "00ff00"}])
        self.assertEqual(item["repository"], "roadmap")
        self.assertEqual(item["type"], "discussion")

    def test_id_without_digits_is_zero(self):
        self.assertEqual(discussion_id_from_node_id("D_kwDOABC"), 0)
        self.assertEqual(discussion_id_from_node_id("D_4a5"), 45)


class TestFilterByUser(unittest.TestCase):

    def setUp(self):
        self.items = [
            {"id": 1, "user": {"login": "Bot", "avatar_url": ""}},
            {"id": 2, "user": {"login": "alice", "avatar_url": ""}},
        ]

    def test_case_insensitive_exclusion(self):
        """Test excluded list ["bot"] removes login "Bot" and keeps others"""
        result = filter_by_user(self.items, ["bot"])
        self.assertEqual([item["id"] for item in result], [2])

    def test_no_exclusions_returns_items(self):
        self.assertEqual(filter_by_user(self.items, ()), self.items)


if __name__ == "__main__":
    unittest.main()
