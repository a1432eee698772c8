"""Tests for search query builders"""

import unittest

from project_board.github.queries import (
    DISCUSSIONS_QUERY,
    build_query_string,
    build_repo_filter,
    build_search_query,
)


class TestBuildRepoFilter(unittest.TestCase):

    def test_empty_list_is_org_scope(self):
        self.assertEqual(build_repo_filter("acme", []), "org:acme")

    def test_plain_name_unquoted(self):
        self.assertEqual(build_repo_filter("acme", ["ab"]), "repo:acme/ab")

    def test_dot_and_hyphen_quoted(self):
        """Test names with dots or hyphens are quoted for the search grammar"""
        self.assertEqual(build_repo_filter("acme", ["a.b"]), 'repo:"acme/a.b"')
        self.assertEqual(build_repo_filter("acme", ["a-b"]), 'repo:"acme/a-b"')

    def test_order_and_duplicates_preserved(self):
        self.assertEqual(
            build_repo_filter("acme", ["z", "site.dev", "z"]),
            'repo:acme/z repo:"acme/site.dev" repo:acme/z',
        )


class TestBuildSearchQuery(unittest.TestCase):

    def test_open_issues_org_wide(self):
        self.assertEqual(build_search_query("acme", [], "issue", "open"), "org:acme is:issue is:open")

    def test_all_state_omits_clause(self):
        self.assertEqual(build_search_query("acme", ["ui"], "pr", "all"), "repo:acme/ui is:pr")


class TestQueryHelpers(unittest.TestCase):

    def test_query_string_keeps_order(self):
        self.assertEqual(
            build_query_string({"state": "open", "per_page": 100, "sort": "updated"}),
            "state=open&per_page=100&sort=updated",
        )

    def test_discussions_query_limits(self):
        self.assertIn("discussions(first: 20, orderBy: {field: UPDATED_AT, direction: DESC})", DISCUSSIONS_QUERY)
        self.assertIn("labels(first: 10)", DISCUSSIONS_QUERY)


if __name__ == "__main__":
    unittest.main()
