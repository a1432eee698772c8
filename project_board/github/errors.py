"""Errors raised by the GitHub transport"""


class GitHubError(Exception):
    """Base class for failures talking to GitHub"""


class GitHubAPIError(GitHubError):
    """Non-2xx HTTP response from the REST or GraphQL endpoint"""

    def __init__(self, status: int, status_text: str, url: str = ""):
        self.status = status
        self.status_text = status_text
        self.url = url
        super().__init__(f"GitHub API request failed: {status} {status_text}")


class GraphQLError(GitHubError):
    """GraphQL response carrying a top-level errors array"""

    def __init__(self, errors: list):
        self.errors = errors
        super().__init__(f"GraphQL errors: {errors}")
