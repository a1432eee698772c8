"""GitHub data access for the project board"""

from .cache import CacheEntry, TTLCache
from .client import GitHubClient
from .errors import GitHubAPIError, GitHubError, GraphQLError
from .fetchers import BoardFetcher
from .aggregator import default_repository, fetch_all_items, list_repositories
from .roadmap import build_roadmap
