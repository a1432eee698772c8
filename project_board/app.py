"""Flask web backend for the project board"""

import os
from typing import Optional

import structlog
from flask import Flask

from project_board.api import board_bp, open_graph_bp, roadmap_bp
from project_board.config import BoardConfig, load_config
from project_board.github.cache import TTLCache
from project_board.github.client import GitHubClient
from project_board.github.fetchers import BoardFetcher
from project_board.log import configure_logging

logger = structlog.get_logger(__name__)


def create_app(config: Optional[BoardConfig] = None, fetcher: Optional[BoardFetcher] = None) -> Flask:
    """
    Create the board application.

    One cache, client and fetcher are built per process and live as long as
    the app; pass a fetcher to swap the GitHub layer out (e.g. in tests).
    """
    if fetcher is None:
        config = config or load_config()
        client = GitHubClient(token=config.github_token, cache=TTLCache())
        fetcher = BoardFetcher(client, config)

    app = Flask(__name__)
    app.extensions["board_fetcher"] = fetcher

    app.register_blueprint(board_bp)
    app.register_blueprint(roadmap_bp)
    app.register_blueprint(open_graph_bp)

    logger.info(
        "app_created",
        organization=fetcher.config.organization,
        repositories=list(fetcher.config.allowed_repositories),
        authenticated=bool(fetcher.client.token),
    )
    return app


if __name__ == "__main__":
    configure_logging(os.getenv("LOG_LEVEL", "INFO"), os.getenv("LOG_FORMAT", "console"))
    create_app().run(debug=True, port=5000)
