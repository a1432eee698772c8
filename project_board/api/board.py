"""Board API endpoints"""

from flask import Blueprint, current_app, jsonify, request

from project_board.github.aggregator import (
    VALID_STATES,
    VALID_TYPES,
    default_repository,
    fetch_all_items,
    list_repositories,
)

board_bp = Blueprint('board', __name__, url_prefix='/api')


def get_fetcher():
    """Fetcher created for this process by create_app"""
    return current_app.extensions["board_fetcher"]


@board_bp.route("/items")
def get_items():
    """Get issues, pull requests and discussions for the board"""
    state = request.args.get("state", "open")
    item_type = request.args.get("type", "all")
    repository = request.args.get("repository")

    if state not in VALID_STATES:
        return jsonify({"error": f"Invalid state: {state}"}), 400
    if item_type not in VALID_TYPES:
        return jsonify({"error": f"Invalid type: {item_type}"}), 400

    try:
        fetcher = get_fetcher()
        items = fetch_all_items(
            fetcher,
            fetcher.config.organization,
            state=state,
            type=item_type,
            repository=repository,
        )
        return jsonify(items)
    except Exception as e:
        return jsonify({"error": str(e)}), 500


@board_bp.route("/repositories")
def get_repositories():
    """Get repository names for the picker and the initially selected one"""
    try:
        fetcher = get_fetcher()
        repos = list_repositories(fetcher, fetcher.config.organization)
        return jsonify({
            "repositories": repos,
            "default": default_repository(fetcher.config, repos)
        })
    except Exception as e:
        return jsonify({"error": str(e)}), 500


@board_bp.route("/organization")
def get_organization():
    """Get organization details (name, avatar, description)"""
    fetcher = get_fetcher()
    org = fetcher.fetch_organization(fetcher.config.organization)

    if org is None:
        return jsonify({"error": "Organization unavailable"}), 404
    return jsonify(org)


@board_bp.route("/readme/<repo>")
def get_readme(repo):
    """Get a repository README as plain text"""
    fetcher = get_fetcher()
    content = fetcher.fetch_readme(fetcher.config.organization, repo)

    if content is None:
        return jsonify({"error": f"README for {repo} not found"}), 404
    return jsonify({"repository": repo, "content": content})


@board_bp.route("/health")
def health_check():
    """Health check with cache size and suppressed failure counts"""
    fetcher = get_fetcher()
    return jsonify({
        "status": "ok",
        "cache_entries": len(fetcher.client.cache),
        "failures": fetcher.failure_counts()
    })
