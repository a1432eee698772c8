"""Roadmap API endpoints"""

from flask import Blueprint, jsonify, request

from project_board.api.board import get_fetcher
from project_board.github.aggregator import VALID_STATES
from project_board.github.roadmap import build_roadmap

roadmap_bp = Blueprint('roadmap', __name__, url_prefix='/api')


@roadmap_bp.route("/roadmap")
def get_roadmap():
    """Get the roadmap repository's items grouped by stage"""
    state = request.args.get("state", "open")

    if state not in VALID_STATES:
        return jsonify({"error": f"Invalid state: {state}"}), 400

    try:
        fetcher = get_fetcher()
        return jsonify({
            "repository": fetcher.config.roadmap_repository,
            "columns": build_roadmap(fetcher, fetcher.config.organization, state=state)
        })
    except Exception as e:
        return jsonify({"error": str(e)}), 500
