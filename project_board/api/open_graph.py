"""Title and description strings for the social-preview image generator"""

from flask import Blueprint, jsonify

from project_board.api.board import get_fetcher

open_graph_bp = Blueprint('open_graph', __name__, url_prefix='/api/open-graph')


def render_template_string(template: str, org: str) -> str:
    """Substitute every {{org}} placeholder"""
    return template.replace("{{org}}", org)


def open_graph_page(config, route: str):
    """Title/description for an OG route, or None if the route has no templates"""
    templates = config.open_graph.get(route)
    if not templates:
        return None

    return {
        "title": render_template_string(templates["title"], config.organization),
        "description": render_template_string(templates["description"], config.organization),
    }


@open_graph_bp.route("/<route>")
def get_open_graph(route):
    """Get the title and description used for a page's preview image"""
    page = open_graph_page(get_fetcher().config, route)

    if page is None:
        return jsonify({"error": f"Unknown route: {route}"}), 404
    return jsonify(page)
