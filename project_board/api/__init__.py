"""API blueprints for the project board"""

from project_board.api.board import board_bp
from project_board.api.roadmap import roadmap_bp
from project_board.api.open_graph import open_graph_bp

__all__ = ['board_bp', 'roadmap_bp', 'open_graph_bp']
