"""Othello engine package providing game state, evaluation, and AI search.

Modules:
- game: Board, move generation and game orchestration
- evaluator: Heuristic evaluation function for positions
- ai: Fixed-depth minimax with alpha-beta pruning under a time budget
- config: Search and web settings loaded from TOML and environment
"""

from .game import Game, GameState, Move, OthelloRules, Side
from .ai import AgentContract, AlphaBetaAgent, RandomAgent, SearchStatistics, SelectedMove
from .evaluator import Evaluator

__all__ = [
    "Game",
    "GameState",
    "Move",
    "OthelloRules",
    "Side",
    "AgentContract",
    "AlphaBetaAgent",
    "RandomAgent",
    "SearchStatistics",
    "SelectedMove",
    "Evaluator",
]
