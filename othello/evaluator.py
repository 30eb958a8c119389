from __future__ import annotations

from typing import List

from .game import BOARD_SIZE, GameState, Side, square_index


class Evaluator:
    """Static evaluation for Othello positions.

    Scores are from ``perspective``'s point of view: positive is good for that
    side. Finished games score ``WIN_SCORE`` plus the disc margin.
    """

    WIN_SCORE = 100000

    # Classic square weights: corners are stable, X and C squares hand them away.
    SQUARE_WEIGHTS: List[int] = [
        100, -20, 10, 5, 5, 10, -20, 100,
        -20, -50, -2, -2, -2, -2, -50, -20,
        10, -2, -1, -1, -1, -1, -2, 10,
        5, -2, -1, -1, -1, -1, -2, 5,
        5, -2, -1, -1, -1, -1, -2, 5,
        10, -2, -1, -1, -1, -1, -2, 10,
        -20, -50, -2, -2, -2, -2, -50, -20,
        100, -20, 10, 5, 5, 10, -20, 100,
    ]

    CORNERS = (
        square_index(0, 0),
        square_index(0, BOARD_SIZE - 1),
        square_index(BOARD_SIZE - 1, 0),
        square_index(BOARD_SIZE - 1, BOARD_SIZE - 1),
    )

    MOBILITY_WEIGHT = 5
    CORNER_WEIGHT = 25
    DISC_WEIGHT = 1

    @classmethod
    def evaluate(cls, state: GameState, perspective: Side) -> float:
        opponent = perspective.opponent
        own_moves = len(state.legal_moves(perspective))
        opp_moves = len(state.legal_moves(opponent))
        disc_diff = state.count(perspective) - state.count(opponent)

        if own_moves == 0 and opp_moves == 0:
            if disc_diff > 0:
                return float(cls.WIN_SCORE + disc_diff)
            if disc_diff < 0:
                return float(-cls.WIN_SCORE + disc_diff)
            return 0.0

        score = 0
        for square, cell in enumerate(state.cells):
            if cell is perspective:
                score += cls.SQUARE_WEIGHTS[square]
            elif cell is opponent:
                score -= cls.SQUARE_WEIGHTS[square]

        score += cls.MOBILITY_WEIGHT * (own_moves - opp_moves)

        for corner in cls.CORNERS:
            if state.cells[corner] is perspective:
                score += cls.CORNER_WEIGHT
            elif state.cells[corner] is opponent:
                score -= cls.CORNER_WEIGHT

        score += cls.DISC_WEIGHT * disc_diff
        return float(score)
