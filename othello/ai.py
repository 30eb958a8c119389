from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Callable, Optional, Protocol, Sequence

import logging
import math
import random
import time

from .config import CONFIG
from .evaluator import Evaluator
from .game import GameState, OthelloRules, Side

logger = logging.getLogger(__name__)


@dataclass
class SearchStatistics:
    nodes_examined: int = 0
    leaf_nodes: int = 0
    pruned: int = 0
    max_depth_reached: int = 0


@dataclass
class SelectedMove:
    move: Any
    score: float
    stats: SearchStatistics


class AgentContract(Protocol):
    """What the turn-management host calls to get a move for ``side``."""

    def select_move(
        self,
        state: GameState,
        side: Side,
        time_limit_s: Optional[float] = None,
    ) -> Optional[SelectedMove]:
        ...


class AlphaBetaAgent:
    """Fixed-depth minimax with alpha-beta pruning under a wall-clock deadline.

    Once the deadline passes every node still visited returns its static
    evaluation, so a move is always produced when one is legal.
    """

    def __init__(
        self,
        max_depth: Optional[int] = None,
        time_limit_s: Optional[float] = None,
        rules: Optional[Any] = None,
        evaluator: Optional[Any] = None,
        clock: Callable[[], float] = time.time,
    ) -> None:
        self.max_depth = max_depth if max_depth is not None else CONFIG.search.max_depth
        self.time_limit_s = time_limit_s if time_limit_s is not None else CONFIG.search.time_limit_s
        self.rules = rules or OthelloRules()
        self.evaluator = evaluator or Evaluator()
        self.clock = clock
        self.stats = SearchStatistics()
        self._side: Optional[Side] = None

    def select_move(
        self,
        state: GameState,
        side: Side,
        time_limit_s: Optional[float] = None,
    ) -> Optional[SelectedMove]:
        """Pick the best move for ``side`` or return None when it has none."""
        started = self.clock()
        budget = self.time_limit_s if time_limit_s is None else time_limit_s
        deadline = started + budget

        self.stats = SearchStatistics()
        self._side = side

        moves: Optional[Sequence[Any]] = self.rules.legal_moves(state, side)
        if not moves:
            logger.debug("No legal moves for %s", getattr(side, "value", side))
            return None

        best_move = None
        best_value = -math.inf
        for move in moves:
            child = self.rules.apply_move(state, move)
            value = self._alphabeta(
                child,
                self.max_depth - 1,
                -math.inf,
                math.inf,
                side.opponent,
                deadline,
                1,
            )
            if value > best_value:
                best_value = value
                best_move = move

        if best_move is None:
            best_move = moves[0]

        logger.info(
            "search depth=%d nodes=%d leaves=%d pruned=%d score=%s elapsed=%.3fs",
            self.stats.max_depth_reached,
            self.stats.nodes_examined,
            self.stats.leaf_nodes,
            self.stats.pruned,
            best_value,
            self.clock() - started,
        )
        return SelectedMove(move=best_move, score=best_value, stats=replace(self.stats))

    def _alphabeta(
        self,
        state: GameState,
        depth: int,
        alpha: float,
        beta: float,
        to_move: Side,
        deadline: float,
        ply: int,
    ) -> float:
        self.stats.nodes_examined += 1
        if ply > self.stats.max_depth_reached:
            self.stats.max_depth_reached = ply

        if self.clock() >= deadline or depth <= 0:
            return self._leaf(state)

        moves = self.rules.legal_moves(state, to_move)
        # No pass handling: a side without moves ends the line here.
        if not moves:
            return self._leaf(state)

        if to_move == self._side:
            value = -math.inf
            for move in moves:
                child = self.rules.apply_move(state, move)
                value = max(value, self._alphabeta(
                    child, depth - 1, alpha, beta, to_move.opponent, deadline, ply + 1
                ))
                alpha = max(alpha, value)
                if alpha >= beta:
                    self.stats.pruned += 1
                    break
            return value
        else:
            value = math.inf
            for move in moves:
                child = self.rules.apply_move(state, move)
                value = min(value, self._alphabeta(
                    child, depth - 1, alpha, beta, to_move.opponent, deadline, ply + 1
                ))
                beta = min(beta, value)
                if alpha >= beta:
                    self.stats.pruned += 1
                    break
            return value

    def _leaf(self, state: GameState) -> float:
        self.stats.leaf_nodes += 1
        return self.evaluator.evaluate(state, self._side)


class RandomAgent:
    """Plays a uniformly random legal move; a baseline opponent."""

    def __init__(self, seed: Optional[int] = None, rules: Optional[Any] = None) -> None:
        self.rng = random.Random(seed)
        self.rules = rules or OthelloRules()

    def select_move(
        self,
        state: GameState,
        side: Side,
        time_limit_s: Optional[float] = None,
    ) -> Optional[SelectedMove]:
        moves = self.rules.legal_moves(state, side)
        if not moves:
            return None
        return SelectedMove(move=self.rng.choice(list(moves)), score=0.0, stats=SearchStatistics())
