from __future__ import annotations

from dataclasses import asdict
from flask import Flask, jsonify, request
import logging
import math
import sys
from pathlib import Path
from typing import Dict, List, Optional

# Ensure project root is importable when running this file directly
PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from othello import AgentContract, AlphaBetaAgent, Game, Side
from othello.config import CONFIG

logger = logging.getLogger(__name__)


def _json_object() -> Optional[Dict[str, object]]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    return data if isinstance(data, dict) else None


def _time_limit(payload: Dict[str, object]) -> Optional[float]:
    value = payload.get("time_limit")
    return None if value is None else float(value)


def create_app(agent: Optional[AgentContract] = None) -> Flask:
    app = Flask(__name__)

    game = Game()
    ai: AgentContract = agent or AlphaBetaAgent()
    # Human plays black unless /api/new says otherwise
    players = {"human": Side.BLACK}
    last_search: Dict[str, object] = {}

    def ai_turns(time_limit: Optional[float]) -> List[str]:
        """Let the AI move for as long as it holds the turn."""
        played: List[str] = []
        while not game.is_game_over() and game.turn is not players["human"]:
            selected = ai.select_move(game.state, game.turn, time_limit)
            if selected is None:
                break
            logger.info("AI (%s) plays %s", game.turn.value, selected.move.notation)
            game.push(selected.move)
            played.append(selected.move.notation)
            last_search.clear()
            last_search.update(asdict(selected.stats))
            last_search["score"] = selected.score if math.isfinite(selected.score) else None
        return played

    def snapshot(ai_moves: List[str]) -> Dict[str, object]:
        snap = game.snapshot()
        snap["human"] = players["human"].value
        snap["ai_moves"] = ai_moves
        snap["search"] = dict(last_search) or None
        return snap

    @app.get("/")
    def index():
        return jsonify({
            "engine": type(ai).__name__,
            "max_depth": getattr(ai, "max_depth", None),
            "time_limit_ms": CONFIG.search.time_limit_ms,
        })

    @app.get("/api/state")
    def api_state():
        return jsonify(snapshot([]))

    @app.post("/api/new")
    def api_new():
        data = _json_object()
        if data is None:
            return jsonify({"error": "Expected a JSON object"}), 400
        color = str(data.get("color") or "black").lower()
        try:
            players["human"] = Side(color)
            time_limit = _time_limit(data)
        except (TypeError, ValueError) as exc:
            return jsonify({"error": str(exc)}), 400

        game.reset()
        last_search.clear()

        # If the player chose white, the AI (black) opens
        return jsonify(snapshot(ai_turns(time_limit)))

    @app.post("/api/move")
    def api_move():
        payload = _json_object()
        if payload is None:
            return jsonify({"error": "Expected a JSON object"}), 400
        notation = payload.get("move")
        if not notation:
            return jsonify({"error": "Missing move"}), 400
        if game.is_game_over():
            return jsonify({"error": "Game is already over"}), 400
        if game.turn is not players["human"]:
            return jsonify({"error": f"It is {game.turn.value}'s turn"}), 400

        try:
            time_limit = _time_limit(payload)
            game.play(notation)
        except (TypeError, ValueError) as exc:
            return jsonify({"error": str(exc)}), 400

        return jsonify(snapshot(ai_turns(time_limit)))

    return app


def main() -> None:
    logging.basicConfig(
        level=CONFIG.log_level,
        format="[%(asctime)s] %(levelname)s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
    )
    app = create_app()
    app.run(host=CONFIG.web.host, port=CONFIG.web.port, debug=CONFIG.web.debug)


if __name__ == "__main__":
    main()
