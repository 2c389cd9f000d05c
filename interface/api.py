"""FastAPI REST interface for the engine."""

import threading
from typing import Optional

from fastapi import FastAPI, HTTPException
from pydantic import BaseModel

from pawnstorm.config import CONFIG, configure_logging
from pawnstorm.core.game import MoveRecord
from pawnstorm.core.pieces import Side
from pawnstorm.core.utils import parse_square, square_name
from pawnstorm.main import Engine

app = FastAPI(title=CONFIG.ui.engine_name, version="1.0.0")

# Shared game; the core is not re-entrant so every request takes the lock.
engine = Engine()
_lock = threading.Lock()


class MoveRequest(BaseModel):
    origin: str  # e.g. "e2"
    target: str  # e.g. "e4"


class BotRequest(BaseModel):
    side: Optional[str] = None  # defaults to the side to move


def _square(name: str):
    try:
        return parse_square(name)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid square: {name}")


def _side(name: str) -> Side:
    try:
        return Side.parse(name)
    except ValueError:
        raise HTTPException(status_code=400, detail=f"Invalid side: {name}")


def _record(record: MoveRecord) -> dict:
    return {
        "from": square_name(record.origin),
        "to": square_name(record.target),
        "piece": record.piece.symbol(),
        "captured": record.captured.symbol() if record.captured else None,
        "notation": record.notation,
    }


def _state() -> dict:
    side = engine.side_to_move
    return {
        "board": str(engine.game.board),
        "turn": side.value,
        "has_legal_move": engine.has_any_legal_move(side),
        "move_count": len(engine.move_history),
    }


@app.get("/board")
def get_board():
    with _lock:
        return _state()


@app.get("/moves/{square}")
def get_moves(square: str):
    origin = _square(square)
    with _lock:
        return {"from": square, "to": [square_name(t) for t in engine.legal_moves(origin)]}


@app.post("/move")
def make_move(req: MoveRequest):
    origin, target = _square(req.origin), _square(req.target)
    with _lock:
        piece = engine.game.board.piece_at(*origin)
        if piece is None or piece.side is not engine.side_to_move:
            raise HTTPException(status_code=400,
                                detail=f"Not {engine.side_to_move.value}'s piece: {req.origin}")
        if not engine.attempt_move(origin, target):
            raise HTTPException(status_code=400, detail=f"Illegal move: {req.origin}{req.target}")
        return {"move": _record(engine.move_history[-1]), **_state()}


@app.post("/bot")
def bot_move(req: BotRequest = BotRequest()):
    requested = _side(req.side) if req.side else None
    with _lock:
        side = requested or engine.side_to_move
        if side is not engine.side_to_move:
            raise HTTPException(status_code=409,
                                detail=f"Not {side.value}'s turn")
        record = engine.bot_move(side)
        if record is None:
            raise HTTPException(status_code=409, detail="No legal move available")
        return {"move": _record(record), **_state()}


@app.get("/history")
def get_history():
    with _lock:
        return {
            "moves": [_record(r) for r in engine.move_history],
            "captured": {
                side.value: [p.symbol() for p in pieces]
                for side, pieces in engine.captured_pieces.items()
            },
        }


@app.post("/undo")
def undo_move():
    with _lock:
        if not engine.undo():
            raise HTTPException(status_code=400, detail="Not enough moves to undo")
        return _state()


@app.post("/reset")
def reset_board():
    with _lock:
        engine.reset()
        return _state()


def serve():
    """Run the API under uvicorn on CONFIG.ui.api_port."""
    import uvicorn

    configure_logging()
    uvicorn.run(app, port=CONFIG.ui.api_port)


if __name__ == "__main__":
    serve()
