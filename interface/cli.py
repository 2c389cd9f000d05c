"""Console game: a human plays one side, the bot plays the other."""

import time

from pawnstorm.config import CONFIG, configure_logging
from pawnstorm.core.pieces import Side
from pawnstorm.core.utils import parse_square, square_name
from pawnstorm.main import Engine

HELP = "Commands: e2e4-style move, 'undo', 'hint', 'moves', 'reset', 'quit'"


def parse_move(text: str):
    text = text.strip().lower()
    if len(text) != 4:
        raise ValueError(f"expected a move like e2e4, got {text!r}")
    return parse_square(text[:2]), parse_square(text[2:])


def format_move(move) -> str:
    return square_name(move[:2]) + square_name(move[2:])


def main(input_fn=input, output_fn=print):
    configure_logging()
    engine = Engine()
    player = Side.parse(CONFIG.ui.player_side)
    bot_side = player.opponent
    output_fn(HELP)

    while True:
        output_fn(engine.game.board.to_chess_board().unicode(invert_color=True))
        output_fn("----------------------------")
        side = engine.side_to_move

        if not engine.has_any_legal_move(side):
            output_fn(f"Game over: {side.value} has no legal move")
            break

        if side is bot_side:
            time.sleep(CONFIG.ui.bot_delay_ms / 1000.0)
            record = engine.bot_move(bot_side)
            output_fn(f"Bot plays: {record.notation}")
            continue

        command = input_fn(f"{side.value} to move: ").strip().lower()
        if command == "quit":
            break
        if command == "undo":
            if not engine.undo():
                output_fn("Nothing to undo.")
            continue
        if command == "reset":
            engine.reset()
            continue
        if command == "moves":
            output_fn("\n".join(engine.move_list()) or "(no moves yet)")
            continue
        if command == "hint":
            hint = engine.hint(player)
            output_fn(f"Try {format_move(hint)}" if hint else "No legal moves.")
            continue

        try:
            origin, target = parse_move(command)
        except ValueError as e:
            output_fn(f"{e}. {HELP}")
            continue
        piece = engine.game.board.piece_at(*origin)
        if piece is None or piece.side is not player or not engine.attempt_move(origin, target):
            output_fn("Illegal move, try again.")

    output_fn("Moves: " + " ".join(r.notation for r in engine.move_history))


if __name__ == "__main__":
    main()
