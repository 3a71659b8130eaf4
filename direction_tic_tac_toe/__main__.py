import argparse
import logging
import random
import sys

from direction_tic_tac_toe.exception import InvalidNameError, LogicError
from direction_tic_tac_toe.game_engine import GameEngine
from direction_tic_tac_toe.player import HumanPlayer, Name, Side
from direction_tic_tac_toe.ui import BoardDisplay
from direction_tic_tac_toe.ui_terminal import TerminalBoardDisplay, TerminalReader, TerminalWriter

log = logging.getLogger("direction_tic_tac_toe")


def main(argv: list[str] | None = None) -> int:
    parser, args = _parse_args(argv)

    logging.basicConfig(level=args.log_level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    try:
        name_x = Name(args.name)
        name_o = Name(args.name_o)
    except InvalidNameError as e:
        parser.error(str(e))

    display = _create_display(args.display)
    reader = TerminalReader()
    writer = TerminalWriter()
    rng = random.Random(args.seed)  # noqa: S311

    match args.mode:
        case "single":
            game_engine = GameEngine.single_player(name_x, display, reader, writer, rng)
        case "multi":
            game_engine = GameEngine.multi_player(
                Side("X", HumanPlayer(name_x)),
                Side("O", HumanPlayer(name_o)),
                display,
                reader,
                writer,
                rng,
            )
        case _:
            parser.error(f"Invalid choice for --mode: {args.mode}")

    try:
        state = game_engine.play()
    except LogicError:
        log.exception("Game aborted")
        return 1
    except (KeyboardInterrupt, EOFError):
        writer.writeln("Input closed, leaving the game.")
        return 1
    finally:
        display.close()

    log.info("Final state: %s", state)
    return 0


def _create_display(kind: str) -> BoardDisplay:
    if kind == "pygame":
        from direction_tic_tac_toe.ui_pygame import PygameBoardDisplay  # noqa: PLC0415

        return PygameBoardDisplay()
    return TerminalBoardDisplay()


def _parse_args(argv: list[str] | None) -> tuple[argparse.ArgumentParser, argparse.Namespace]:
    parser = argparse.ArgumentParser(prog="direction_tic_tac_toe")

    parser.add_argument("--mode", choices=("single", "multi"), default="single")
    parser.add_argument("--name", default="Dgame", help="name of the human playing X")
    parser.add_argument("--name-o", default="Player O", help="name of the human playing O in multi mode")
    parser.add_argument("--display", choices=("terminal", "pygame"), default="terminal")
    parser.add_argument("--seed", type=int, default=None)
    parser.add_argument("--log-level", choices=("DEBUG", "INFO", "WARNING", "ERROR"), default="WARNING")

    args = parser.parse_args(argv)
    return parser, args


if __name__ == "__main__":
    sys.exit(main())
