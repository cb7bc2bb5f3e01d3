"""
DealGame CLI - Play the game in a terminal.

Usage:
    dealgame play [--seed N] [--no-shuffle] [--store PATH]   Play one game
    dealgame best [--store PATH]                             Show the best result
"""

import argparse
import logging
import sys
from typing import Callable

from . import config
from .engine_core.errors import GameStateError, IndexOutOfRangeError, PersistenceError
from .persistence.best_result import FileBestResultStore, format_best_result
from .session import GameSession


def main(argv: list[str] | None = None):
    """Main CLI entry point."""
    parser = argparse.ArgumentParser(
        description="DealGame - pick a box, open the rest, beat the banker",
        prog="dealgame",
    )
    parser.add_argument(
        "--log-level",
        default=config.LOG_LEVEL,
        help="Logging level (default from DEALGAME_LOG_LEVEL)",
    )
    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Play command
    play_parser = subparsers.add_parser("play", help="Play one game")
    play_parser.add_argument("--seed", type=int, default=None, help="Seed for the board shuffle")
    play_parser.add_argument("--no-shuffle", action="store_true", help="Keep boxes in value order")
    play_parser.add_argument("--store", default=None, help="Best result file")

    # Best command
    best_parser = subparsers.add_parser("best", help="Show the best result")
    best_parser.add_argument("--store", default=None, help="Best result file")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "play":
        cmd_play(args)
    elif args.command == "best":
        cmd_best(args)
    else:
        parser.print_help()
        sys.exit(1)


def cmd_play(args):
    """Play a game against the banker."""
    store = FileBestResultStore(args.store or config.BEST_RESULT_FILE)
    session = GameSession(
        randomize=not args.no_shuffle,
        best_result_store=store,
        random_seed=args.seed,
    )

    try:
        play_game(session)
    except PersistenceError as e:
        print(f"Error: {e}")
        sys.exit(1)
    except (EOFError, KeyboardInterrupt):
        print("\nGame abandoned.")
        sys.exit(1)


def cmd_best(args):
    """Print the stored best result."""
    store = FileBestResultStore(args.store or config.BEST_RESULT_FILE)
    try:
        best = store.load()
    except PersistenceError as e:
        print(f"Error: {e}")
        sys.exit(1)
    print(f"Best result: ${format_best_result(best)}")


def play_game(
    session: GameSession,
    read: Callable[[str], str] | None = None,
    write: Callable[[str], None] | None = None,
) -> float:
    """
    Drive a session to the end with console prompts.

    Args:
        session: A fresh session
        read: Prompt function (input by default)
        write: Output function (print by default)

    Returns:
        The player's winnings
    """
    read = read or input
    write = write or print
    write(f"Best result so far: ${format_best_result(session.get_best_result())}")
    _prompt_for_box(session, read, write, "Choose your box")
    write(f"You chose box {session.player_slot}.")

    while True:
        write(f"\n--- Round {session.round} of {session.number_of_rounds} ---")
        while not session.is_round_complete():
            write(_format_board(session))
            index = _prompt_for_box(
                session, read, write,
                f"Open a box ({session.remaining_to_reveal_this_round()} left this round)",
            )
            write(f"Box {index} held ${format_best_result(session.get_value_at(index))}")

        if session.is_final_round() or not session.sealed_indices():
            winnings = session.get_player_container_value()
            write(f"\nYour box {session.player_slot} held ${format_best_result(winnings)}")
            break

        offer = session.get_current_offer()
        write(f"\nThe banker offers ${format_best_result(offer)}")
        if _prompt_deal(read, write):
            winnings = offer
            write(
                f"Deal! Your box {session.player_slot} held "
                f"${format_best_result(session.get_player_container_value())}"
            )
            break
        session.start_next_round()

    write(f"You won ${format_best_result(winnings)}")
    if session.record_result_if_best(winnings):
        write("New best result!")
    return winnings


def _prompt_for_box(session, read, write, prompt) -> int:
    """Ask for a box index until the session accepts it."""
    while True:
        answer = read(f"{prompt} (0-{session.number_of_boxes - 1}): ").strip()
        try:
            index = int(answer)
        except ValueError:
            write(f"Not a box number: {answer!r}")
            continue
        try:
            session.select_or_reveal(index)
        except (GameStateError, IndexOutOfRangeError) as e:
            write(f"Error: {e}")
            continue
        return index


def _prompt_deal(read, write) -> bool:
    while True:
        answer = read("Deal or no deal? [d/n]: ").strip().lower()
        if answer in ("d", "deal"):
            return True
        if answer in ("n", "no", "no deal"):
            return False
        write("Please answer 'd' or 'n'.")


def _format_board(session: GameSession) -> str:
    cells = []
    for i in range(session.number_of_boxes):
        if i == session.player_slot:
            cells.append(f"[{i:>2}*]")
        elif session.is_revealed_at(i):
            cells.append("[ -- ]")
        else:
            cells.append(f"[ {i:>2} ]")
    rows = [" ".join(cells[i:i + 9]) for i in range(0, len(cells), 9)]
    return "\n".join(rows)


if __name__ == "__main__":
    main()
