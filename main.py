#!/usr/bin/env python3
"""
Minesweeper - Main entry point.

Usage:
    python main.py play [--preset NAME | --rows R --cols C --mines M] [--seed S]
    python main.py watch [--games N] [--delay SEC] [--seed S]
"""
import argparse
import logging
import os
import time

import numpy as np

from src.minefield import (
    BoardConfig,
    Game,
    GamePhase,
    MinesweeperEnv,
    MinesweeperError,
    PRESETS,
)


HELP_TEXT = "Commands: r ROW COL (reveal), f ROW COL (flag), n (new game), q (quit)"


def clear_screen():
    os.system('cls' if os.name == 'nt' else 'clear')


def build_config(args: argparse.Namespace) -> BoardConfig:
    """Resolve the board configuration from preset or explicit sizes."""
    base = PRESETS[args.preset]
    return BoardConfig(
        rows=args.rows if args.rows is not None else base.rows,
        cols=args.cols if args.cols is not None else base.cols,
        mine_count=args.mines if args.mines is not None else base.mine_count,
    )


def print_status(game: Game) -> None:
    """Print the board and its counters."""
    print(game.render())
    print(
        f"\nMines: {game.config.mine_count} | "
        f"Flags left: {game.mines_remaining} | "
        f"Hidden: {game.hidden_count} | "
        f"Moves: {game.moves}"
    )


def play(args: argparse.Namespace) -> None:
    """Play interactively in the terminal."""
    game = Game(build_config(args), seed=args.seed)
    print(HELP_TEXT)

    while True:
        print()
        print_status(game)

        if game.phase == GamePhase.WON:
            print("\n*** You win! ***  (n = new game, q = quit)")
        elif game.phase == GamePhase.LOST:
            print("\n*** Game over ***  (n = new game, q = quit)")

        try:
            line = input("> ").strip().lower()
        except EOFError:
            break

        parts = line.split()
        if not parts:
            continue
        command = parts[0]

        if command == "q":
            break
        if command == "n":
            game.reset()
            continue
        if command not in ("r", "f") or len(parts) != 3:
            print(HELP_TEXT)
            continue

        try:
            row, col = int(parts[1]), int(parts[2])
        except ValueError:
            print("Row and column must be integers")
            continue

        try:
            if command == "r":
                game.reveal(row, col)
            else:
                game.toggle_flag(row, col)
        except MinesweeperError as error:
            print(f"Error: {error}")


def watch(args: argparse.Namespace) -> None:
    """Watch random valid reveals play out through the environment."""
    config = build_config(args)
    env = MinesweeperEnv(config=config, render_mode="ansi")
    rng = np.random.default_rng(args.seed)
    env.action_space.seed(args.seed)

    print(
        f"Board: {config.rows}x{config.cols} with {config.mine_count} mines "
        f"({100 * config.mine_count / config.total_cells:.1f}% density)"
    )

    wins = 0

    for game in range(args.games):
        seed = int(rng.integers(2**31)) if args.seed is not None else None
        obs, _ = env.reset(seed=seed)
        done = False
        step = 0

        while not done:
            action = env.action_space.sample(mask=env.get_action_mask())
            row, col = divmod(int(action), config.cols)

            obs, reward, terminated, truncated, info = env.step(action)
            done = terminated or truncated
            step += 1

            if args.delay > 0:
                clear_screen()
            print(f"=== Game {game + 1}/{args.games} | Step {step} ===")
            print(f"Wins so far: {wins}")
            print(f"Last move: ({row}, {col})\n")
            print(env.render())

            if done:
                if info.get("game_state") == "WON":
                    wins += 1
                    print("\n*** WIN! ***")
                else:
                    print("\n*** LOST (hit mine) ***")

            time.sleep(args.delay)

    print(f"\n=== Final: {wins}/{args.games} wins ({100 * wins / args.games:.0f}%) ===")


def positive_int(text: str) -> int:
    """argparse type for integers of at least 1."""
    value = int(text)
    if value < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {value}")
    return value


def non_negative_float(text: str) -> float:
    """argparse type for floats of at least 0."""
    value = float(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative, got {value}")
    return value


def add_board_arguments(parser: argparse.ArgumentParser) -> None:
    """Add the board size options shared by every command."""
    parser.add_argument(
        "--preset", choices=sorted(PRESETS), default="default",
        help="Board preset (default: 12x18 with 35 mines)",
    )
    parser.add_argument("--rows", type=int, default=None, help="Override rows")
    parser.add_argument("--cols", type=int, default=None, help="Override columns")
    parser.add_argument("--mines", type=int, default=None, help="Override mine count")
    parser.add_argument("--seed", type=int, default=None, help="Random seed")


def build_parser() -> argparse.ArgumentParser:
    """Build the command-line parser."""
    parser = argparse.ArgumentParser(
        description="Minesweeper - play in the terminal or watch random play"
    )
    parser.add_argument(
        "--verbose", action="store_true", help="Log engine events"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Play interactively")
    add_board_arguments(play_parser)

    watch_parser = subparsers.add_parser("watch", help="Watch random play")
    add_board_arguments(watch_parser)
    watch_parser.add_argument(
        "--games", type=positive_int, default=5, help="Number of games"
    )
    watch_parser.add_argument(
        "--delay", type=non_negative_float, default=0.3, help="Delay between moves"
    )
    return parser


def main() -> None:
    """Parse arguments and run the appropriate command."""
    parser = build_parser()
    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        if args.command == "play":
            play(args)
        elif args.command == "watch":
            watch(args)
        else:
            parser.print_help()
    except MinesweeperError as error:
        parser.error(str(error))


if __name__ == "__main__":
    main()
