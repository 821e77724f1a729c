"""
3D Minesweeper - command line entry point.

Usage:
    mines3d play [--difficulty {beginner,intermediate,expert}] [--games N] [--seed S]
    mines3d show [--difficulty ...] [--seed S] [--layer L]
"""
import argparse
from typing import List, Optional

from .agents import RandomAgent
from .board import DIFFICULTIES
from .environment import Minesweeper3DEnv, render_layer, render_layers


def positive_int(value: str) -> int:
    """Argparse type for counts that must be at least 1."""
    number = int(value)
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be at least 1, got {number}")
    return number


def play(args: argparse.Namespace) -> None:
    """Let the random agent play a number of games and report results."""
    config = DIFFICULTIES[args.difficulty]
    env = Minesweeper3DEnv(config=config)
    agent = RandomAgent(config.depth, config.rows, config.cols, seed=args.seed)

    print(
        f"Playing {args.games} games on {args.difficulty} "
        f"({config.depth}x{config.rows}x{config.cols}, {config.mines} mines)"
    )

    wins = 0
    for game in range(args.games):
        seed = None if args.seed is None else args.seed + game
        obs, info = env.reset(seed=seed)
        agent.reset()
        done = False

        while not done:
            action = agent.select_action(obs, env.get_action_mask())
            obs, _, terminated, truncated, info = env.step(action)
            done = terminated or truncated

        if info["game_state"] == "WON":
            wins += 1
        print(
            f"Game {game + 1}: {info['game_state']} after {info['steps']} moves "
            f"({info['revealed']}/{info['total_safe']} safe cells)"
        )

    print(f"\nWin rate: {wins}/{args.games} ({wins / args.games:.1%})")


def show(args: argparse.Namespace) -> None:
    """Open the center cell of a fresh board and print the result."""
    config = DIFFICULTIES[args.difficulty]
    env = Minesweeper3DEnv(config=config)
    env.reset(seed=args.seed)

    center = (config.depth // 2, config.rows // 2, config.cols // 2)
    env.step(env.position_to_action(*center))

    print(f"Opened {center}: {env.game.board.revealed_count} cells revealed\n")
    obs = env.game.get_observation()
    if args.layer is None:
        print(render_layers(obs))
    else:
        print(f"Layer {args.layer}")
        print(render_layer(obs[args.layer]))


def main(argv: Optional[List[str]] = None) -> None:
    """Parse arguments and run the appropriate command."""
    parser = argparse.ArgumentParser(
        description="3D Minesweeper - play and inspect boards"
    )
    subparsers = parser.add_subparsers(dest="command", help="Command to run")

    play_parser = subparsers.add_parser("play", help="Watch the random agent play")
    play_parser.add_argument(
        "--difficulty", choices=sorted(DIFFICULTIES), default="beginner"
    )
    play_parser.add_argument(
        "--games", type=positive_int, default=10, help="Number of games to play"
    )
    play_parser.add_argument("--seed", type=int, default=None, help="Random seed")

    show_parser = subparsers.add_parser("show", help="Print an opened board")
    show_parser.add_argument(
        "--difficulty", choices=sorted(DIFFICULTIES), default="beginner"
    )
    show_parser.add_argument("--seed", type=int, default=None, help="Random seed")
    show_parser.add_argument(
        "--layer", type=int, default=None, help="Only print this layer"
    )

    args = parser.parse_args(argv)

    if args.command == "show" and args.layer is not None:
        depth = DIFFICULTIES[args.difficulty].depth
        if not 0 <= args.layer < depth:
            show_parser.error(
                f"--layer must be between 0 and {depth - 1} for {args.difficulty}"
            )

    if args.command == "play":
        play(args)
    elif args.command == "show":
        show(args)
    else:
        parser.print_help()


if __name__ == "__main__":
    main()
