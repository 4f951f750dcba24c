"""
Main entry point for playing a wordgrid round from a config file.

Usage:
    python -m wordgrid.main config.yaml
    python -m wordgrid.main config.yaml --output results/round1.json --verbose
"""

import argparse
import logging
import sys
from datetime import datetime
from pathlib import Path
from typing import Optional

import yaml

from .engine import GameConfig, GameCoordinator, render_board
from .errors import LoadError
from .words import Dictionary


def load_config(config_path: str) -> GameConfig:
    """Load game configuration from a YAML file."""
    path = Path(config_path)

    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    with open(path) as f:
        data = yaml.safe_load(f) or {}

    return GameConfig(**data)


def load_dictionary(config: GameConfig) -> Dictionary:
    """Load the configured word list, or the bundled one."""
    if config.dictionary:
        return Dictionary.load(config.dictionary, entry=config.dictionary_entry)
    return Dictionary.load_default()


def play_round(coordinator: GameCoordinator, verbose: bool = False) -> None:
    """Play one round with the words each configured player submits."""
    board = coordinator.start_round()

    if verbose:
        print(f"Round {coordinator.round_number} board:")
        print(render_board(board))
        print("-" * 40)

    for player_config in coordinator.config.players:
        for word in player_config.words:
            accepted = coordinator.add_word(player_config.name, word)
            if verbose and not accepted:
                print(f"{player_config.name}: rejected '{word}'")
        coordinator.submit(player_config.name)

    coordinator.end_round()


def main(argv: Optional[list] = None):
    parser = argparse.ArgumentParser(
        description="Play a round of wordgrid",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Example config.yaml:
  board_size: 4
  seed: 42
  dictionary: words.txt.gz
  players:
    - name: alice
      words: [cat, dog, zebra]
    - name: bob
      words: [dog, bird]
        """
    )
    parser.add_argument(
        "config",
        help="Path to YAML configuration file"
    )
    parser.add_argument(
        "--output", "-o",
        help="Path to save results JSON (default: results/<timestamp>.json)"
    )
    parser.add_argument(
        "--seed",
        type=int,
        help="Override the board seed from the config"
    )
    parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Print progress to stdout"
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )

    try:
        config = load_config(args.config)
    except Exception as e:
        print(f"Error loading config: {e}", file=sys.stderr)
        return 1

    if args.seed is not None:
        config.seed = args.seed

    if not config.players:
        print("Error: config lists no players", file=sys.stderr)
        return 1

    try:
        dictionary = load_dictionary(config)
    except LoadError as e:
        print(f"Error loading dictionary: {e}", file=sys.stderr)
        return 1

    if args.output:
        output_path = Path(args.output)
    else:
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        output_path = Path("results") / f"round_{timestamp}.json"

    coordinator = GameCoordinator.create(dictionary, config)

    if args.verbose:
        print(f"Config: {args.config}")
        print(f"Dictionary: {dictionary.source} ({len(dictionary)} words)")
        print(f"Output: {output_path}")
        print()

    play_round(coordinator, verbose=args.verbose)
    coordinator.save_result(output_path)

    if args.verbose:
        print()
        print(f"Results saved to: {output_path}")

    # Print summary
    print()
    print("=== Round Summary ===")
    for name, score in coordinator.results.leaderboard():
        unique = coordinator.results.get(name).filtered_words
        print(f"{name}: {score} points ({', '.join(sorted(unique)) or 'no unique words'})")

    return 0


if __name__ == "__main__":
    sys.exit(main())
