#!/usr/bin/env python3
"""
Show saved progress - unlocked level, checkpoints and high scores.
"""
import sys
import argparse
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from gridsnake.games.snake.progress import ProgressStore
from gridsnake.utils.config_loader import load_config
from gridsnake.visualization.progress_display import show_progress


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="gridsnake - show saved progress")
    parser.add_argument(
        "--path",
        type=str,
        default=None,
        help="Progress file (default: from config)"
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to config.yaml"
    )
    return parser.parse_args()


def main():
    args = parse_args()
    config = load_config(args.config)
    store = ProgressStore(args.path or config.progress.path)
    show_progress(store.load())


if __name__ == "__main__":
    main()
