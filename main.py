"""Entry point for the user dictionary to plist converter."""

import argparse
from pathlib import Path

from udic_plist.cli import run

PROGRAM_DIR = Path(__file__).resolve().parent


def main() -> None:
    """Parse CLI arguments and run the conversion."""
    parser = argparse.ArgumentParser(
        description="Convert a tab-delimited user dictionary to a plist file",
    )
    parser.add_argument(
        "input",
        nargs="?",
        help="Dictionary text file (default: dict.txt)",
    )
    parser.add_argument(
        "output",
        nargs="?",
        help="Plist file to write (default: dict.plist)",
    )
    parser.add_argument(
        "-c",
        "--config",
        default=None,
        help="Path to an optional YAML configuration file",
    )
    args = parser.parse_args()
    run(
        input_path=args.input,
        output_path=args.output,
        config_path=args.config,
        base_dir=PROGRAM_DIR,
    )


if __name__ == "__main__":
    main()
