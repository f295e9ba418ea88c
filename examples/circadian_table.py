#!/usr/bin/env python
"""Print the circadian brightness/temperature curve for one day."""
from __future__ import annotations

import argparse

from keylights import circadian


def run(args: argparse.Namespace) -> None:
    """Print one row per step."""
    print("time   key      fill")
    for minute, values in circadian.curve(args.step):
        print(
            f"{circadian.format_minute(minute)}  "
            f"{values.key_brightness:3d}% {values.key_temperature}K  "
            f"{values.fill_brightness:3d}% {values.fill_temperature}K"
        )


def parse_args() -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = argparse.ArgumentParser(
        description="Print the circadian curve used by `keylights -c`."
    )
    parser.add_argument(
        "--step",
        type=int,
        default=30,
        help="Minutes between rows (default: 30)",
    )
    return parser.parse_args()


def main() -> None:
    """Entry point."""
    run(parse_args())


if __name__ == "__main__":
    main()
