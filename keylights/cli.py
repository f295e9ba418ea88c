"""Command line interface for controlling the Key and Fill Lights."""
from __future__ import annotations

import argparse
import asyncio
import logging
import sys
from collections.abc import Sequence
from datetime import datetime

from keylights import __version__, const
from keylights.delta import UNSET, SignedDelta, parse_delta
from keylights.errors import KeyLightError, ParseError
from keylights.runner import LightTarget, RunState, async_run, build_run_state

_LOGGER = logging.getLogger(__name__)

_BRIGHTNESS_HELP = (
    "set %s Light brightness to an absolute (between 0 and 100) "
    "or relative (-N or +N) percentage"
)
_TEMPERATURE_HELP = (
    "set %s Light temperature to an absolute (between 2900 and 7000) "
    "or relative (-N or +N) degrees Kelvin"
)
_DELTA_DESTS = (
    "key_brightness",
    "key_temperature",
    "fill_brightness",
    "fill_temperature",
)


def _delta_arg(value: str) -> SignedDelta:
    try:
        return parse_delta(value)
    except ParseError as err:
        raise argparse.ArgumentTypeError(str(err)) from err


def build_parser() -> argparse.ArgumentParser:
    """Return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="keylights",
        description=(
            "Adjust or toggle the Key and Fill Lights. Without brightness or "
            "temperature options both lights are toggled on/off; with any of "
            "them, both lights are turned on and adjusted."
        ),
    )
    parser.add_argument(
        "-i",
        "--info",
        action="store_true",
        help="display the current status of the lights without changing their state",
    )
    parser.add_argument(
        "-c",
        "--circadian",
        action="store_true",
        help=(
            "calculate and set circadian brightness and temperature for the "
            "current time of day; cannot be combined with -bk, -tk, -bf or -tf"
        ),
    )
    for role, prefix, default in (
        ("Key", "k", const.DEFAULT_KEY_ADDRESS),
        ("Fill", "f", const.DEFAULT_FILL_ADDRESS),
    ):
        dest = role.lower()
        parser.add_argument(
            f"-a{prefix}",
            f"--{dest}-address",
            dest=f"{dest}_address",
            default=default,
            help=f"the address of the {role} Light's HTTP API (default: {default})",
        )
        parser.add_argument(
            f"-b{prefix}",
            f"--{dest}-brightness",
            dest=f"{dest}_brightness",
            type=_delta_arg,
            default=UNSET,
            metavar="N",
            help=_BRIGHTNESS_HELP % role,
        )
        parser.add_argument(
            f"-t{prefix}",
            f"--{dest}-temperature",
            dest=f"{dest}_temperature",
            type=_delta_arg,
            default=UNSET,
            metavar="N",
            help=_TEMPERATURE_HELP % role,
        )
    parser.add_argument(
        "-v", "--verbose", action="store_true", help="enable debug logging"
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    return parser


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse CLI arguments."""
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.circadian and any(getattr(args, dest).is_set for dest in _DELTA_DESTS):
        parser.error(
            "-c/--circadian cannot be combined with brightness or temperature options"
        )
    return args


def state_from_args(args: argparse.Namespace, now: datetime | None = None) -> RunState:
    """Build the run state from parsed arguments."""
    return build_run_state(
        info=args.info,
        use_circadian=args.circadian,
        key=LightTarget(
            "Key", args.key_address, args.key_brightness, args.key_temperature
        ),
        fill=LightTarget(
            "Fill", args.fill_address, args.fill_brightness, args.fill_temperature
        ),
        now=now,
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point."""
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    state = state_from_args(args)
    try:
        asyncio.run(async_run(state))
    except KeyLightError as err:
        _LOGGER.debug("Run failed", exc_info=True)
        print(err, file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
