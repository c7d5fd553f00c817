import argparse
from typing import List, Union

from .durations import is_bare_integer


def sleep_value(text: str) -> Union[int, str]:
    """Pass plain integers through as ints so they skip string parsing."""
    if is_bare_integer(text):
        return int(text)
    return text


def add_common_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log how each duration was resolved",
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="smartsleep", description="Parse durations and sleep for them"
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    wait = subparsers.add_parser("wait", help="Block for the given duration")
    wait.add_argument(
        "duration",
        type=sleep_value,
        help="Milliseconds, or a duration such as 1.5s, 2m or 1h2m3s",
    )
    add_common_arguments(wait)

    parse = subparsers.add_parser("parse", help="Print parsed durations")
    parse.add_argument("durations", nargs="+", help="Duration expressions to parse")
    parse.add_argument(
        "--unit",
        choices=["ms", "s"],
        default="ms",
        help="Unit used when printing results",
    )
    add_common_arguments(parse)

    return parser


def parse_args(argv: List[str]) -> argparse.Namespace:
    parser = create_parser()
    return parser.parse_args(argv)
