import logging
import sys
from datetime import timedelta
from typing import Iterable, List, Optional

from .cli import parse_args
from .durations import parse_duration
from .errors import SleepError
from .log import configure_logging
from .sleeping import smart_sleep

EXIT_OK = 0
EXIT_INVALID = 2
EXIT_INTERRUPTED = 130


def format_duration(duration: timedelta, unit: str = "ms") -> str:
    if unit == "ms":
        return str(duration // timedelta(milliseconds=1))
    if unit == "s":
        return f"{duration.total_seconds():g}"
    raise ValueError(f"Unsupported unit: {unit}")


def parse_durations(exprs: Iterable[str], unit: str = "ms") -> List[str]:
    return [f"{expr}\t{format_duration(parse_duration(expr), unit)}" for expr in exprs]


def main(argv: Optional[List[str]] = None) -> int:
    params = parse_args(sys.argv[1:] if argv is None else argv)
    configure_logging(logging.DEBUG if params.verbose else logging.WARNING)
    try:
        if params.command == "wait":
            try:
                smart_sleep(params.duration)
            except KeyboardInterrupt:
                print("\n[interrupt] exiting…", file=sys.stderr)
                return EXIT_INTERRUPTED
        elif params.command == "parse":
            for line in parse_durations(params.durations, params.unit):
                print(line)
        else:
            raise ValueError(f"Unknown command: {params.command}")
    except SleepError as exc:
        print(f"[error] {exc}", file=sys.stderr)
        return EXIT_INVALID
    return EXIT_OK


if __name__ == "__main__":  # pragma: no cover - exercised via CLI invocation
    sys.exit(main(sys.argv[1:]))
