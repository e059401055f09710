"""Command line front end: read a club day file and print its event log."""

from __future__ import annotations

import re
import sys
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Sequence, TextIO

from pcclub.processor import Event, EventProcessor, EventType

_PROG = "pcclub"
_INT_PREFIX = re.compile(r"\s*([+-]?[0-9]+)", re.ASCII)
_NAME = re.compile(r"[a-z0-9_]+")
_DIGITS = re.compile(r"[0-9]+")
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1


class InputError(ValueError):
    """A malformed input line; ``line`` holds its text."""

    def __init__(self, line: str) -> None:
        super().__init__(f"malformed input line: {line!r}")
        self.line = line


@dataclass(frozen=True)
class ClubParameters:
    """The header of an input file."""

    tables: int
    open_time: int
    close_time: int
    price: int


def _leading_int(text: str) -> int:
    """Read a 32-bit integer from the start of ``text``, ignoring what follows it."""
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"no integer in {text!r}")
    value = int(match.group(1))
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of range in {text!r}")
    return value


def _strip_newline(line: str) -> str:
    return line.removesuffix("\n")


def parse_time(text: str) -> int:
    """Parse ``HH:MM`` into minutes since midnight."""
    if len(text) != 5 or text[2] != ":":
        raise ValueError(f"invalid time: {text!r}")
    hours = _leading_int(text[:2])
    minutes = _leading_int(text[3:])
    if not 0 <= hours <= 23 or not 0 <= minutes <= 59:
        raise ValueError(f"invalid time: {text!r}")
    return hours * 60 + minutes


def _positive_int(line: str) -> int:
    try:
        value = _leading_int(line)
    except ValueError:
        raise InputError(line) from None
    if value <= 0:
        raise InputError(line)
    return value


def parse_parameters(lines: Iterable[str]) -> ClubParameters:
    """Read the three header lines; consumes them when given an iterator."""
    source: Iterator[str] = iter(lines)

    def next_line() -> str:
        return _strip_newline(next(source, ""))

    tables = _positive_int(next_line())

    hours_line = next_line()
    try:
        open_time = parse_time(hours_line[0:5])
        close_time = parse_time(hours_line[6:11])
    except ValueError:
        raise InputError(hours_line) from None
    if open_time > close_time:
        raise InputError(hours_line)

    price = _positive_int(next_line())
    return ClubParameters(tables, open_time, close_time, price)


def parse_event(line: str, tables: int) -> Event:
    """Parse one event line for a club with ``tables`` tables."""
    tokens = line.split()
    if len(tokens) not in (3, 4):
        raise InputError(line)
    stamp, kind, name = tokens[:3]
    if len(kind) != 1 or kind not in "1234":
        raise InputError(line)
    if not _NAME.fullmatch(name):
        raise InputError(line)

    table: Optional[int] = None
    if len(tokens) == 4:
        if kind != "2" or not _DIGITS.fullmatch(tokens[3]):
            raise InputError(line)
        table = int(tokens[3])
        if not 1 <= table <= tables:
            raise InputError(line)
    elif kind == "2":
        raise InputError(line)

    try:
        time = parse_time(stamp)
    except ValueError:
        raise InputError(line) from None
    return Event(time=time, type=EventType(int(kind)), name=name, table=table)


def run(lines: Iterable[str], out: Optional[TextIO] = None) -> None:
    """Validate the whole input, then replay it, writing the log to ``out``.

    Raises InputError for the first malformed line; nothing is written then.
    """
    target = out if out is not None else sys.stdout
    source = iter(lines)
    params = parse_parameters(source)
    events: List[Event] = [
        parse_event(_strip_newline(line), params.tables) for line in source
    ]
    processor = EventProcessor(
        params.tables, params.price, params.open_time, params.close_time, target
    )
    for event in events:
        processor.process_event(event)
    processor.close()


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 1:
        print(f"Usage: {_PROG} <path_to_file>")
        return 1
    try:
        with open(args[0], encoding="utf-8", errors="replace") as handle:
            run(handle, sys.stdout)
    except InputError as err:
        print(err.line)
        return 1
    except OSError as err:
        print(f"{_PROG}: {err}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())