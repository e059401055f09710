"""Computer club event processing: seating, queueing and billing."""

from __future__ import annotations

import sys
from collections import deque
from dataclasses import dataclass
from enum import IntEnum
from typing import Callable, Dict, List, Optional, TextIO

from pcclub.bimap import BiMap

_NOT_OCCUPIED = 2**31 - 1


class EventType(IntEnum):
    """Incoming event kinds, numbered as in the input format."""

    ENTER = 1
    TAKE = 2
    WAIT = 3
    LEAVE = 4


@dataclass(frozen=True)
class Event:
    """One incoming event; ``table`` is set only for TAKE events."""

    time: int
    type: EventType
    name: str
    table: Optional[int] = None


@dataclass
class Table:
    """Running state and totals of one table."""

    occupied_since: int = _NOT_OCCUPIED
    revenue: int = 0
    usage: int = 0


def _truncating_split(minutes: int) -> tuple:
    sign = -1 if minutes < 0 else 1
    hours, rest = divmod(abs(minutes), 60)
    return sign * hours, sign * rest


def format_time(minutes: int) -> str:
    """Render minutes since midnight as ``HH:MM`` (at most five characters)."""
    hours, rest = _truncating_split(minutes)
    return f"{hours:02d}:{rest:02d}"[:5]


def _billable_hours(duration: int) -> int:
    """Hours started during ``duration`` minutes, rounding toward zero like integer division."""
    started = duration + 59
    if started >= 0:
        return started // 60
    return -((-started) // 60)


class EventProcessor:
    """Replays club events and writes the resulting log to ``out``."""

    def __init__(
        self,
        tables: int,
        price: int,
        open_time: int,
        close_time: int,
        out: Optional[TextIO] = None,
    ) -> None:
        self._out: TextIO = out if out is not None else sys.stdout
        self._tables_count = tables
        self._price = price
        self._open_time = open_time
        self._close_time = close_time
        self._clients: set = set()
        self._tables: List[Table] = [Table() for _ in range(tables)]
        self._waiting: deque = deque()
        self._seating: BiMap[str, int] = BiMap()
        self._handlers: Dict[EventType, Callable[[Event], None]] = {
            EventType.ENTER: self._enter,
            EventType.TAKE: self._take,
            EventType.WAIT: self._wait,
            EventType.LEAVE: self._leave,
        }
        print(format_time(open_time), file=self._out)

    def _emit(self, time: int, *parts: object) -> None:
        print(format_time(time), *parts, file=self._out)

    def _table(self, table_id: int) -> Table:
        return self._tables[table_id - 1]

    def _close_table(self, table_id: int, current_time: int) -> None:
        table = self._table(table_id)
        duration = current_time - table.occupied_since
        table.usage += duration
        table.revenue += _billable_hours(duration) * self._price
        self._seating.erase_right(table_id)

    def _assign_next(self, table_id: int, current_time: int) -> None:
        if not self._waiting:
            return
        name = self._waiting.popleft()
        self._seating.insert(name, table_id)
        self._table(table_id).occupied_since = current_time
        self._emit(current_time, 12, name, table_id)

    def _free_seat_of(self, name: str, current_time: int) -> None:
        if self._seating.contains_left(name):
            table_id = self._seating.at_left(name)
            self._close_table(table_id, current_time)
            self._assign_next(table_id, current_time)

    def _enter(self, event: Event) -> None:
        self._emit(event.time, 1, event.name)
        if event.time < self._open_time:
            self._emit(event.time, 13, "NotOpenYet")
        elif event.name in self._clients:
            self._emit(event.time, 13, "YouShallNotPass")
        else:
            self._clients.add(event.name)

    def _take(self, event: Event) -> None:
        self._emit(event.time, 2, event.name, event.table)
        if event.name not in self._clients:
            self._emit(event.time, 13, "ClientUnknown")
        elif self._seating.contains_right(event.table):
            self._emit(event.time, 13, "PlaceIsBusy")
        else:
            self._free_seat_of(event.name, event.time)
            self._seating.insert(event.name, event.table)
            self._table(event.table).occupied_since = event.time

    def _wait(self, event: Event) -> None:
        self._emit(event.time, 3, event.name)
        if event.name not in self._clients:
            self._emit(event.time, 13, "ClientUnknown")
        elif len(self._waiting) >= self._tables_count:
            self._emit(event.time, 11, event.name)
        elif len(self._seating) == self._tables_count:
            self._waiting.append(event.name)
        else:
            self._emit(event.time, 13, "ICanWaitNoLonger!")

    def _leave(self, event: Event) -> None:
        self._emit(event.time, 4, event.name)
        if event.name not in self._clients:
            self._emit(event.time, 13, "ClientUnknown")
        else:
            self._free_seat_of(event.name, event.time)
            self._clients.discard(event.name)

    def process_event(self, event: Event) -> None:
        """Apply one event, logging it and any outcome it causes."""
        handler = self._handlers.get(event.type)
        if handler is not None:
            handler(event)

    def close(self) -> None:
        """Settle all occupied tables at closing time and print the totals."""
        for _, table_id in self._seating.left_items():
            self._close_table(table_id, self._close_time)
        print(format_time(self._close_time), file=self._out)
        for number, table in enumerate(self._tables, start=1):
            print(number, table.revenue, format_time(table.usage), file=self._out)