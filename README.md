# pcclub

Processes a day's event log for a computer club. It seats clients at tables,
keeps a waiting queue, reports errors such as a client arriving before opening
time, and at closing prints each table's revenue and total time in use.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Command line

```
pc-club events.txt
```

The same command is available as `python -m pcclub.cli events.txt`. Given
anything other than exactly one argument, it prints a usage line and exits
with status 1.

The input file looks like this:

```
3
09:00 19:00
10
08:48 1 client1
09:41 1 client1
09:48 1 client2
09:52 3 client1
09:54 2 client1 1
10:25 2 client2 2
12:33 4 client1
```

- line 1: the number of tables (a positive integer);
- line 2: opening and closing time, `HH:MM HH:MM`, opening not later than closing;
- line 3: the price per started hour (a positive integer);
- then one event per line: `HH:MM <id> <client> [table]`.

Incoming event ids:

| id | meaning                                  |
|----|------------------------------------------|
| 1  | client arrives                           |
| 2  | client sits at a table (table required)  |
| 3  | client waits for a free table            |
| 4  | client leaves                            |

Client names may hold only lower-case letters, digits and `_`. A table number
must lie between 1 and the number of tables, and only event 2 carries one.

The output repeats the opening time, then every incoming event followed by
any event it produced, then the closing time and a line per table:
`<table> <revenue> <HH:MM in use>`. Produced events are:

- `11 <client>`: the client left because the queue was full;
- `12 <client> <table>`: a waiting client was seated at a table that came free;
- `13 <error>`: `NotOpenYet`, `YouShallNotPass`, `ClientUnknown`,
  `PlaceIsBusy`, `ICanWaitNoLonger!`.

Each started hour at a table is charged at the full hourly price. Clients
still seated at closing time are charged up to the closing time.

The whole file is checked before anything is processed. If a line is
malformed, that line alone is printed and the command exits with status 1.
If the file cannot be opened, an error goes to standard error and the exit
status is 1.

## Library use

```python
import io
from pcclub.processor import Event, EventProcessor, EventType

out = io.StringIO()
processor = EventProcessor(1, 10, 0, 120, out)
processor.process_event(Event(0, EventType.ENTER, "alice"))
processor.process_event(Event(0, EventType.TAKE, "alice", 1))
processor.process_event(Event(61, EventType.LEAVE, "alice"))
processor.close()
print(out.getvalue())
```

`EventProcessor` writes to standard output when `out` is not given.
`pcclub.processor.format_time` renders minutes since midnight as `HH:MM`.

`pcclub.cli` provides the input reading:

- `parse_time(text)` turns `HH:MM` into minutes and raises `ValueError` on a
  bad time;
- `parse_parameters(lines)` reads the three header lines into a
  `ClubParameters` (`tables`, `open_time`, `close_time`, `price`);
- `parse_event(line, tables)` returns an `Event`;
- `run(lines, out)` validates all input and then writes the log.

The last three raise `InputError` (a `ValueError` whose `line` attribute holds
the offending line) on malformed input.

`pcclub.bimap.BiMap` is the sorted one-to-one map that the processor uses to
link clients and tables. Optional `left_key` and `right_key` functions decide
when two values on a side count as the same. `insert` returns `False` when
either side is already present. It can be looked up from either side
(`at_left`, `at_right`, which raise `KeyError`; `contains_left`,
`contains_right`; `at_left_or_default`, `at_right_or_default`), supports
ordered bounds (`lower_bound_left`, `upper_bound_left`, `lower_bound_right`,
`upper_bound_right`, which return a pair or `None`), removal from either side
(`erase_left`, `erase_right`), in-order iteration (`left_items`,
`right_items`), `copy`, `len` and equality.