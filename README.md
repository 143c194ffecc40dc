# symposium

A command-line simulation of the dining philosophers problem.

Philosophers sit around a table. Each one thinks, picks up two forks, eats,
and sleeps, over and over. A philosopher who goes longer than `time_to_die`
milliseconds without starting a meal dies, and the simulation ends. If a
number of meals is given, the simulation also ends once every philosopher
has eaten that many times.

Two variants are provided:

- `symposium` runs every philosopher in its own thread. A fork lies
  between each pair of neighbours, and each fork has its own lock.
  Odd-numbered philosophers take their right fork first. Even-numbered
  philosophers take their left fork first. A single monitor thread watches
  the whole table.
- `symposium-shared` puts all the forks in one pool, guarded by a counting
  semaphore that any diner may draw from. Each diner has its own monitor
  thread. When a diner has eaten the required number of meals, it leaves the
  table. The first death stops every diner, and nothing is printed after it.

## Installation

```
pip install .
```

To also install the test dependencies:

```
pip install .[test]
```

## Usage

```
symposium number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
symposium-shared number_of_philosophers time_to_die time_to_eat time_to_sleep [number_of_times_each_philosopher_must_eat]
```

Arguments:

- All times are in milliseconds.
- Every argument must be a positive integer no larger than `2147483647`.
- Digits may be preceded by a `+` and surrounded by spaces, tabs or
  newlines.
- There must be between 1 and 200 philosophers.

Example:

```
symposium 5 800 200 200 7
```

Each event is printed on its own line. A line holds the milliseconds since
the start, the philosopher's number and the event:

```
0 1 is thinking
0 2 is thinking
0 2 has taken a fork
0 2 has taken a fork
0 2 is eating
...
```

The events are `is thinking`, `has taken a fork`, `is eating`,
`is sleeping` and `died`. A philosopher alone at the table takes one fork,
cannot eat, and dies.

If the arguments are invalid, the usage line or an error message is
written to standard error and the command exits with status 1. Otherwise it
exits with status 0 once the dinner is over, whether or not someone died.

## Library use

- `symposium.parsing`
  - `is_well_formed(text)` checks the shape of one argument.
  - `parse_number(text)` converts one argument to an integer. It raises
    `ValueError` on trailing garbage or on values above `INT_MAX`.
  - `parse_arguments(args)` checks the four or five arguments and returns
    their values. It raises `ArgumentError` when they are invalid.
- `symposium.config`
  - `Settings.from_arguments(args)` builds a frozen `Settings`. Its fields
    are `count`, `time_to_die`, `time_to_eat`, `time_to_sleep` and
    `meals_required`. It also enforces the 1 to 200 philosopher limit.
  - `semaphore_names(prefix, count)` returns names of the form
    `/<prefix>0`, `/<prefix>1`, and so on.
- `symposium.clock`
  - `Clock.now()` gives the milliseconds since the first reading.
  - `Clock.sleep(duration, stopped)` waits for `duration` milliseconds or
    until `stopped()` returns true.
- `symposium.table`
  - `run_table(settings, out)` runs the per-fork-lock table and writes
    events to `out`, which defaults to standard output. It returns the
    finished `Table`.
  - `Table.is_over()` tells whether the dinner has ended.
- `symposium.shared`
  - `run_shared(settings, out)` does the same for the shared-pool variant
    and returns the finished `SharedTable`.
  - `SharedTable.casualty` holds the number of the diner who died, if any.

```python
import io
from symposium.config import Settings
from symposium.table import run_table

out = io.StringIO()
run_table(Settings.from_arguments(["4", "410", "200", "200", "3"]), out)
print(out.getvalue())
```

## What it does not do

Both variants run entirely inside one Python process, as threads. The
shared-pool variant does not start a separate process per diner, and it
does not use system-wide named semaphores. `semaphore_names` only produces
names; nothing in the package opens semaphores under them.