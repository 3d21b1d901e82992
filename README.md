# philo

A simulation of the dining philosophers problem. Each philosopher runs in
its own thread and takes the two forks on either side of it. A monitor
thread watches for starvation. The simulation ends in one of two ways. A
philosopher goes too long without eating and dies. Or, if you set a meal
count, every philosopher has eaten that many meals.

## Installation

```
pip install .
```

## Usage

```
philo number_of_philosophers time_to_die time_to_eat time_to_sleep [meals_each]
```

All times are in milliseconds. Every value must be a positive integer. If
`meals_each` is given, the simulation stops once every philosopher has eaten
at least that many times.

```
philo 5 800 200 200
philo 4 410 200 200 7
```

Each state change is printed on standard output as one line. The line holds
the wall-clock time in milliseconds since the epoch, the philosopher's number
(counting from 1) and the action:

```
1716820000123 1 has taken a fork
1716820000123 1 is eating
1716820000323 1 is sleeping
1716820000523 1 is thinking
1716820000900 3 died
```

Nothing more is printed once the simulation has stopped. When it stops
because everyone has eaten enough, no `died` line appears. With a single
philosopher there is only one fork. That philosopher takes it and then waits
until the monitor reports the death.

Exit status and error messages:

- A wrong number of arguments prints `Error: Bad arguments` to standard
  error, and the exit status is 1.
- A value that is zero, negative or not a number prints `Error: Init failed`
  to standard output, and the exit status is 1.
- A completed run exits with status 0.

## Library use

```python
import sys

from philo.parsing import parse_settings
from philo.table import Table
from philo.simulation import run

settings = parse_settings(["5", "800", "200", "200", "3"])
table = Table(settings, sys.stdout)
run(table)
```

The modules:

- `philo.parsing`
  - `Settings` is a frozen dataclass with the fields `amount`, `die_time`,
    `eat_time`, `sleep_time` and `meals`. `meals` is `None` when no count is
    set.
  - `parse_settings(args)` reads four or five argument strings. It raises
    `SettingsError`, a subclass of `ValueError`, when the count is wrong or a
    value is not positive.
  - `atoi(text)` reads a leading integer leniently. It skips leading
    whitespace and accepts one sign, and it stops at the first non-digit.
    For example, `atoi("  42abc")` returns `42`. It returns `0` when there
    are no digits, or when a second sign follows the first.
- `philo.table`
  - `Table(settings, out)` holds the forks, the `Philosopher` objects and the
    stop flag. `out` defaults to standard output.
  - `print_action(philo, action)` writes one `Action` line.
  - `someone_died()` and `mark_death()` read and set the stop flag.
  - `all_fed()` tells whether the meal count has been reached. It always
    returns `False` when no count is set.
  - `timestamp()` returns the current time in milliseconds.
  - `precise_sleep(ms)` sleeps for at least `ms` milliseconds.
- `philo.simulation`
  - `run(table)` starts one thread per philosopher and a monitor thread, then
    waits for all of them to finish.
  - `philosopher_routine(philo)` is the loop of think, eat and sleep that
    each philosopher thread runs.
  - `monitor(table)` repeats `check_once(table)` until the simulation stops.
    `check_once` performs a single check and returns `True` if it stopped the
    simulation.

## Tests

```
pip install ".[test]"
pytest
```