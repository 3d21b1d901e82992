"""Shared state of the dining table: forks, philosophers and output."""

from __future__ import annotations

import sys
import threading
import time
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, TextIO

from philo.parsing import Settings


class Action(Enum):
    """Things a philosopher reports, with the text that is printed."""

    TAKEN_FORK = "has taken a fork"
    EATING = "is eating"
    SLEEPING = "is sleeping"
    THINKING = "is thinking"
    DIED = "died"


def timestamp() -> int:
    """Return the current wall-clock time in milliseconds."""
    return time.time_ns() // 1_000_000


def precise_sleep(ms: int) -> None:
    """Sleep for at least ``ms`` milliseconds, polling in short steps."""
    start = timestamp()
    while timestamp() - start < ms:
        time.sleep(0.0005)


@dataclass(eq=False)
class Philosopher:
    """One diner, holding references to the forks on either side."""

    index: int
    left_fork: threading.Lock
    right_fork: threading.Lock
    table: "Table"
    meals: int = 0
    last_meal: int = 0
    thread: Optional[threading.Thread] = field(default=None, repr=False)


class Table:
    """The table: settings, forks, philosophers and the shared flags."""

    def __init__(self, settings: Settings, out: Optional[TextIO] = None) -> None:
        self.settings = settings
        self.out = out if out is not None else sys.stdout
        self.start_time = 0
        self._print_lock = threading.Lock()
        self._died = threading.Event()
        self.forks: List[threading.Lock] = [
            threading.Lock() for _ in range(settings.amount)
        ]
        self.philosophers: List[Philosopher] = [
            Philosopher(
                index=position + 1,
                left_fork=self.forks[position],
                right_fork=self.forks[(position + 1) % settings.amount],
                table=self,
            )
            for position in range(settings.amount)
        ]

    def someone_died(self) -> bool:
        """Tell whether the simulation has been stopped."""
        return self._died.is_set()

    def mark_death(self) -> None:
        """Stop the simulation."""
        self._died.set()

    def wait_for_death(self) -> None:
        """Block until the simulation is stopped."""
        self._died.wait()

    def print_action(self, philo: Philosopher, action: Action) -> None:
        """Print one status line unless the simulation is already stopped."""
        now = timestamp()
        with self._print_lock:
            if not self.someone_died():
                self.out.write(f"{now} {philo.index} {action.value}\n")
                self.out.flush()

    def all_fed(self) -> bool:
        """Tell whether every philosopher has eaten the required meals."""
        required = self.settings.meals
        if required is None:
            return False
        return all(philo.meals >= required for philo in self.philosophers)