"""Philosopher threads and the monitor that stops the simulation."""

from __future__ import annotations

import threading
import time

from philo.table import Action, Philosopher, Table, precise_sleep, timestamp


def _take_forks(philo: Philosopher) -> bool:
    """Take both forks; return False if the second one can never be had."""
    table = philo.table
    philo.left_fork.acquire()
    table.print_action(philo, Action.TAKEN_FORK)
    if philo.right_fork is philo.left_fork:
        # Alone at the table: only one fork exists, so wait for the end.
        table.wait_for_death()
        philo.left_fork.release()
        return False
    philo.right_fork.acquire()
    table.print_action(philo, Action.TAKEN_FORK)
    return True


def _drop_forks(philo: Philosopher) -> None:
    philo.left_fork.release()
    philo.right_fork.release()


def philosopher_routine(philo: Philosopher) -> None:
    """Think, eat and sleep until the simulation is stopped."""
    table = philo.table
    settings = table.settings
    if philo.index % 2 == 0:
        time.sleep(0.0001)
    while not table.someone_died():
        table.print_action(philo, Action.THINKING)
        if not _take_forks(philo):
            break
        table.print_action(philo, Action.EATING)
        philo.last_meal = timestamp()
        precise_sleep(settings.eat_time)
        philo.meals += 1
        _drop_forks(philo)
        table.print_action(philo, Action.SLEEPING)
        precise_sleep(settings.sleep_time)


def check_once(table: Table) -> bool:
    """Check for starvation or satisfaction once; return True if stopped."""
    for philo in table.philosophers:
        if timestamp() - philo.last_meal >= table.settings.die_time:
            table.print_action(philo, Action.DIED)
            table.mark_death()
            return True
    if table.all_fed():
        table.mark_death()
        return True
    time.sleep(0.001)
    return False


def monitor(table: Table) -> None:
    """Watch the table until the simulation is stopped."""
    while not table.someone_died():
        check_once(table)


def run(table: Table) -> None:
    """Run the whole simulation and wait for every thread to finish."""
    table.start_time = timestamp()
    for philo in table.philosophers:
        philo.last_meal = table.start_time
        philo.thread = threading.Thread(
            target=philosopher_routine,
            args=(philo,),
            name=f"philosopher-{philo.index}",
        )
        philo.thread.start()
        time.sleep(0.0001)
    watcher = threading.Thread(target=monitor, args=(table,), name="monitor")
    watcher.start()
    watcher.join()
    for philo in table.philosophers:
        philo.thread.join()