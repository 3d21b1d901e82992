import io

from philo.parsing import Settings
from philo.simulation import check_once, monitor, run
from philo.table import Table, timestamp


def _lines(out):
    return out.getvalue().splitlines()


def _table(*args):
    out = io.StringIO()
    return Table(Settings(*args), out), out


def test_check_once_detects_starvation():
    table, out = _table(2, 100, 50, 50)
    table.philosophers[0].last_meal = 0
    table.philosophers[1].last_meal = timestamp()
    assert check_once(table) is True
    assert table.someone_died() is True
    lines = _lines(out)
    assert len(lines) == 1
    assert lines[0].endswith(" 1 died")


def test_check_once_keeps_going_when_healthy():
    table, out = _table(2, 10000, 50, 50)
    now = timestamp()
    for philo in table.philosophers:
        philo.last_meal = now
    assert check_once(table) is False
    assert table.someone_died() is False
    assert out.getvalue() == ""


def test_check_once_stops_when_all_fed():
    table, out = _table(2, 10000, 50, 50, 1)
    now = timestamp()
    for philo in table.philosophers:
        philo.last_meal = now
        philo.meals = 1
    assert check_once(table) is True
    assert table.someone_died() is True
    assert out.getvalue() == ""


def test_monitor_returns_after_death():
    table, out = _table(1, 100, 50, 50)
    table.philosophers[0].last_meal = 0
    monitor(table)
    assert table.someone_died() is True
    assert _lines(out)[-1].endswith(" 1 died")


def test_single_philosopher_dies():
    table, out = _table(1, 100, 50, 50)
    run(table)
    lines = _lines(out)
    assert lines[0].endswith(" 1 is thinking")
    assert lines[1].endswith(" 1 has taken a fork")
    assert lines[-1].endswith(" 1 died")
    assert len(lines) == 3


def test_meal_limit_ends_without_death():
    table, out = _table(4, 800, 50, 50, 2)
    run(table)
    assert table.someone_died() is True
    assert all(philo.meals >= 2 for philo in table.philosophers)
    assert not any(line.endswith("died") for line in _lines(out))
    for philo in table.philosophers:
        eating = [line for line in _lines(out) if line.split()[1:] == [str(philo.index), "is", "eating"]]
        assert len(eating) >= 2


def test_starving_pair_reports_one_death():
    table, out = _table(2, 100, 200, 100)
    run(table)
    died = [line for line in _lines(out) if line.endswith("died")]
    assert len(died) == 1
    assert all(not philo.thread.is_alive() for philo in table.philosophers)