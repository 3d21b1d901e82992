import pytest

from philo.cli import main


@pytest.mark.parametrize("argv", [[], ["1", "2", "3"], ["1"] * 6])
def test_bad_argument_count(argv, capsys):
    assert main(argv) == 1
    captured = capsys.readouterr()
    assert captured.err == "Error: Bad arguments\n"
    assert captured.out == ""


def test_invalid_values(capsys):
    assert main(["0", "800", "200", "200"]) == 1
    assert capsys.readouterr().out == "Error: Init failed\n"


def test_invalid_meal_count(capsys):
    assert main(["2", "800", "200", "200", "0"]) == 1
    assert capsys.readouterr().out == "Error: Init failed\n"


def test_single_philosopher_run(capsys):
    assert main(["1", "100", "50", "50"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith(" 1 died")


def test_meal_limited_run(capsys):
    assert main(["2", "800", "50", "50", "1"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert any(line.endswith("is eating") for line in lines)
    assert not any(line.endswith("died") for line in lines)