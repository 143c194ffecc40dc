import io

from symposium.config import Settings
from symposium.table import Table, run_table


def _lines(out):
    return [line.split(" ", 2) for line in out.getvalue().splitlines()]


def _run(*args):
    out = io.StringIO()
    table = run_table(Settings(*args), out)
    return table, _lines(out)


def test_fork_layout_wraps_around():
    table = Table(Settings(3, 100, 10, 10), io.StringIO())
    first, second, third = table.philosophers
    assert [p.id for p in table.philosophers] == [1, 2, 3]
    assert first.right_fork is table.forks[0]
    assert first.left_fork is table.forks[2]
    assert second.left_fork is table.forks[0]
    assert third.left_fork is table.forks[1]
    assert table.is_over() is False


def test_single_philosopher_takes_one_fork_and_dies():
    table, lines = _run(1, 40, 10, 10)
    assert table.is_over() is True
    assert lines[0][1:] == ["1", "has taken a r fork"]
    assert lines[-1][1:] == ["1", "died"]
    assert int(lines[-1][0]) >= 40


def test_meal_limit_ends_without_death():
    table, lines = _run(4, 1000, 10, 10, 2)
    assert table.is_over() is True
    assert all(state != "died" for _, _, state in lines)
    assert all(p.eat_count >= 2 for p in table.philosophers)


def test_starvation_ends_with_a_single_death_last():
    table, lines = _run(3, 20, 60, 60)
    assert table.is_over() is True
    deaths = [line for line in lines if line[2] == "died"]
    assert len(deaths) == 1
    assert lines[-1] == deaths[0]


def test_timestamps_never_go_backwards():
    _, lines = _run(5, 1000, 5, 5, 3)
    stamps = [int(stamp) for stamp, _, _ in lines]
    assert stamps == sorted(stamps)


def test_every_meal_follows_two_forks():
    table, lines = _run(4, 1000, 5, 5, 2)
    for philo in table.philosophers:
        states = [s for _, who, s in lines if who == str(philo.id)]
        forks = states.count("has taken a fork")
        meals = states.count("is eating")
        assert meals >= 2
        assert forks >= 2 * meals
        first_meal = states.index("is eating")
        assert states[first_meal - 2:first_meal] == ["has taken a fork"] * 2


def test_no_neighbours_hold_the_same_fork_after_run():
    table, _ = _run(2, 1000, 5, 5, 1)
    assert all(not fork.locked() for fork in table.forks)