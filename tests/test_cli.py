from symposium.cli import main, main_shared


def test_wrong_argument_count_prints_usage(capsys):
    assert main(["4"]) == 1
    assert "Usage: ./philo number_of_philosophers" in capsys.readouterr().err
    assert main_shared(["4"]) == 1
    assert "Usage: ./philo number_of_philosophers" in capsys.readouterr().err


def test_malformed_argument_is_rejected(capsys):
    assert main(["abc", "800", "200", "200"]) == 1
    assert "'abc' is not a valid unsigned integer." in capsys.readouterr().err
    assert main_shared(["abc", "800", "200", "200"]) == 1
    assert "'abc' is not a valid unsigned integer." in capsys.readouterr().err


def test_zero_is_rejected(capsys):
    expected = "not a valid unsigned integer between 1 and INT_MAX"
    assert main(["0", "800", "200", "200"]) == 1
    assert expected in capsys.readouterr().err
    assert main_shared(["0", "800", "200", "200"]) == 1
    assert expected in capsys.readouterr().err


def test_too_many_philosophers_is_rejected(capsys):
    expected = "there must be between 1 and 200 philosophers."
    assert main(["201", "800", "200", "200"]) == 1
    assert expected in capsys.readouterr().err
    assert main_shared(["201", "800", "200", "200"]) == 1
    assert expected in capsys.readouterr().err


def test_successful_dinner_returns_zero(capsys):
    assert main(["3", "400", "40", "40", "1"]) == 0
    out = capsys.readouterr().out
    assert "is eating" in out
    assert "died" not in out


def test_successful_shared_dinner_returns_zero(capsys):
    assert main_shared(["3", "400", "40", "40", "1"]) == 0
    out = capsys.readouterr().out
    assert "is eating" in out
    assert "died" not in out


def test_death_still_exits_cleanly(capsys):
    assert main(["4", "50", "200", "200"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith("died")


def test_shared_death_still_exits_cleanly(capsys):
    assert main_shared(["4", "50", "200", "200"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[-1].endswith("died")