import pytest

from calorietrack.cli import main
from calorietrack.date import Date
from calorietrack.diet_record import DietRecord, save_records
from calorietrack.food import FoodCategory
from calorietrack.user import User


def _feed(monkeypatch, *answers):
    remaining = iter(answers)

    def fake_input(prompt=""):
        try:
            return next(remaining)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)


def test_first_run_creates_profile(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    _feed(monkeypatch, "Ann", "30", "F", "165", "55", "5")
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "* Welcome to Calorie Track Daily *" in output
    assert "User record saved." in output
    user = User.load(tmp_path / "user.csv")
    assert (user.name, user.age, user.gender) == ("Ann", 30, "F")
    assert user.height == 165.0


def test_returning_user_is_greeted(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    User("Bob", 40, "M", 180.0, 80.0).save(tmp_path / "user.csv")
    _feed(monkeypatch, "5")
    assert main([]) == 0
    output = capsys.readouterr().out
    assert "Hi Bob! Current time : " in output
    assert "Enter your personal data:" not in output


def test_existing_records_are_loaded(tmp_path, monkeypatch, capsys):
    monkeypatch.chdir(tmp_path)
    User("Bob", 40, "M", 180.0, 80.0).save(tmp_path / "user.csv")
    save_records(
        [DietRecord(Date(2024, 1, 5), "Rice", 150.0, 174.0, FoodCategory.STAPLE_FOOD)],
        tmp_path / "diet_records.csv",
    )
    _feed(monkeypatch, "4", "2024/1/5", "5")
    main([])
    output = capsys.readouterr().out
    assert "2024/1/5    StapleFood" in output


def test_end_of_input_still_saves_profile(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    User("Bob", 40, "M", 180.0, 80.0).save(tmp_path / "user.csv")
    _feed(monkeypatch, "1", "1", "Carl")
    assert main([]) == 0
    assert User.load(tmp_path / "user.csv").name == "Carl"


def test_rejects_unknown_arguments(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    with pytest.raises(SystemExit) as excinfo:
        main(["--bogus"])
    assert excinfo.value.code == 2