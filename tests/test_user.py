import datetime
import io
from functools import partial

import pytest

from calorietrack.user import (
    User,
    configure_profile,
    initialize_user,
    welcome_screen,
)


def _inputs(*answers):
    return partial(next, iter(answers))


def test_bmi_invariant():
    user = User("Ann", 30, "F", 165, 55.5)
    assert user.bmi() * (1.65 ** 2) == pytest.approx(55.5)


def test_bmi_without_height():
    assert User(weight=60).bmi() == float("inf")
    assert str(User().bmi()) == "nan"


@pytest.mark.parametrize(
    "weight, expected",
    [
        (18, "过轻(Underweight)"),
        (18.5, "正常(Normal)"),
        (24, "超重(Overweight)"),
        (28, "肥胖(Obesity)"),
    ],
)
def test_bmi_category_thresholds(weight, expected):
    assert User(height=100, weight=weight).bmi_category() == expected


def test_bmr_male_worked_example():
    user = User("Bo", 30, "M", 160, 60)
    assert user.bmr() == pytest.approx(1746.0)
    assert user.recommended_calories() == user.bmr()


def test_bmr_non_male_uses_female_formula():
    female = User("A", 30, "F", 160, 60)
    other = User("A", 30, "", 160, 60)
    male = User("A", 30, "M", 160, 60)
    assert female.bmr() == other.bmr()
    assert male.bmr() > female.bmr()


def test_save_load_round_trip(tmp_path):
    path = tmp_path / "user.csv"
    user = User("Ann", 30, "F", 165, 55.5)
    user.save(path)
    assert User.load(path) == user


def test_save_layout(tmp_path):
    path = tmp_path / "user.csv"
    User("Ann", 30, "F", 165, 55.5).save(path)
    assert path.read_text(encoding="utf-8") == "Name,Age,Gender,Height,Weight\nAnn,30,F,165,55.5"


def test_load_missing(tmp_path):
    with pytest.raises(FileNotFoundError):
        User.load(tmp_path / "user.csv")


def test_load_header_only(tmp_path):
    path = tmp_path / "user.csv"
    path.write_text("Name,Age,Gender,Height,Weight\n", encoding="utf-8")
    with pytest.raises(ValueError):
        User.load(path)


def test_initialize_user(tmp_path):
    path = tmp_path / "user.csv"
    out = io.StringIO()
    user = initialize_user(path, _inputs("Ann", "30", "F", "165", "55.5"), out)
    assert user == User("Ann", 30, "F", 165.0, 55.5)
    assert User.load(path) == user
    assert "Welcome to Calorie Track Daily" in out.getvalue()
    assert "User record saved." in out.getvalue()


def test_initialize_user_bad_age(tmp_path):
    with pytest.raises(ValueError):
        initialize_user(tmp_path / "user.csv", _inputs("Ann", "old", "F", "1", "1"), io.StringIO())


def test_configure_profile_edits_and_saves(tmp_path):
    path = tmp_path / "user.csv"
    user = User("Ann", 30, "F", 165, 55.5)
    out = io.StringIO()
    configure_profile(
        user,
        path,
        _inputs("1", "Bob", "2", "41", "3", "M", "4", "180", "5", "80", "6"),
        out,
    )
    assert user == User("Bob", 41, "M", 180.0, 80.0)
    assert User.load(path) == user
    assert "User database saved." in out.getvalue()


def test_configure_profile_ignores_bad_numbers(tmp_path):
    user = User("Ann", 30, "F", 165, 55.5)
    configure_profile(
        user, tmp_path / "user.csv", _inputs("2", "x", "4", "", "5", "?", "6"), io.StringIO()
    )
    assert user == User("Ann", 30, "F", 165, 55.5)


def test_configure_profile_invalid_choice_leaves_without_saving(tmp_path):
    path = tmp_path / "user.csv"
    out = io.StringIO()
    configure_profile(User("Ann"), path, _inputs("9"), out)
    assert "Invalid choice." in out.getvalue()
    assert not path.exists()


def test_welcome_screen():
    text = welcome_screen("Ann", datetime.datetime(2024, 1, 5, 13, 4, 5))
    assert "Hi Ann! Current time : Fri Jan 05 13:04:05 2024" in text
    assert text.startswith("**********************************\n")