"""The user profile, its file and the profile dialogues."""

from __future__ import annotations

import datetime as _dt
import math
import os
import sys
from collections.abc import Callable
from dataclasses import dataclass
from typing import TextIO

from calorietrack.date import _to_int
from calorietrack.food import _format_number, _to_float

USER_HEADER = "Name,Age,Gender,Height,Weight"

_BANNER = (
    "**********************************\n"
    "*                                *\n"
    "* Welcome to Calorie Track Daily *\n"
    "*                                *\n"
    "**********************************\n"
)


@dataclass
class User:
    """Personal data; height in cm, weight in kg."""

    name: str = ""
    age: int = 0
    gender: str = ""
    height: float = 0.0
    weight: float = 0.0

    def bmi(self) -> float:
        metres = self.height / 100.0
        square = metres * metres
        if square == 0:
            if self.weight == 0 or math.isnan(self.weight):
                return math.nan
            return math.copysign(math.inf, self.weight)
        return self.weight / square

    def bmi_category(self) -> str:
        bmi = self.bmi()
        if bmi < 18.5:
            return "过轻(Underweight)"
        if bmi < 24:
            return "正常(Normal)"
        if bmi < 28:
            return "超重(Overweight)"
        return "肥胖(Obesity)"

    def bmr(self) -> float:
        """Basal metabolic rate scaled by the light-activity factor."""
        base = 10 * self.weight + 6.25 * self.height - 5 * self.age
        base += 5 if self.gender == "M" else -161
        return base * 1.2

    def recommended_calories(self) -> float:
        return self.bmr()

    def save(self, path: str | os.PathLike[str] = "user.csv") -> None:
        row = ",".join(
            [
                self.name,
                str(self.age),
                self.gender,
                _format_number(self.height),
                _format_number(self.weight),
            ]
        )
        with open(path, "w", encoding="utf-8", newline="\n") as handle:
            handle.write(f"{USER_HEADER}\n{row}")

    @classmethod
    def load(cls, path: str | os.PathLike[str] = "user.csv") -> User:
        """Read a profile; raises OSError or ValueError if there is none."""
        with open(path, encoding="utf-8") as handle:
            handle.readline()
            line = handle.readline()
        if not line:
            raise ValueError(f"{os.fspath(path)} holds no user record")
        fields = line.rstrip("\n").split(",")
        fields += [""] * (5 - len(fields))
        name, age, gender, height, weight = fields[:5]
        return cls(name, _to_int(age), gender, _to_float(height), _to_float(weight))


def _ask(prompt: str, input_fn: Callable[[], str], out: TextIO) -> str:
    out.write(prompt)
    out.flush()
    return input_fn()


def initialize_user(
    path: str | os.PathLike[str] = "user.csv",
    input_fn: Callable[[], str] = input,
    out: TextIO | None = None,
) -> User:
    """Ask for a new profile, save it and return it."""
    out = sys.stdout if out is None else out
    out.write(_BANNER)
    out.write("Enter your personal data:\n")
    user = User()
    user.name = _ask("Name: ", input_fn, out)
    user.age = _to_int(_ask("Age: ", input_fn, out))
    user.gender = _ask("Gender(F/M): ", input_fn, out)
    user.height = _to_float(_ask("Height(cm): ", input_fn, out))
    user.weight = _to_float(_ask("Weight(kg): ", input_fn, out))
    out.write("User record saved.\n\n")
    user.save(path)
    return user


def configure_profile(
    user: User,
    path: str | os.PathLike[str] = "user.csv",
    input_fn: Callable[[], str] = input,
    out: TextIO | None = None,
) -> None:
    """Let the user edit the profile field by field until they leave."""
    out = sys.stdout if out is None else out
    while True:
        out.write("\n1. Name  2. Age  3. Gender  4. Height  5. Weight  6. Exit\n")
        choice = _ask("Enter command (1-6): ", input_fn, out)
        if choice == "1":
            user.name = _ask("Name: ", input_fn, out)
        elif choice == "2":
            try:
                user.age = _to_int(_ask("Age: ", input_fn, out))
            except ValueError:
                pass
        elif choice == "3":
            user.gender = _ask("Gender(F/M): ", input_fn, out)
        elif choice == "4":
            try:
                user.height = _to_float(_ask("Height(cm): ", input_fn, out))
            except ValueError:
                pass
        elif choice == "5":
            try:
                user.weight = _to_float(_ask("Weight(kg): ", input_fn, out))
            except ValueError:
                pass
        elif choice == "6":
            out.write("User database saved.\n")
            user.save(path)
            return
        else:
            out.write("Invalid choice.\n")
            return


def welcome_screen(user_name: str, now: _dt.datetime | None = None) -> str:
    """Return the greeting shown to a returning user."""
    now = _dt.datetime.now() if now is None else now
    stamp = now.strftime("%a %b %d %H:%M:%S %Y")
    return f"{_BANNER}Hi {user_name}! Current time : {stamp}\n"