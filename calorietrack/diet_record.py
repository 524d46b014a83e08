"""Diet records: the log file, daily totals, the report and the record dialogues."""

from __future__ import annotations

import logging
import os
import sys
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from pathlib import Path
from typing import TextIO

from calorietrack.date import Date
from calorietrack.food import (
    Food,
    FoodCategory,
    _atomic_write,
    _format_number,
    _to_float,
    category_to_string,
    save_foods,
    string_to_category,
)
from calorietrack.user import User, _ask

_log = logging.getLogger(__name__)

RECORD_HEADER = "Date,Category,Name,Weight(g),Calories(kcal)"
DAIRY_NAMES = frozenset({"Milk", "Yogurt", "milk", "yogurt"})

_RULE = "=" * 60 + "\n"
_THIN_RULE = "-" * 60 + "\n"

_CATEGORY_KEYS = {
    "S": FoodCategory.STAPLE_FOOD,
    "s": FoodCategory.STAPLE_FOOD,
    "A": FoodCategory.ANIMAL_PROTEINS,
    "a": FoodCategory.ANIMAL_PROTEINS,
    "V": FoodCategory.VEGETABLES,
    "v": FoodCategory.VEGETABLES,
    "F": FoodCategory.FRUITS,
    "f": FoodCategory.FRUITS,
    "B": FoodCategory.BEVERAGES,
    "b": FoodCategory.BEVERAGES,
}

_RECOMMENDATIONS = (
    (FoodCategory.STAPLE_FOOD, "Staple Food", "200-300g"),
    (FoodCategory.ANIMAL_PROTEINS, "Animal Proteins", "120-200g"),
    (FoodCategory.VEGETABLES, "Vegetables", "300-500g"),
    (FoodCategory.FRUITS, "Fruits", "200-350g"),
)


@dataclass
class DietRecord:
    """One portion eaten: weight in g, energy in kcal."""

    date: Date = field(default_factory=Date.today)
    food_name: str = ""
    weight: float = 0.0
    calories: float = 0.0
    category: FoodCategory = FoodCategory.STAPLE_FOOD


def to_title_case(text: str) -> str:
    """Capitalise the first letter of each word and lower-case the rest."""
    result = []
    new_word = True
    for char in text:
        if char.isspace():
            new_word = True
            result.append(char)
        elif new_word:
            result.append(char.upper())
            new_word = False
        else:
            result.append(char.lower())
    return "".join(result)


def save_records(
    records: Iterable[DietRecord], path: str | os.PathLike[str] = "diet_records.csv"
) -> None:
    """Write the diet log, replacing any existing file."""
    lines = [RECORD_HEADER]
    lines.extend(
        ",".join(
            [
                str(record.date),
                category_to_string(record.category),
                record.food_name,
                _format_number(record.weight),
                _format_number(record.calories),
            ]
        )
        for record in records
    )
    _atomic_write(Path(path), "\n".join(lines) + "\n")


def _parse_record(line: str) -> DietRecord:
    fields = line.split(",")
    fields += [""] * (5 - len(fields))
    date_text, category_text, name, weight_text, calories_text = fields[:5]
    return DietRecord(
        date=Date.parse(date_text),
        food_name=name,
        weight=_to_float(weight_text),
        calories=_to_float(calories_text),
        category=string_to_category(category_text),
    )


def load_records(path: str | os.PathLike[str] = "diet_records.csv") -> list[DietRecord]:
    """Read the diet log, skipping lines that cannot be read.

    Raises OSError if the file cannot be opened.
    """
    records = []
    with open(path, encoding="utf-8") as handle:
        handle.readline()
        for line in handle:
            try:
                records.append(_parse_record(line.rstrip("\n")))
            except ValueError as exc:
                _log.warning("error loading records: %s", exc)
    return records


def _on_day(records: Iterable[DietRecord], date: Date) -> list[DietRecord]:
    return [record for record in records if record.date == date]


def daily_intake(records: Iterable[DietRecord], date: Date) -> dict[FoodCategory, float]:
    """Total weight eaten on ``date`` for every category."""
    intake = {category: 0.0 for category in FoodCategory}
    for record in _on_day(records, date):
        intake[record.category] += record.weight
    return intake


def total_calories(records: Iterable[DietRecord], date: Date) -> float:
    return sum((record.calories for record in _on_day(records, date)), 0.0)


def dairy_intake(records: Iterable[DietRecord], date: Date) -> float:
    """Weight of milk and yogurt logged as beverages on ``date``."""
    return sum(
        (
            record.weight
            for record in _on_day(records, date)
            if record.category is FoodCategory.BEVERAGES and record.food_name in DAIRY_NAMES
        ),
        0.0,
    )


def _physical_status(bmi: float) -> str:
    if bmi < 18.5:
        return "Underweight"
    if bmi < 24:
        return "Normal"
    if bmi < 28:
        return "Overweight"
    return "Obese"


def format_report(user: User, records: Iterable[DietRecord], date: Date) -> str:
    """Return the daily diet analysis report for ``date``."""
    records = list(records)
    bmi = user.bmi()
    intake = daily_intake(records, date)
    parts = [
        _RULE,
        f"Daily Diet Analysis Report ({date.year}/{date.month}/{date.day})\n",
        _THIN_RULE,
        f"Name: {user.name}\n",
        f"Age: {user.age}\n",
        f"Gender(F/M):{user.gender}\n",
        f"Height(cm): {int(user.height)}\n",
        f"Weight(kg): {int(user.weight)}\n",
        f"BMI: {bmi:.1f}\n",
        f"Physical Status: {_physical_status(bmi)}\n\n",
        "Nutritional Intake Profile (daily recommendation in parentheses) :\n",
        f"Food Energy Intake: {int(total_calories(records, date))}"
        f"({int(user.recommended_calories())}kcal)\n",
    ]
    parts.extend(
        f"{label}: {int(intake[category])} ({advice})\n"
        for category, label, advice in _RECOMMENDATIONS
    )
    parts.append(f"Diary: {int(dairy_intake(records, date))} (300g)\n")
    parts.append(_RULE)
    return "".join(parts)


def write_report(
    user: User,
    records: Iterable[DietRecord],
    date: Date | None = None,
    path: str | os.PathLike[str] = "diet_report.txt",
    out: TextIO | None = None,
) -> str:
    """Show the report for ``date`` (today by default) and write it to ``path``."""
    out = sys.stdout if out is None else out
    date = Date.today() if date is None else date
    with open(path, "w", encoding="utf-8", newline="\n") as handle:
        text = format_report(user, records, date)
        out.write(text)
        handle.write(text)
    return text


def add_new_record(
    records: list[DietRecord],
    foods: list[Food],
    input_fn: Callable[[], str] = input,
    out: TextIO | None = None,
    records_path: str | os.PathLike[str] = "diet_records.csv",
    foods_path: str | os.PathLike[str] = "food_database.csv",
) -> DietRecord | None:
    """Ask for a meal, log it for today and save both files.

    Returns the new record, or None if the category given is not known.
    """
    out = sys.stdout if out is None else out
    category = _CATEGORY_KEYS.get(
        _ask(
            "Select a category (S/A/V/F/B: Staple Food/Animal Proteins/"
            "Vegetables/Fruits/Beverages): ",
            input_fn,
            out,
        )
    )
    if category is None:
        out.write("Invalid input.\n")
        return None

    food_name = to_title_case(_ask("Food name: ", input_fn, out))
    food = next((item for item in foods if item.name == food_name), None)
    if food is None:
        out.write(f"{food_name} is not in the food database.\n")
        per_100g = _to_float(_ask("Enter calories per 100g (kcal/100g): ", input_fn, out))
        foods.append(Food(food_name, per_100g, category))
        save_foods(foods, foods_path)
        out.write("Food record saved.\n")
    else:
        per_100g = food.calories
        category = food.category

    weight = _to_float(_ask("Food weight (g): ", input_fn, out))
    record = DietRecord(Date.today(), food_name, weight, per_100g * weight / 100.0, category)
    records.append(record)
    save_records(records, records_path)
    out.write("Diet record saved.\n")
    return record


def query_records_by_date(
    records: Iterable[DietRecord],
    input_fn: Callable[[], str] = input,
    out: TextIO | None = None,
) -> list[DietRecord]:
    """Ask for a date and list the records logged on it; return those records."""
    out = sys.stdout if out is None else out
    query = _ask("Enter date (yyyy/mm/dd): ", input_fn, out)
    try:
        wanted = Date.parse(query)
    except ValueError:
        out.write("Invalid date format.\n")
        return []

    found = _on_day(records, wanted)
    if not found:
        out.write(f"No dietary records found for {query}, in the database.\n")
        return found

    out.write(
        f"{'Date':<12}{'Category':<18}{'Name':<18}{'Weight (g)':<10}{'Calories (kcal)':<15}\n"
    )
    for record in found:
        out.write(
            f"{query:<12}{category_to_string(record.category):<18}{record.food_name:<18}"
            f"{int(record.weight):<10}{int(record.calories):<15}\n"
        )
    return found