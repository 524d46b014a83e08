"""Foods, their categories and the food database file."""

from __future__ import annotations

import os
import re
from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

FOOD_HEADER = "Food Name,Calories(kcal/100g),Category"

_FLOAT_PREFIX = re.compile(
    r"\s*([+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?"
    r"|inf(?:inity)?|nan))",
    re.IGNORECASE,
)


def _to_float(text: str) -> float:
    """Read the number at the start of ``text``, ignoring what follows it."""
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"not a number: {text!r}")
    return float(match.group(1))


def _format_number(value: float) -> str:
    """Format a number with six significant digits, as the data files hold them."""
    return f"{value:g}"


def _atomic_write(path: Path, text: str) -> None:
    """Write ``text`` to a sibling temporary file, then move it over ``path``."""
    temp = path.with_name(f"{path.stem}_temp{path.suffix}")
    with open(temp, "w", encoding="utf-8", newline="\n") as handle:
        handle.write(text)
    os.replace(temp, path)


class FoodCategory(Enum):
    STAPLE_FOOD = "StapleFood"
    ANIMAL_PROTEINS = "AnimalProteins"
    VEGETABLES = "Vegetables"
    FRUITS = "Fruits"
    BEVERAGES = "Beverages"


@dataclass
class Food:
    """A food and its energy content per 100 g."""

    name: str = ""
    calories: float = 0.0
    category: FoodCategory = FoodCategory.STAPLE_FOOD


def category_to_string(category: FoodCategory) -> str:
    return category.value


def string_to_category(text: str) -> FoodCategory:
    """Return the category named ``text``; unknown names mean staple food."""
    try:
        return FoodCategory(text)
    except ValueError:
        return FoodCategory.STAPLE_FOOD


def save_foods(foods: Iterable[Food], path: str | os.PathLike[str] = "food_database.csv") -> None:
    """Write the food database, replacing any existing file."""
    lines = [FOOD_HEADER]
    lines.extend(
        f"{food.name},{_format_number(food.calories)},{category_to_string(food.category)}"
        for food in foods
    )
    _atomic_write(Path(path), "\n".join(lines) + "\n")


def _parse_food(line: str) -> Food:
    fields = line.split(",")
    fields += [""] * (3 - len(fields))
    name, calories, category = fields[:3]
    return Food(name, _to_float(calories), string_to_category(category))


def load_foods(path: str | os.PathLike[str] = "food_database.csv") -> list[Food]:
    """Read the food database; raises OSError if the file cannot be opened."""
    with open(path, encoding="utf-8") as handle:
        handle.readline()
        return [_parse_food(line.rstrip("\n")) for line in handle]