# calorietrack

A small interactive command-line diary for what you eat each day. It keeps
your profile (name, age, gender, height, weight), a database of foods with
their energy per 100 g, and a log of meals. It can also print a daily
nutrition report.

## Installing

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Running

```
calorietrack
```

The command takes no options apart from `--help`. It works in the current
directory and keeps its data there in plain CSV files, each with one header
line:

- `user.csv`: your profile (`Name,Age,Gender,Height,Weight`)
- `food_database.csv`: known foods with their kcal per 100 g and category
- `diet_records.csv`: every logged meal (date, category, name, weight in g,
  calories in kcal)

If `user.csv` does not exist, the program asks for your personal data and
saves it. Otherwise it greets you by name and shows the current time. Then it
shows the main menu:

```
1. Configure Profile  2. Log Meals  3. Nutritional Insights  4. View Meal History  5. Exit
```

- **Configure Profile**: change the name, age, gender, height or weight.
  Choose `6` to save and return. Any other input returns without saving
  there. The profile is saved again when the program ends.
- **Log Meals**: choose a category with one letter (`S`, `A`, `V`, `F` or
  `B`, upper or lower case) for Staple Food, Animal Proteins, Vegetables,
  Fruits or Beverages. Then give a food name and its weight in grams. The
  name is put in title case. If the food is already in the database, its
  stored calories and category are used. If it is not, you are asked for
  its kcal per 100 g and it is added to `food_database.csv`. The meal is
  logged with today's date.
- **Nutritional Insights**: prints today's report and writes it to
  `diet_report.txt`. The report shows:
  - the profile, BMI and physical status;
  - energy intake against the recommended calories;
  - grams eaten in each food group against daily recommendations;
  - milk and yogurt logged as beverages, which appear on the `Diary:` line.
- **View Meal History**: lists the meals logged on a date given as
  `YYYY/MM/DD` or `YYYY/M/D`.
- **Exit**: says goodbye and ends. End of input (Ctrl-D) or Ctrl-C also ends
  the program, and the profile is still saved.

The food database and the meal log are written to a temporary file first.
That file then replaces the old one.

## Using it as a library

```python
from calorietrack.date import Date
from calorietrack.user import User
from calorietrack.diet_record import (
    load_records, total_calories, daily_intake, format_report,
)

user = User.load("user.csv")
records = load_records("diet_records.csv")
day = Date.parse("2024/05/01")
print(total_calories(records, day))
print(daily_intake(records, day))
print(format_report(user, records, day))
```

Modules:

- `calorietrack.date`: `Date`, an immutable day. It checks its fields when
  created: years 1900 to 2100, real months, and days that exist in that
  month, leap years included. `Date.parse("2024/2/30")` raises
  `ValueError`. `str(date)` gives `YYYY/MM/DD`, and `Date.today()` gives
  today's date.
- `calorietrack.food`:
  - `FoodCategory` and `Food`;
  - `category_to_string` and `string_to_category`; unknown names give
    `STAPLE_FOOD`;
  - `save_foods` and `load_foods`.
- `calorietrack.user`:
  - `User`, with `bmi()`, `bmi_category()`, `bmr()`,
    `recommended_calories()`, `save()` and `User.load()`;
  - `bmr()` uses the Mifflin–St Jeor formula multiplied by 1.2;
  - the dialogues `initialize_user` and `configure_profile`;
  - `welcome_screen`.
- `calorietrack.diet_record`:
  - `DietRecord` and `to_title_case`;
  - `save_records` and `load_records`; lines that cannot be read are
    skipped with a logged warning;
  - `daily_intake`, `total_calories` and `dairy_intake`;
  - `format_report` and `write_report`;
  - the dialogues `add_new_record` and `query_records_by_date`.
- `calorietrack.database`: `Database`, a generic list of records kept in a
  file under one header line. The item type must provide `header()` and
  `from_line()` class methods, and each item a `to_line()` method.
- `calorietrack.menu`:
  - `Menu`, a titled list of numbered options bound to actions; its own
    labels and messages are in Chinese;
  - `main_menu_text`;
  - `run_main_loop`.
- `calorietrack.cli`: `main`, the entry point of the `calorietrack` command.

The dialogue functions take an `input_fn` (called with no arguments, returns
one line) and an `out` text stream. You can drive them without a terminal.

## What it does not do

- There is one profile per directory.
- Logged meals cannot be edited or deleted from the program.
- Meals are always logged with today's date.
- The menu shows the report only for today. `format_report` accepts any
  date.
- The CSV files are split on commas without quoting. Food names must not
  contain commas.