"""Command-line entry point for the calorie tracker."""

from __future__ import annotations

import argparse
import sys

from calorietrack.diet_record import load_records
from calorietrack.food import load_foods
from calorietrack.menu import run_main_loop
from calorietrack.user import User, initialize_user, welcome_screen

USER_FILE = "user.csv"


def _read() -> str:
    return input()


def main(argv: list[str] | None = None) -> int:
    """Start the tracker with the data files of the current directory."""
    parser = argparse.ArgumentParser(
        prog="calorietrack",
        description="Log meals and check daily nutrition against recommendations.",
    )
    parser.parse_args(argv)

    out = sys.stdout
    try:
        user = User.load(USER_FILE)
        first_run = False
    except FileNotFoundError:
        user, first_run = User(), True
    except (OSError, ValueError):
        user, first_run = User(), False

    try:
        if first_run:
            user = initialize_user(USER_FILE, _read, out)
        else:
            out.write(welcome_screen(user.name))

        try:
            foods = load_foods()
        except OSError:
            foods = []
        try:
            records = load_records()
        except OSError:
            records = []

        run_main_loop(user, foods, records, _read, out)
    except (EOFError, KeyboardInterrupt):
        out.write("\n")
    finally:
        user.save(USER_FILE)
    return 0


if __name__ == "__main__":
    sys.exit(main())