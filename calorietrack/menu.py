"""Numbered menus and the main command loop."""

from __future__ import annotations

import sys
from collections.abc import Callable
from typing import TextIO

from calorietrack.date import Date, _to_int
from calorietrack.diet_record import (
    DietRecord,
    add_new_record,
    query_records_by_date,
    write_report,
)
from calorietrack.food import Food
from calorietrack.user import User, _ask, configure_profile

_GOODBYE = (
    "====================================================\n"
    "\n"
    "Start Tracking ➞ Start Shining. Goodbye, Uncertainty ^_^\n"
    "\n"
    "====================================================\n"
)


class Menu:
    """A titled list of numbered options, each bound to an action."""

    def __init__(self, title: str, is_sub_menu: bool = False) -> None:
        self.title = title
        self.is_sub_menu = is_sub_menu
        self._entries: list[tuple[str, Callable[[], object]]] = []

    def add_option(self, option: str, action: Callable[[], object]) -> None:
        self._entries.append((option, action))

    def render(self) -> str:
        """Return the menu text, ending with the prompt."""
        lines = [f"\n=== {self.title} ===\n"]
        lines.extend(
            f"{number}. {option}\n"
            for number, (option, _) in enumerate(self._entries, start=1)
        )
        last = len(self._entries)
        if self.is_sub_menu:
            last += 1
            lines.append(f"{last}. 返回上级菜单\n")
        lines.append(f"请选择操作 (1-{last})：")
        return "".join(lines)

    def handle_choice(self, choice: str, out: TextIO | None = None) -> None:
        """Run the action chosen by ``choice``; the extra sub-menu number does nothing."""
        out = sys.stdout if out is None else out
        try:
            number = _to_int(choice)
            if 0 < number <= len(self._entries):
                self._entries[number - 1][1]()
            elif self.is_sub_menu and number == len(self._entries) + 1:
                return
            else:
                out.write("\n无效的选择，请重试。\n")
        except Exception:
            out.write("\n无效的输入，请输入数字。\n")

    def clear(self) -> None:
        self._entries.clear()

    def __len__(self) -> int:
        return len(self._entries)


def main_menu_text() -> str:
    return (
        "1. Configure Profile  2. Log Meals  3. Nutritional Insights  "
        "4. View Meal History  5. Exit\n"
        "Enter command (1-5): "
    )


def run_main_loop(
    user: User,
    foods: list[Food],
    records: list[DietRecord],
    input_fn: Callable[[], str] = input,
    out: TextIO | None = None,
) -> None:
    """Serve main-menu commands until the user chooses to exit."""
    out = sys.stdout if out is None else out
    while True:
        choice = _ask("\n" + main_menu_text(), input_fn, out)
        if choice == "1":
            configure_profile(user, input_fn=input_fn, out=out)
        elif choice == "2":
            add_new_record(records, foods, input_fn, out)
        elif choice == "3":
            try:
                write_report(user, records, Date.today(), out=out)
            except OSError:
                print("Failed to create report file!", file=sys.stderr)
        elif choice == "4":
            query_records_by_date(records, input_fn, out)
        elif choice == "5":
            out.write(_GOODBYE)
            return
        else:
            out.write("Invalid choice.\n")