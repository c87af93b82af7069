"""Calendar state and the pure parts of the month view."""

from __future__ import annotations

import dataclasses
import datetime
import enum

from ciary.config import Config
from ciary.dates import _DateLike, day_of_week, days_in_month, get_current_date

MONTH_NAMES = (
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
)
DAY_NAMES = ("Su", "Mo", "Tu", "We", "Th", "Fr", "Sa")
MAX_WEEKS = 6


class Mode(enum.Enum):
    """What the application is showing."""

    CALENDAR = "calendar"
    HELP = "help"


@dataclasses.dataclass
class AppState:
    """The displayed month and the selected day.

    ``current_date`` identifies the displayed month; it is kept in step
    with ``selected_date`` whenever navigation leaves the month.
    """

    current_date: datetime.date = dataclasses.field(default_factory=get_current_date)
    selected_date: datetime.date | None = None
    config: Config = dataclasses.field(default_factory=Config)
    mode: Mode = Mode.CALENDAR

    def __post_init__(self) -> None:
        if self.selected_date is None:
            self.selected_date = self.current_date

    def _go_to_month(self, year: int, month: int) -> None:
        day = min(self.selected_date.day, days_in_month(month, year))
        self.selected_date = datetime.date(year, month, day)
        self.current_date = self.selected_date

    def move_left(self) -> None:
        """Select the previous day, moving to the previous month if needed."""
        previous = self.selected_date - datetime.timedelta(days=1)
        month_changed = previous.month != self.selected_date.month
        self.selected_date = previous
        if month_changed:
            self.current_date = previous

    def move_right(self) -> None:
        """Select the next day, moving to the next month if needed."""
        following = self.selected_date + datetime.timedelta(days=1)
        month_changed = following.month != self.selected_date.month
        self.selected_date = following
        if month_changed:
            self.current_date = following

    def move_up(self) -> None:
        """Select the same weekday a week earlier, within the month."""
        if self.selected_date.day > 7:
            self.selected_date -= datetime.timedelta(days=7)

    def move_down(self) -> None:
        """Select the same weekday a week later, within the month."""
        last = days_in_month(self.selected_date.month, self.selected_date.year)
        if self.selected_date.day + 7 <= last:
            self.selected_date += datetime.timedelta(days=7)

    def previous_month(self) -> None:
        """Show the previous month, keeping the selected day where possible."""
        year, month = self.current_date.year, self.current_date.month
        if month == 1:
            self._go_to_month(year - 1, 12)
        else:
            self._go_to_month(year, month - 1)

    def next_month(self) -> None:
        """Show the next month, keeping the selected day where possible."""
        year, month = self.current_date.year, self.current_date.month
        if month == 12:
            self._go_to_month(year + 1, 1)
        else:
            self._go_to_month(year, month + 1)

    def previous_year(self) -> None:
        """Show the same month a year earlier."""
        self._go_to_month(self.current_date.year - 1, self.current_date.month)

    def next_year(self) -> None:
        """Show the same month a year later."""
        self._go_to_month(self.current_date.year + 1, self.current_date.month)


def month_grid(year: int, month: int) -> list[list[int | None]]:
    """Return the weeks of a month, Sunday first, with None for blank cells."""
    first = day_of_week(year, month, 1)
    last = days_in_month(month, year)
    cells: list[int | None] = [None] * first + list(range(1, last + 1))
    cells += [None] * (-len(cells) % 7)
    weeks = [cells[start:start + 7] for start in range(0, len(cells), 7)]
    return weeks[:MAX_WEEKS]


def month_title(year: int, month: int) -> str:
    """Return the heading of the month view, such as ``July 2024``."""
    return f"{MONTH_NAMES[month - 1]} {year}"


def status_text(selected: _DateLike, entry_count: int) -> str:
    """Return the status line describing the selected day."""
    stamp = f"{selected.year:04d}-{selected.month:02d}-{selected.day:02d}"
    if entry_count == 0:
        return f"Calendar | Selected: {stamp} | No entry"
    noun = "entry" if entry_count == 1 else "entries"
    return f"Calendar | Selected: {stamp} | {entry_count} {noun}"


def instructions_text(editor: str) -> str:
    """Return the key summary shown under the calendar."""
    new_text = "Enter: New" if editor == "nano" else "n: New"
    return f"Arrows: Navigate  {new_text}  v: View  h: Help  q: Quit"