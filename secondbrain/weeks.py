"""Week arithmetic for the weekly task view."""

from __future__ import annotations

from datetime import datetime, timedelta

DATE_FORMAT = "%d/%m/%Y"
_WEEK = timedelta(days=7)
_WEEK_SPAN = timedelta(days=6)


def week_start(moment: datetime) -> datetime:
    """Return ``moment`` moved back to the Monday of its week, time of day kept."""
    return moment - timedelta(days=moment.weekday())


def format_date(moment: datetime) -> str:
    """Format a moment as day/month/year, the form used as a week key."""
    return moment.strftime(DATE_FORMAT)


class WeekSelector:
    """Tracks the current week and the week chosen for display."""

    def __init__(self, now: datetime | None = None) -> None:
        if now is None:
            now = datetime.now().astimezone()
        self.current = week_start(now)
        self.selected = self.current

    def previous(self) -> datetime:
        """Select the week before the selected one and return its start."""
        self.selected -= _WEEK
        return self.selected

    def next(self) -> datetime:
        """Select the week after the selected one and return its start."""
        self.selected += _WEEK
        return self.selected

    def is_current(self) -> bool:
        """Whether the selected week is the current week."""
        return self.selected == self.current

    def week_key(self) -> str:
        """The formatted start of the selected week, used to file tasks."""
        return format_date(self.selected)

    def label(self) -> str:
        """The selected week as a "start - end" range."""
        return f"{format_date(self.selected)} - {format_date(self.selected + _WEEK_SPAN)}"