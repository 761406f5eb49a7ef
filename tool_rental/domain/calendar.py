"""Calendar day classification - weekdays, holidays and chargeable days"""

from datetime import date, timedelta

from tool_rental.utils.date_utils import generate_date_range

SATURDAY = 5
SUNDAY = 6
MONDAY = 0

JULY = 7
SEPTEMBER = 9


def is_weekday(day: date) -> bool:
    """Monday through Friday"""
    return day.weekday() < SATURDAY


def observed_independence_day(year: int) -> date:
    """
    Date on which Independence Day is observed in a given year.

    July 4th on a Saturday is observed on Friday the 3rd,
    on a Sunday it is observed on Monday the 5th.
    """
    july_fourth = date(year, JULY, 4)
    if july_fourth.weekday() == SATURDAY:
        return july_fourth - timedelta(days=1)
    if july_fourth.weekday() == SUNDAY:
        return july_fourth + timedelta(days=1)
    return july_fourth


def is_independence_day(day: date, observe_weekend_holidays: bool = False) -> bool:
    """
    Check whether a day is the Independence Day holiday.

    Without weekend observance only July 4th itself counts; a July 4th
    that falls on a weekend is excluded from charging as a weekend day
    and no weekday is lost. With observance the holiday moves to the
    adjacent Friday or Monday instead.
    """
    if observe_weekend_holidays:
        return day == observed_independence_day(day.year)
    return day.month == JULY and day.day == 4


def is_labor_day(day: date) -> bool:
    """First Monday in September"""
    return day.month == SEPTEMBER and day.weekday() == MONDAY and day.day <= 7


def is_holiday(day: date, observe_weekend_holidays: bool = False) -> bool:
    """Check for Independence Day or Labor Day"""
    return is_independence_day(day, observe_weekend_holidays) or is_labor_day(day)


def is_chargeable_day(day: date, observe_weekend_holidays: bool = False) -> bool:
    """A weekday that is not a holiday"""
    return is_weekday(day) and not is_holiday(day, observe_weekend_holidays)


def count_chargeable_days(
    start: date,
    days: int,
    observe_weekend_holidays: bool = False,
) -> int:
    """
    Count chargeable days in the half-open period [start, start + days).

    The checkout day is the first day counted; the due date is not.

    Example:
        07/02/15 (Thu) for 5 days -> Thu 2, Fri 3, Sat 4, Sun 5, Mon 6
        Sat 4 is both weekend and holiday, Sun 5 is weekend -> 3 days
    """
    return sum(
        1
        for day in generate_date_range(start, days)
        if is_chargeable_day(day, observe_weekend_holidays)
    )
