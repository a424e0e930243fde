"""Date prefix calculation"""

# pylint: disable=logging-fstring-interpolation

import logging
import math
from datetime import date, datetime, timedelta, timezone
from typing import Literal, Optional, Union, cast, get_args

from calverlex.exceptions import InvalidYearFormatError

logger = logging.getLogger(__name__)

YearFormat = Literal["2", "4"]

Instant = Union[datetime, date]


def normalize_year_format(year_format: Union[str, int]) -> YearFormat:
    """Checks a year format and returns it as a string

    Args:
        year_format (Union[str, int]): "2", "4", 2 or 4

    Raises:
        InvalidYearFormatError: For any other value

    Returns:
        YearFormat: "2" or "4"
    """
    value = str(year_format).strip()
    if value not in get_args(YearFormat):
        raise InvalidYearFormatError(year_format)
    return cast(YearFormat, value)


def to_utc_date(instant: Optional[Instant] = None) -> date:
    """Gets the UTC calendar date of an instant

    Args:
        instant (Optional[Instant], optional): Defaults to now.
          Aware datetimes are converted to UTC, naive ones are taken to be UTC
          already and plain dates are used as they are.

    Returns:
        date: the UTC date
    """
    if instant is None:
        instant = datetime.now(timezone.utc)
    if isinstance(instant, datetime):
        if instant.tzinfo is not None:
            instant = instant.astimezone(timezone.utc)
        return instant.date()
    return instant


def iso_week(day: date) -> tuple[int, int, int]:
    """Computes the ISO-8601 week-year, week and weekday of a date

    The date is moved to the Thursday of its week; the year of that Thursday
    is the week-year, and its day of the year gives the week number. Near
    new year this means the week-year can differ from the calendar year,
    ie. Monday 2024-12-30 is in week 1 of 2025.

    Args:
        day (date): any date

    Returns:
        tuple[int, int, int]: (week-year, week 1-53, weekday 1-7 with Monday=1)
    """
    weekday = day.isoweekday()
    thursday = day + timedelta(days=4 - weekday)
    days_since_new_year = (thursday - date(thursday.year, 1, 1)).days
    week = math.ceil((days_since_new_year + 1) / 7)
    return thursday.year, week, weekday


def compute_date_prefix(
    instant: Optional[Instant] = None, year_format: Union[str, int] = "2"
) -> str:
    """Computes the date prefix of a tag: year + ISO week + ISO weekday

    Args:
        instant (Optional[Instant], optional): Defaults to now (UTC).
        year_format (Union[str, int], optional): "2" for a two digit year,
          "4" for a four digit year. Defaults to "2".

    Raises:
        InvalidYearFormatError: If year_format isn't "2" or "4"

    Returns:
        str: The prefix, ie. "25031" for Monday 2025-01-13 or "2025031" in
          four digit mode
    """
    year_format = normalize_year_format(year_format)
    week_year, week, weekday = iso_week(to_utc_date(instant))
    if year_format == "4":
        year = str(week_year)
    else:
        year = f"{week_year % 100:02d}"
    prefix = f"{year}{week:02d}{weekday}"
    logger.debug(
        f"Date prefix calculated: {prefix} (year: {year}, week: {week}, day: {weekday})"
    )
    return prefix
