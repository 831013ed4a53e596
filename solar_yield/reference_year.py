"""Calendar math against a fixed non-leap reference year (2023).

Days are indexed 0-364 (0 = 1 January). Months are 1-12.
"""

from ._types import Season

DAYS_IN_MONTHS = (31, 28, 31, 30, 31, 30, 31, 31, 30, 31, 30, 31)
DAYS_IN_YEAR = sum(DAYS_IN_MONTHS)

# Northern-hemisphere meteorological seasons as (first month, last month).
SEASON_MONTHS = {
    Season.WINTER: (12, 2),
    Season.SPRING: (3, 5),
    Season.SUMMER: (6, 8),
    Season.FALL: (9, 11),
}

_OPPOSITE_SEASON = {
    Season.WINTER: Season.SUMMER,
    Season.SUMMER: Season.WINTER,
    Season.SPRING: Season.FALL,
    Season.FALL: Season.SPRING,
}


def check_month(month: int) -> None:
    """Raise ValueError unless month is 1-12."""
    if not 1 <= month <= 12:
        raise ValueError(f"Month out of range: {month}")


def first_day_of_month(month: int) -> int:
    """Day of year (0-364) of the first day of a month."""
    check_month(month)
    return sum(DAYS_IN_MONTHS[: month - 1])


def days_of_month(month: int) -> range:
    """All days of year (0-364) that fall in a month."""
    first = first_day_of_month(month)
    return range(first, first + DAYS_IN_MONTHS[month - 1])


def month_of_day(doy: int) -> int:
    """Convert day of year (0-364) to its calendar month (1-12)."""
    if not 0 <= doy < DAYS_IN_YEAR:
        raise ValueError(f"Day of year out of range: {doy}")
    remaining = doy
    for month_idx, dim in enumerate(DAYS_IN_MONTHS):
        if remaining < dim:
            return month_idx + 1
        remaining -= dim
    return 12  # shouldn't reach here after the range check


def season_months(season: Season, latitude: float) -> tuple[int, int]:
    """Return the (first, last) month of a season at a latitude.

    Seasons are swapped south of the equator.
    """
    match season:
        case Season.SUMMER | Season.WINTER | Season.SPRING | Season.FALL:
            if latitude < 0:
                season = _OPPOSITE_SEASON[season]
            return SEASON_MONTHS[season]
        case _:
            raise ValueError(f"Unknown season: {season}")
