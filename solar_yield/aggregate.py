"""Yearly and monthly energy totals over the reference year.

Every day of the reference year is simulated once. Weather-adjusted totals
are only produced when a weather record is supplied; days missing from the
record integrate as cloud-free and are counted in weather_days so callers
can judge coverage.
"""

import logging

from . import irradiance
from ._types import (
    NO_SHADOW,
    AggregateResult,
    EngineConfig,
    Orientation,
    ShadowWindow,
    WeatherRecord,
)
from .irradiance import DEFAULT_CONFIG
from .reference_year import DAYS_IN_YEAR, month_of_day

_LOGGER = logging.getLogger(__name__)


def aggregate(
    latitude: float,
    orientation: Orientation,
    target_doy: int,
    *,
    shadow: ShadowWindow = NO_SHADOW,
    weather: WeatherRecord | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> AggregateResult:
    """Sum daily energy factors over the year and over target_doy's month.

    shadow, weather and config are keyword-only. Unlike the numeric core,
    this raises ValueError when target_doy is outside 0-364 rather than
    rolling it over into another year.
    """
    target_idx = month_of_day(target_doy) - 1
    monthly = [0.0] * 12
    real_monthly = [0.0] * 12
    weather_days = 0

    for doy in range(DAYS_IN_YEAR):
        curve = irradiance.power_curve(latitude, doy, orientation, shadow, config)
        month_idx = month_of_day(doy) - 1
        monthly[month_idx] += irradiance.integrate(curve, config)
        if weather is not None:
            cloud_cover = weather.get(doy)
            if cloud_cover is not None:
                weather_days += 1
            real_monthly[month_idx] += irradiance.weather_energy(
                curve, cloud_cover, config
            )

    if weather is None:
        return AggregateResult(
            year_total=sum(monthly),
            month_total=monthly[target_idx],
            monthly_totals=tuple(monthly),
        )

    if weather_days < DAYS_IN_YEAR:
        _LOGGER.debug(
            "Weather record covers %d of %d days; missing days are cloud-free",
            weather_days,
            DAYS_IN_YEAR,
        )
    return AggregateResult(
        year_total=sum(monthly),
        month_total=monthly[target_idx],
        monthly_totals=tuple(monthly),
        real_year_total=sum(real_monthly),
        real_month_total=real_monthly[target_idx],
        real_monthly_totals=tuple(real_monthly),
        weather_days=weather_days,
    )
