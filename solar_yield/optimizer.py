"""Grid-search orientation optimizers for a single day and for a period.

The period optimizer is a two-stage approximation. Azimuth is taken from
the single-day optimum of the period's reference (midpoint) day, then tilt
alone is searched against the summed energy of a sample of days spread
through the period. This needs far fewer simulations than a full 2D search
over every sampled day and is not guaranteed to find the true optimum.
"""

import logging
import math

from . import irradiance
from ._types import NO_SHADOW, EngineConfig, OptimizationResult, Orientation, ShadowWindow
from .baseline import BaselineCache, grid
from .irradiance import DEFAULT_CONFIG
from .reference_year import DAYS_IN_YEAR, check_month

_LOGGER = logging.getLogger(__name__)

# Mean month length used to place period boundaries.
MEAN_MONTH_DAYS = 30.44


def find_optimal_orientation(
    latitude: float,
    doy: int,
    cache: BaselineCache,
    shadow: ShadowWindow = NO_SHADOW,
    config: EngineConfig = DEFAULT_CONFIG,
) -> OptimizationResult:
    """Coarse grid search for the orientation with the best efficiency.

    Ties keep the first maximum (lowest azimuth, then lowest tilt).
    """
    best = OptimizationResult(orientation=Orientation(180, 30), efficiency=-1.0)
    for az in grid(config.azimuth_min, config.azimuth_max, config.azimuth_step):
        for tilt in grid(config.tilt_min, config.tilt_max, config.tilt_step):
            orientation = Orientation(az, tilt)
            result = irradiance.simulate(
                latitude, doy, orientation, cache, shadow, config=config
            )
            if result.efficiency > best.efficiency:
                best = OptimizationResult(
                    orientation=orientation, efficiency=result.efficiency
                )
    return best


def period_bounds(start_month: int, end_month: int) -> tuple[int, int]:
    """Approximate first and last day of year of an inclusive month range.

    Months are 1-12. When end_month precedes start_month the period wraps
    the year boundary and the returned start is after the end.
    """
    check_month(start_month)
    check_month(end_month)
    start_doy = math.floor((start_month - 1) * MEAN_MONTH_DAYS)
    end_doy = math.floor(end_month * MEAN_MONTH_DAYS) - 1
    return start_doy, end_doy


def reference_day(start_doy: int, end_doy: int) -> int:
    """Midpoint day of a period, wrapping across the year boundary."""
    if start_doy <= end_doy:
        return (start_doy + end_doy) // 2
    return ((start_doy + end_doy + DAYS_IN_YEAR) // 2) % DAYS_IN_YEAR


def representative_days(start_doy: int, end_doy: int, interval: int = 7) -> list[int]:
    """Every interval-th day of a period, wrapping across the year boundary.

    A wrapped period is sampled from its start to the end of the year, then
    again from day 0 to its end.
    """
    if start_doy <= end_doy:
        return list(range(start_doy, end_doy + 1, interval))
    return list(range(start_doy, DAYS_IN_YEAR, interval)) + list(
        range(0, end_doy + 1, interval)
    )


def period_energy(
    latitude: float,
    days: list[int],
    orientation: Orientation,
    shadow: ShadowWindow = NO_SHADOW,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Sum of ideal energy factors over days."""
    return sum(
        irradiance.orientation_energy(latitude, d, orientation, shadow, config)
        for d in days
    )


def find_optimal_orientation_for_range(
    latitude: float,
    start_month: int,
    end_month: int,
    cache: BaselineCache,
    shadow: ShadowWindow = NO_SHADOW,
    config: EngineConfig = DEFAULT_CONFIG,
) -> Orientation:
    """Find a fixed orientation for an inclusive, possibly wrapping, month range."""
    start_doy, end_doy = period_bounds(start_month, end_month)
    mid_doy = reference_day(start_doy, end_doy)
    azimuth = find_optimal_orientation(
        latitude, mid_doy, cache, shadow, config
    ).orientation.azimuth

    days = representative_days(start_doy, end_doy, config.sample_interval_days)
    _LOGGER.debug(
        "Period %d-%d: reference day %d, azimuth %s, %d sample days",
        start_month,
        end_month,
        mid_doy,
        azimuth,
        len(days),
    )

    best_tilt = 30
    max_energy = -1.0
    for tilt in grid(config.tilt_min, config.tilt_max, config.tilt_step):
        energy = period_energy(latitude, days, Orientation(azimuth, tilt), shadow, config)
        if energy > max_energy:
            max_energy, best_tilt = energy, tilt

    coarse_tilt = best_tilt
    fine_range = grid(
        max(config.tilt_min, coarse_tilt - config.period_tilt_span),
        min(config.tilt_max, coarse_tilt + config.period_tilt_span),
        1,
    )
    for tilt in fine_range:
        energy = period_energy(latitude, days, Orientation(azimuth, tilt), shadow, config)
        if energy > max_energy:
            max_energy, best_tilt = energy, tilt

    return Orientation(azimuth, best_tilt)
