"""Daily power curve and energy integration for a fixed panel orientation.

The day is sampled at a fixed time step between the configured first and
last hours (local solar time). Each sample projects the sun's direction onto
the panel normal and attenuates it by an air-mass proxy. The energy factor
is the Riemann sum of realized power times the step, in "equivalent
full-sun hours".
"""

import math
from typing import Protocol

from . import angles
from ._types import (
    NO_SHADOW,
    CloudCoverByHour,
    CurvePoint,
    EngineConfig,
    Orientation,
    ShadowWindow,
    SimulationResult,
)

DEFAULT_CONFIG = EngineConfig()


class Baseline(Protocol):
    def efficiency(self, latitude: float, doy: int, energy: float) -> float: ...


def sample_hours(config: EngineConfig = DEFAULT_CONFIG) -> list[float]:
    """Return the sampled hours, first and last hour inclusive.

    A step that does not divide the span stops at the last sample not past
    last_hour.
    """
    span = config.last_hour - config.first_hour
    n_steps = math.floor(span / config.time_step + 1e-9)
    return [
        round(config.first_hour + i * config.time_step, 10) for i in range(n_steps + 1)
    ]


def power_curve(
    latitude: float,
    doy: int,
    orientation: Orientation,
    shadow: ShadowWindow = NO_SHADOW,
    config: EngineConfig = DEFAULT_CONFIG,
) -> list[CurvePoint]:
    """Sample realized and potential power over the day."""
    normal = angles.panel_normal(orientation.azimuth, orientation.tilt)
    curve = []
    for hour in sample_hours(config):
        sun = angles.solar_position(latitude, doy, hour)
        if sun.elevation <= 0:
            curve.append(
                CurvePoint(hour=hour, power=0.0, potential_power=0.0, blocked=False)
            )
            continue
        sun_dir = angles.sun_vector(sun.azimuth, sun.elevation)
        intensity = sun_dir.z**config.attenuation_exponent
        potential = max(0.0, angles.dot(sun_dir, normal)) * intensity
        blocked = shadow.blocks(hour)
        curve.append(
            CurvePoint(
                hour=hour,
                power=0.0 if blocked else potential,
                potential_power=potential,
                blocked=blocked,
            )
        )
    return curve


def integrate(curve: list[CurvePoint], config: EngineConfig = DEFAULT_CONFIG) -> float:
    """Riemann sum of realized power over the curve."""
    return sum(p.power for p in curve) * config.time_step


def orientation_energy(
    latitude: float,
    doy: int,
    orientation: Orientation,
    shadow: ShadowWindow = NO_SHADOW,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Ideal (cloud-free) energy factor for one day and orientation."""
    return integrate(power_curve(latitude, doy, orientation, shadow, config), config)


def cloud_factor(
    cloud_cover: CloudCoverByHour, hour: float, config: EngineConfig = DEFAULT_CONFIG
) -> float:
    """Fraction of power left under the cloud cover of the hour's bucket.

    Hours missing from cloud_cover count as clear sky. Full cover leaves
    the diffuse floor of 1 - max_cloud_loss.
    """
    idx = int(hour)
    cover = cloud_cover[idx] if idx < len(cloud_cover) else None
    return 1.0 - ((cover or 0.0) / 100.0) * config.max_cloud_loss


def weather_energy(
    curve: list[CurvePoint],
    cloud_cover: CloudCoverByHour | None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> float:
    """Weather-adjusted energy factor of an already sampled curve.

    Without cloud data this is the ideal energy factor.
    """
    if not cloud_cover:
        return integrate(curve, config)
    return (
        sum(p.power * cloud_factor(cloud_cover, p.hour, config) for p in curve)
        * config.time_step
    )


def simulate(
    latitude: float,
    doy: int,
    orientation: Orientation,
    baseline: Baseline,
    shadow: ShadowWindow = NO_SHADOW,
    cloud_cover: CloudCoverByHour | None = None,
    config: EngineConfig = DEFAULT_CONFIG,
) -> SimulationResult:
    """Simulate one day: power curve, energy factors and efficiency.

    Efficiency is measured against the best unshaded energy reachable at
    (latitude, doy), as reported by baseline. The real energy factor is
    only filled in when cloud_cover is given.
    """
    curve = power_curve(latitude, doy, orientation, shadow, config)
    energy = integrate(curve, config)
    real_energy = None
    if cloud_cover is not None:
        real_energy = weather_energy(curve, cloud_cover, config)
    return SimulationResult(
        curve=curve,
        efficiency=baseline.efficiency(latitude, doy, energy),
        energy_factor=energy,
        real_energy_factor=real_energy,
    )
