"""Frozen dataclasses for all structured inputs and return types."""

from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from enum import StrEnum

CloudCoverByHour = Sequence[float]
WeatherRecord = Mapping[int, CloudCoverByHour]


class Season(StrEnum):
    SUMMER = "summer"
    WINTER = "winter"
    SPRING = "spring"
    FALL = "fall"


@dataclass(frozen=True)
class SunPosition:
    elevation: float
    azimuth: float


@dataclass(frozen=True)
class Vector:
    """Unit vector in the local horizon frame (x=east, y=north, z=up)."""

    x: float
    y: float
    z: float


@dataclass(frozen=True)
class Orientation:
    azimuth: float = 180.0
    tilt: float = 30.0


@dataclass(frozen=True)
class ShadowWindow:
    """Hours during which an obstacle fully blocks the panel.

    Only a window with start < end blocks anything. Equal bounds are the
    "no shadow" sentinel, and start > end (an overnight window) is not
    supported and also blocks nothing.
    """

    start: float
    end: float

    @property
    def active(self) -> bool:
        return self.start < self.end

    def blocks(self, hour: float) -> bool:
        return self.active and self.start <= hour <= self.end


NO_SHADOW = ShadowWindow(start=4.0, end=4.0)


@dataclass(frozen=True)
class CurvePoint:
    hour: float
    power: float
    potential_power: float
    blocked: bool


@dataclass(frozen=True)
class SimulationResult:
    curve: list[CurvePoint]
    efficiency: float
    energy_factor: float
    real_energy_factor: float | None = None


@dataclass(frozen=True)
class OptimizationResult:
    orientation: Orientation
    efficiency: float


@dataclass(frozen=True)
class AggregateResult:
    year_total: float
    month_total: float
    monthly_totals: tuple[float, ...]
    real_year_total: float | None = None
    real_month_total: float | None = None
    real_monthly_totals: tuple[float, ...] | None = None
    weather_days: int = 0


@dataclass(frozen=True)
class EngineConfig:
    time_step: float = 0.2
    first_hour: float = 4.0
    last_hour: float = 22.0
    attenuation_exponent: float = 0.3
    max_cloud_loss: float = 0.8
    azimuth_min: int = 90
    azimuth_max: int = 270
    azimuth_step: int = 10
    tilt_min: int = 0
    tilt_max: int = 90
    tilt_step: int = 5
    baseline_azimuth_span: int = 10
    baseline_tilt_span: int = 5
    period_tilt_span: int = 4
    sample_interval_days: int = 7
