"""Engine facade owning the configuration and the baseline cache."""

from . import aggregate as _aggregate
from . import irradiance, optimizer
from ._types import (
    NO_SHADOW,
    AggregateResult,
    CloudCoverByHour,
    EngineConfig,
    Orientation,
    Season,
    ShadowWindow,
    SimulationResult,
    WeatherRecord,
)
from .baseline import BaselineCache
from .irradiance import DEFAULT_CONFIG
from .reference_year import season_months


class Engine:
    """Entry point for simulation, aggregation and orientation search.

    One engine holds one BaselineCache, shared by every call made through
    it. Pass an existing cache to share baselines between engines with the
    same configuration.
    """

    def __init__(
        self,
        config: EngineConfig = DEFAULT_CONFIG,
        cache: BaselineCache | None = None,
    ):
        self.config = config
        self.cache = cache if cache is not None else BaselineCache(config)

    def simulate(
        self,
        latitude: float,
        doy: int,
        orientation: Orientation,
        shadow: ShadowWindow = NO_SHADOW,
        cloud_cover: CloudCoverByHour | None = None,
    ) -> SimulationResult:
        return irradiance.simulate(
            latitude, doy, orientation, self.cache, shadow, cloud_cover, self.config
        )

    def aggregate(
        self,
        latitude: float,
        orientation: Orientation,
        target_doy: int,
        *,
        shadow: ShadowWindow = NO_SHADOW,
        weather: WeatherRecord | None = None,
    ) -> AggregateResult:
        """Year and month totals for target_doy's month.

        shadow and weather are keyword-only. Raises ValueError when
        target_doy is outside 0-364.
        """
        return _aggregate.aggregate(
            latitude,
            orientation,
            target_doy,
            shadow=shadow,
            weather=weather,
            config=self.config,
        )

    def optimize_day(
        self, latitude: float, doy: int, shadow: ShadowWindow = NO_SHADOW
    ) -> Orientation:
        return optimizer.find_optimal_orientation(
            latitude, doy, self.cache, shadow, self.config
        ).orientation

    def optimize_period(
        self,
        latitude: float,
        start_month: int,
        end_month: int,
        shadow: ShadowWindow = NO_SHADOW,
    ) -> Orientation:
        """Best fixed orientation for an inclusive range of calendar months.

        Months are 1-12 (1 = January), not 0-based indices. An end_month
        before start_month wraps the new year, e.g. 11 to 2 is Nov-Feb.
        Raises ValueError for months outside 1-12.
        """
        return optimizer.find_optimal_orientation_for_range(
            latitude, start_month, end_month, self.cache, shadow, self.config
        )

    def optimize_season(
        self, latitude: float, season: Season, shadow: ShadowWindow = NO_SHADOW
    ) -> Orientation:
        """Optimize for a meteorological season, hemisphere-aware."""
        start_month, end_month = season_months(season, latitude)
        return self.optimize_period(latitude, start_month, end_month, shadow)
