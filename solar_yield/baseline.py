"""Best achievable daily energy per (latitude, day), used to score efficiency.

The baseline is found by a coarse grid search over all orientations with
shading disabled, followed by a 1-degree refinement around the coarse
optimum. Results are memoized per 0.1-degree latitude bucket and day.
"""

import logging
import threading

from ._types import NO_SHADOW, EngineConfig, Orientation
from .irradiance import DEFAULT_CONFIG, orientation_energy

_LOGGER = logging.getLogger(__name__)


def grid(start: int, stop: int, step: int) -> range:
    """Inclusive integer grid from start to stop."""
    return range(start, stop + 1, step)


def search_optimum(
    latitude: float, doy: int, config: EngineConfig = DEFAULT_CONFIG
) -> tuple[Orientation, float]:
    """Find the unshaded orientation with the highest energy factor.

    Returns (orientation, energy). Ties keep the first maximum found.
    """
    best_energy = 0.0
    best_az = 180
    best_tilt = 30

    for az in grid(config.azimuth_min, config.azimuth_max, config.azimuth_step):
        for tilt in grid(config.tilt_min, config.tilt_max, config.tilt_step):
            energy = orientation_energy(
                latitude, doy, Orientation(az, tilt), NO_SHADOW, config
            )
            if energy > best_energy:
                best_energy, best_az, best_tilt = energy, az, tilt

    coarse_az, coarse_tilt = best_az, best_tilt
    az_range = grid(
        max(config.azimuth_min, coarse_az - config.baseline_azimuth_span),
        min(config.azimuth_max, coarse_az + config.baseline_azimuth_span),
        1,
    )
    tilt_range = grid(
        max(config.tilt_min, coarse_tilt - config.baseline_tilt_span),
        min(config.tilt_max, coarse_tilt + config.baseline_tilt_span),
        1,
    )
    for az in az_range:
        for tilt in tilt_range:
            energy = orientation_energy(
                latitude, doy, Orientation(az, tilt), NO_SHADOW, config
            )
            if energy > best_energy:
                best_energy, best_az, best_tilt = energy, az, tilt

    return Orientation(best_az, best_tilt), best_energy


def efficiency(energy: float, baseline: float) -> float:
    """Energy as a percentage of the baseline, 0 when the baseline is 0."""
    return energy / baseline * 100.0 if baseline > 0 else 0.0


class BaselineCache:
    """Memoized baseline energies keyed by (latitude to 0.1 deg, day of year).

    Entries are never evicted. The key space is bounded by 1801 latitude
    buckets times 365 days. Concurrent misses on the same key may both run
    the search; the results are identical.
    """

    def __init__(self, config: EngineConfig = DEFAULT_CONFIG):
        self.config = config
        self._entries: dict[tuple[float, int], float] = {}
        self._lock = threading.Lock()

    @staticmethod
    def key(latitude: float, doy: int) -> tuple[float, int]:
        return (round(latitude, 1), doy)

    def get(self, latitude: float, doy: int) -> float:
        """Return the baseline energy, computing and storing it on a miss."""
        key = self.key(latitude, doy)
        with self._lock:
            cached = self._entries.get(key)
        if cached is not None:
            return cached

        _LOGGER.debug("Computing baseline for lat=%.1f doy=%d", key[0], doy)
        _, energy = search_optimum(latitude, doy, self.config)
        with self._lock:
            return self._entries.setdefault(key, energy)

    def efficiency(self, latitude: float, doy: int, energy: float) -> float:
        return efficiency(energy, self.get(latitude, doy))

    def clear(self) -> None:
        with self._lock:
            self._entries.clear()

    def __contains__(self, key: tuple[float, int]) -> bool:
        with self._lock:
            return key in self._entries

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)
