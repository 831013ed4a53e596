"""Power curve, energy integration and weather adjustment tests."""

import pytest

from solar_yield._types import (
    NO_SHADOW,
    CurvePoint,
    EngineConfig,
    Orientation,
    ShadowWindow,
)
from solar_yield.baseline import BaselineCache
from solar_yield.irradiance import (
    cloud_factor,
    integrate,
    orientation_energy,
    power_curve,
    sample_hours,
    simulate,
    weather_energy,
)

SOUTH_35 = Orientation(azimuth=180.0, tilt=35.0)


class FixedBaseline:
    def __init__(self, value):
        self.value = value

    def efficiency(self, latitude, doy, energy):
        return energy / self.value * 100.0


class TestSampleHours:
    def test_range_and_count(self):
        hours = sample_hours()
        assert len(hours) == 91
        assert hours[0] == 4.0
        assert hours[-1] == 22.0

    def test_whole_hours_exact(self):
        hours = sample_hours()
        assert hours[40] == 12.0
        assert hours[50] == 14.0
        assert hours[1] == pytest.approx(4.2)

    @pytest.mark.parametrize("step", [0.7, 0.25, 0.4, 1.1])
    def test_uneven_step_stays_in_window(self, step):
        config = EngineConfig(time_step=step)
        hours = sample_hours(config)
        assert hours[0] == config.first_hour
        assert hours[-1] <= config.last_hour
        assert hours[-1] + step > config.last_hour

    def test_step_of_0_7(self):
        hours = sample_hours(EngineConfig(time_step=0.7))
        assert len(hours) == 26
        assert hours[-1] == pytest.approx(21.5)


class TestPowerCurve:
    def test_one_point_per_sample(self):
        curve = power_curve(52.0, 172, SOUTH_35)
        assert [p.hour for p in curve] == sample_hours()

    def test_night_samples_are_zero(self):
        curve = power_curve(52.0, 355, SOUTH_35)
        night = [p for p in curve if p.hour >= 20.0]
        assert night
        for p in night:
            assert p == CurvePoint(hour=p.hour, power=0.0, potential_power=0.0, blocked=False)

    def test_power_never_negative(self):
        # North-facing vertical panel sees the back of most of the day
        for p in power_curve(40.0, 355, Orientation(0.0, 90.0)):
            assert p.power >= 0.0
            assert p.potential_power >= 0.0

    def test_unshaded_power_equals_potential(self):
        for p in power_curve(52.0, 172, SOUTH_35):
            assert p.power == p.potential_power
            assert not p.blocked


class TestShadow:
    def test_window_blocks_inclusive(self):
        curve = power_curve(52.0, 172, SOUTH_35, ShadowWindow(12.0, 14.0))
        blocked = [p.hour for p in curve if p.blocked]
        assert blocked[0] == 12.0
        assert blocked[-1] == 14.0
        assert len(blocked) == 11
        for p in curve:
            if p.blocked:
                assert p.power == 0.0
                assert p.potential_power > 0.0

    def test_shadow_reduces_energy(self):
        unshaded = orientation_energy(52.0, 172, SOUTH_35)
        shaded = orientation_energy(52.0, 172, SOUTH_35, ShadowWindow(12.0, 14.0))
        assert 0.0 < shaded < unshaded

    @pytest.mark.parametrize(
        "shadow", [ShadowWindow(10.0, 10.0), ShadowWindow(14.0, 12.0), ShadowWindow(22.0, 6.0)]
    )
    def test_degenerate_window_is_no_shadow(self, shadow):
        assert not shadow.active
        assert power_curve(52.0, 172, SOUTH_35, shadow) == power_curve(
            52.0, 172, SOUTH_35, ShadowWindow(0.0, 0.0)
        )

    def test_no_shadow_sentinel(self):
        assert not NO_SHADOW.active
        assert not NO_SHADOW.blocks(4.0)


class TestEnergy:
    def test_riemann_sum(self):
        curve = power_curve(52.0, 172, SOUTH_35)
        assert integrate(curve) == pytest.approx(sum(p.power for p in curve) * 0.2)

    def test_positive_in_summer(self):
        assert orientation_energy(52.0, 172, SOUTH_35) > 0.0

    @pytest.mark.parametrize(
        "lat,doy,orientation",
        [
            (80.0, 355, Orientation(180.0, 35.0)),
            (80.0, 355, Orientation(90.0, 0.0)),
            (-80.0, 172, Orientation(270.0, 60.0)),
        ],
    )
    def test_polar_night_is_zero(self, lat, doy, orientation):
        assert orientation_energy(lat, doy, orientation) == 0.0

    def test_summer_beats_winter(self):
        assert orientation_energy(52.0, 172, SOUTH_35) > orientation_energy(
            52.0, 355, SOUTH_35
        )


class TestCloudFactor:
    def test_clear_and_overcast(self):
        assert cloud_factor([0.0] * 24, 12.4) == pytest.approx(1.0)
        assert cloud_factor([100.0] * 24, 12.4) == pytest.approx(0.2)
        assert cloud_factor([50.0] * 24, 12.4) == pytest.approx(0.6)

    def test_hour_bucket_truncates(self):
        cover = [0.0] * 24
        cover[12] = 100.0
        assert cloud_factor(cover, 12.8) == pytest.approx(0.2)
        assert cloud_factor(cover, 11.8) == pytest.approx(1.0)
        assert cloud_factor(cover, 13.0) == pytest.approx(1.0)

    def test_missing_hours_are_clear(self):
        assert cloud_factor([100.0] * 6, 12.0) == 1.0


class TestWeatherEnergy:
    @pytest.fixture
    def curve(self):
        return power_curve(52.0, 172, SOUTH_35, ShadowWindow(16.0, 18.0))

    def test_clear_sky_equals_ideal(self, curve):
        assert weather_energy(curve, [0.0] * 24) == pytest.approx(integrate(curve))

    def test_overcast_keeps_diffuse_floor(self, curve):
        assert weather_energy(curve, [100.0] * 24) == pytest.approx(0.2 * integrate(curve))

    @pytest.mark.parametrize("cover", [None, []])
    def test_no_data_equals_ideal(self, curve, cover):
        assert weather_energy(curve, cover) == integrate(curve)

    def test_more_cloud_never_increases_energy(self, curve):
        cover = [30.0] * 24
        previous = weather_energy(curve, cover)
        for hour in range(24):
            cover[hour] = 90.0
            current = weather_energy(curve, cover)
            assert current <= previous
            previous = current

    def test_cloud_at_noon_strictly_reduces(self, curve):
        cover = [0.0] * 24
        clear = weather_energy(curve, cover)
        cover[12] = 50.0
        assert weather_energy(curve, cover) < clear


class TestSimulate:
    def test_efficiency_against_baseline(self):
        energy = orientation_energy(52.0, 172, SOUTH_35)
        result = simulate(52.0, 172, SOUTH_35, FixedBaseline(energy * 2))
        assert result.energy_factor == pytest.approx(energy)
        assert result.efficiency == pytest.approx(50.0)
        assert result.real_energy_factor is None
        assert len(result.curve) == 91

    def test_real_energy_with_clouds(self):
        result = simulate(
            52.0, 172, SOUTH_35, FixedBaseline(1.0), cloud_cover=[100.0] * 24
        )
        assert result.real_energy_factor == pytest.approx(0.2 * result.energy_factor)

    def test_near_optimal_summer_orientation(self):
        result = simulate(52.0, 172, SOUTH_35, BaselineCache())
        assert result.energy_factor > 0.0
        assert 85.0 < result.efficiency <= 100.0 + 1e-9

    def test_shadow_window_equal_bounds_matches_no_shadow(self):
        cache = BaselineCache()
        a = simulate(52.0, 172, SOUTH_35, cache, ShadowWindow(12.0, 12.0))
        b = simulate(52.0, 172, SOUTH_35, cache, ShadowWindow(0.0, 0.0))
        c = simulate(52.0, 172, SOUTH_35, cache, ShadowWindow(14.0, 12.0))
        assert a == b == c

    def test_polar_night_efficiency_is_zero(self):
        result = simulate(80.0, 355, SOUTH_35, BaselineCache())
        assert result.energy_factor == 0.0
        assert result.efficiency == 0.0
