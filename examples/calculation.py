"""Demonstrate yield estimation for Berlin (52.5N) around the June solstice."""

from solar_yield._types import Orientation, ShadowWindow
from solar_yield.angles import solar_position, time_correction
from solar_yield.engine import Engine
from solar_yield.reference_year import month_of_day


def main():
    latitude = 52.5
    longitude = 13.4
    utc_offset = 2.0
    doy = 171
    orientation = Orientation(azimuth=180.0, tilt=35.0)
    shadow = ShadowWindow(start=17.0, end=19.0)

    engine = Engine()
    pos = solar_position(latitude, doy, 12.0)
    shift = time_correction(doy, longitude, utc_offset)
    result = engine.simulate(latitude, doy, orientation, shadow)
    best = engine.optimize_day(latitude, doy, shadow)
    cloudy = {d: [50.0] * 24 for d in range(0, 365, 2)}
    totals = engine.aggregate(latitude, orientation, doy, shadow=shadow, weather=cloudy)

    print("=== Solar Yield Calculation Example ===")
    print(f"Location: Berlin ({latitude:.1f}°N, {longitude:.1f}°E)")
    print(f"Day of year: {doy} (month {month_of_day(doy)})")
    print()
    print("--- Solar Position at Solar Noon ---")
    print(f"Elevation: {pos.elevation:.2f}°")
    print(f"Azimuth: {pos.azimuth:.2f}° (0°=N, 90°=E, 180°=S)")
    print(f"Solar noon on the clock: {12.0 + shift:.2f} h")
    print()
    print("--- Panel ---")
    print(f"Orientation: azimuth {orientation.azimuth:.0f}°, tilt {orientation.tilt:.0f}°")
    print(f"Shadow: {shadow.start:.0f}:00-{shadow.end:.0f}:00")
    print(f"Energy factor: {result.energy_factor:.2f} sun hours")
    print(f"Efficiency: {result.efficiency:.1f}%")
    print(f"Best orientation for the day: azimuth {best.azimuth:.0f}°, tilt {best.tilt:.0f}°")
    print()
    print("--- Totals ---")
    print(f"Ideal month: {totals.month_total:.1f}, year: {totals.year_total:.1f}")
    print(
        f"With clouds month: {totals.real_month_total:.1f}, "
        f"year: {totals.real_year_total:.1f} ({totals.weather_days} days of weather)"
    )


if __name__ == "__main__":
    main()
