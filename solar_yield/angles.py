"""Sun position and panel geometry in the local horizon frame.

All angles in degrees unless otherwise noted. Latitude is expected in
[-90, 90]; values outside that range give defined but meaningless results.
"""

import math

from ._types import SunPosition, Vector

EARTH_AXIAL_TILT = 23.45
DEGREES_PER_HOUR = 15.0
MINUTES_PER_DEGREE_LONGITUDE = 4.0
SPRING_EQUINOX_DAY = 81


def deg_to_rad(deg: float) -> float:
    """Convert degrees to radians."""
    return deg * (math.pi / 180.0)


def rad_to_deg(rad: float) -> float:
    """Convert radians to degrees."""
    return rad * (180.0 / math.pi)


def normalize_angle(angle: float) -> float:
    """Normalize angle to 0-360 degree range."""
    return angle % 360.0


def solar_declination(doy: int) -> float:
    """Calculate solar declination angle.

    Input: doy = day of year (0-364)
    Output: declination in degrees

    Single-harmonic approximation, ranging from -23.45 deg (winter solstice)
    to +23.45 deg (summer solstice).
    """
    return EARTH_AXIAL_TILT * math.sin(
        deg_to_rad(360.0 / 365.0 * (doy - SPRING_EQUINOX_DAY))
    )


def equation_of_time(doy: int) -> float:
    """Calculate the Equation of Time correction.

    Input: doy = day of year (0-364)
    Output: correction in minutes
    """
    b = deg_to_rad(360.0 / 364.0 * (doy - SPRING_EQUINOX_DAY))
    return 9.87 * math.sin(2 * b) - 7.53 * math.cos(b) - 1.5 * math.sin(b)


def time_correction(doy: int, longitude: float, utc_offset: float) -> float:
    """Calculate the shift in hours to add to solar time to get clock time.

    Args:
        doy: Day of year (0-364)
        longitude: Observer's longitude (degrees, positive for East)
        utc_offset: Timezone offset in hours (e.g. +2.0)

    Returns:
        Correction in hours, combining the equation of time with the
        longitude offset from the timezone's standard meridian.
    """
    std_meridian = utc_offset * DEGREES_PER_HOUR
    shift_minutes = -(
        equation_of_time(doy)
        + MINUTES_PER_DEGREE_LONGITUDE * (longitude - std_meridian)
    )
    return shift_minutes / 60.0


def hour_angle(solar_hour: float) -> float:
    """Calculate the hour angle from local solar time.

    At solar noon: h = 0 degrees.
    Morning: h < 0 (sun is east).
    Afternoon: h > 0 (sun is west).
    """
    return DEGREES_PER_HOUR * (solar_hour - 12.0)


def solar_position(latitude: float, doy: int, solar_hour: float) -> SunPosition:
    """Calculate sun elevation and azimuth at a local solar hour.

    Azimuth is 0=North, 90=East, 180=South, 270=West. An elevation <= 0
    means the sun is below the horizon.
    """
    lat_rad = deg_to_rad(latitude)
    dec_rad = deg_to_rad(solar_declination(doy))
    ha_rad = deg_to_rad(hour_angle(solar_hour))
    sin_el = math.sin(lat_rad) * math.sin(dec_rad) + math.cos(lat_rad) * math.cos(
        dec_rad
    ) * math.cos(ha_rad)
    # Clamp to [-1, 1] to handle floating point errors
    elevation = rad_to_deg(math.asin(max(-1.0, min(1.0, sin_el))))
    y = -1.0 * math.sin(ha_rad)
    x = math.tan(dec_rad) * math.cos(lat_rad) - math.sin(lat_rad) * math.cos(ha_rad)
    azimuth = normalize_angle(rad_to_deg(math.atan2(y, x)))
    return SunPosition(elevation=elevation, azimuth=azimuth)


def sun_vector(azimuth: float, elevation: float) -> Vector:
    """Convert a sun direction to a unit vector."""
    az_rad = deg_to_rad(azimuth)
    el_rad = deg_to_rad(elevation)
    hyp = math.cos(el_rad)
    return Vector(x=hyp * math.sin(az_rad), y=hyp * math.cos(az_rad), z=math.sin(el_rad))


def panel_normal(azimuth: float, tilt: float) -> Vector:
    """Calculate the unit normal of a panel facing azimuth, tilted from flat.

    Tilt is measured from vertical-up, so a flat panel (tilt=0) has normal
    (0, 0, 1) whatever its azimuth.
    """
    az_rad = deg_to_rad(azimuth)
    tilt_rad = deg_to_rad(tilt)
    hyp = math.sin(tilt_rad)
    return Vector(
        x=hyp * math.sin(az_rad), y=hyp * math.cos(az_rad), z=math.cos(tilt_rad)
    )


def dot(a: Vector, b: Vector) -> float:
    return a.x * b.x + a.y * b.y + a.z * b.z
