"""
Sample solar system catalog.

A small catalog of the Sun, the planets out to Saturn, Pluto and a few large
moons, with J2000 orbital elements rounded from NASA/JPL fact sheets. It is
meant for demos and tests, not as an ephemeris: the mean anomaly is the only
phase information and no orbit is inclined.
"""

from orrery.models.body import BodyType, CelestialBody
from orrery.models.catalog import Catalog
from orrery.utils.constants import (
    M_charon,
    M_earth,
    M_ganymede,
    M_jupiter,
    M_mars,
    M_mercury,
    M_moon,
    M_pluto,
    M_saturn,
    M_sun,
    M_titan,
    M_venus,
)

# (id, mass [kg], semi-major axis [km], eccentricity, mean anomaly [deg], orbited id, type)
SOLAR_SYSTEM_ELEMENTS = (
    ("sun", M_sun, None, 0.0, 0.0, None, BodyType.STAR),
    ("mercury", M_mercury, 57909050.0, 0.205630, 174.796, "sun", BodyType.PLANET),
    ("venus", M_venus, 108208000.0, 0.006772, 50.115, "sun", BodyType.PLANET),
    ("earth", M_earth, 149598023.0, 0.0167086, 358.617, "sun", BodyType.PLANET),
    ("mars", M_mars, 227939200.0, 0.0934, 19.412, "sun", BodyType.PLANET),
    ("jupiter", M_jupiter, 778570000.0, 0.0489, 20.020, "sun", BodyType.PLANET),
    ("saturn", M_saturn, 1433530000.0, 0.0565, 317.020, "sun", BodyType.PLANET),
    ("pluto", M_pluto, 5906380000.0, 0.2488, 14.53, "sun", BodyType.DWARF_PLANET),
    ("moon", M_moon, 384399.0, 0.0549, 134.96, "earth", BodyType.SATELLITE),
    ("ganymede", M_ganymede, 1070400.0, 0.0013, 317.54, "jupiter", BodyType.SATELLITE),
    ("titan", M_titan, 1221870.0, 0.0288, 163.31, "saturn", BodyType.SATELLITE),
    ("charon", M_charon, 19591.0, 0.0002, 147.85, "pluto", BodyType.SATELLITE),
)


def solar_system_bodies():
    """
    Bodies of the sample catalog, in catalog order.

    Returns
    -------
    list of CelestialBody
    """
    return [
        CelestialBody(
            id=body_id,
            mass=float(mass),
            semi_major_axis=semi_major_axis,
            eccentricity=eccentricity,
            mean_anomaly=mean_anomaly,
            orbit_body=orbit_body,
            body_type=body_type,
        )
        for body_id, mass, semi_major_axis, eccentricity, mean_anomaly, orbit_body, body_type
        in SOLAR_SYSTEM_ELEMENTS
    ]


def solar_system_catalog():
    """Validated Catalog of :func:`solar_system_bodies`."""
    return Catalog(solar_system_bodies())
