import numpy as np

from orrery.models import BodyType
from orrery.utils.constants import AU_TO_KM, DEG_TO_RAD, SOLAR_SYSTEM_SIZE
from orrery.utils.solar_system import SOLAR_SYSTEM_ELEMENTS, solar_system_catalog


def test_catalog_is_valid():
    catalog = solar_system_catalog()
    assert len(catalog) == len(SOLAR_SYSTEM_ELEMENTS)
    assert catalog.primary.id == "sun"
    assert catalog.primary.body_type is BodyType.STAR
    assert [body.id for body in catalog.satellites_of("earth")] == ["moon"]


def test_every_orbit_fits_in_the_rendered_region():
    catalog = solar_system_catalog()
    for body in catalog:
        if not body.is_primary:
            assert body.semi_major_axis * (1 + body.eccentricity) < SOLAR_SYSTEM_SIZE


def test_unit_constants():
    assert AU_TO_KM == np.float64(149597870.7)
    assert np.isclose(180.0 * DEG_TO_RAD, np.pi)
