"""
Physical constants for planar orbit geometry.

This module contains fundamental physical constants and solar system values
used to build catalogs and convert between units. Masses are in kilograms and
distances in kilometres (the catalog unit), stored as numpy float64 values for
consistency in numerical computations.

The module includes:
1. Universal physical constants (gravitational constant)
2. Unit conversions (astronomical unit, degrees to radians)
3. Planetary and lunar masses

References
----------
Values are based on standard IAU (International Astronomical Union) and
NASA/JPL data. For detailed sources, see:
- IAU 2012 Resolution B2 (astronomical unit)
- NASA JPL Solar System Dynamics (https://ssd.jpl.nasa.gov/)
"""

import numpy as np

# Universal physical constants
#-----------------------------

#: float: Universal gravitational constant (m^3 kg^-1 s^-2)
G = np.float64(6.67430e-11)  # m^3 kg^-1 s^-2

# Unit conversions
#-----------------

#: float: Astronomical unit (km)
AU_TO_KM = np.float64(149597870.7)  # km

#: float: Degrees to radians conversion factor
DEG_TO_RAD = np.float64(np.pi / 180.0)

#: float: Kilometres to metres conversion factor
KM_TO_M = np.float64(1e3)

#: float: Seconds per hour
SECONDS_PER_HOUR = np.float64(3600.0)

#: float: Radius of the region rendered around the Sun (km)
SOLAR_SYSTEM_SIZE = np.float64(80 * AU_TO_KM)  # km

# Celestial body masses
#---------------------

#: float: Mass of Sun (kg)
M_sun = np.float64(1.989e30)  # kg

#: float: Mass of Mercury (kg)
M_mercury = np.float64(3.302e23)  # kg

#: float: Mass of Venus (kg)
M_venus = np.float64(4.867e24)  # kg

#: float: Mass of Earth (kg)
M_earth = np.float64(5.972e24)  # kg

#: float: Mass of Moon (kg)
M_moon = np.float64(7.348e22)  # kg

#: float: Mass of Mars (kg)
M_mars = np.float64(6.417e23)  # kg

#: float: Mass of Jupiter (kg)
M_jupiter = np.float64(1.898e27)  # kg

#: float: Mass of Ganymede (kg)
M_ganymede = np.float64(1.482e23)  # kg

#: float: Mass of Saturn (kg)
M_saturn = np.float64(5.683e26)  # kg

#: float: Mass of Titan (kg)
M_titan = np.float64(1.345e23)  # kg

#: float: Mass of Pluto (kg)
M_pluto = np.float64(1.303e22)  # kg

#: float: Mass of Charon (kg)
M_charon = np.float64(1.586e21)  # kg
