# Display scale
# SVG-style renderers lose precision with very large numbers, so every distance
# in km is divided by this ratio before drawing. Zoom is not taken into account.
KM_TO_PX = 1e5

# Orbit path sampling
ORBIT_SAMPLES = 360  # regular samples per orbit path

# Numba
FASTMATH = False  # Global flag for Numba's fastmath option
NUMBA_CACHE = True

# Libration points
DEFAULT_LAGRANGE_PAIRS = (("sun", "earth"),)  # (primary id, secondary id)
LAGRANGE_MASS_RATIO_LIMIT = 0.0385  # warn above this m2/m1, first-order formulas degrade
