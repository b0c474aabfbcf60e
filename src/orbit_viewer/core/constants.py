from __future__ import annotations

# Earth gravitational parameter (mu) in km^3/s^2 (WGS-84 standard value)
MU_EARTH_KM3_S2: float = 398600.4418

# Earth equatorial radius in km (WGS-84). Also the render unit: 1 unit = 1 R_E
R_EARTH_KM: float = 6378.137

# Moon placement (mean Earth-Moon distance) and size
MOON_DISTANCE_KM: float = 384400.0
MOON_RADIUS_KM: float = 1737.0

# Altitude band edges (km)
KARMAN_LINE_KM: float = 100.0
LEO_MAX_KM: float = 2000.0
GEO_ALTITUDE_KM: float = 35786.0
GEO_MAX_KM: float = 35900.0

# Defaults for a viewer session
DEFAULT_ALTITUDE_KM: float = GEO_ALTITUDE_KM
DEFAULT_TIME_SCALE: float = 1.0
DEFAULT_FOCUS_DURATION_MS: float = 800.0

# 0.0002 rad per frame at 60 Hz
EARTH_SPIN_RAD_S: float = 0.012

# Longest frame the driver will hand to the simulation (s)
MAX_FRAME_DT_S: float = 0.1
