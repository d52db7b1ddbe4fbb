"""
Physical, calendar, and astronomical constants used throughout lightspeed.

UNITS:
- Velocity: fraction of the speed of light (dimensionless, 0 to 1)
- Journey distance: light-years (ly)
- Journey time: years (yr), Julian year of 365.25 days
- Clock time: seconds (s)
- Mass / momentum / energy: SI (kg, kg·m/s, J)

Because distance is in light-years and velocity is a fraction of c,
travel time in years is simply distance / velocity.

The lookup tables are read-only mappings; nothing in the package mutates them.
"""

from types import MappingProxyType

# Speed of light
c = 1.0  # [ly/yr] - exactly 1 by definition
SPEED_OF_LIGHT = 299792458.0  # [m/s]
SPEED_OF_LIGHT_KM_S = 299792.458  # [km/s]
SPEED_OF_LIGHT_MILES_S = 186282.397  # [mi/s]

# Distance
LIGHT_YEAR_IN_METERS = 9.4607304725808e15  # [m]
LIGHT_YEAR_IN_KM = 9.4607304725808e12  # [km]
KM_TO_MILES = 0.621371
METERS_TO_FEET = 3.28084

# Calendar (Julian year)
DAYS_PER_YEAR = 365.25
DAYS_PER_MONTH = 30.44  # 365.25 / 12, rounded
HOURS_PER_DAY = 24
SECONDS_PER_MINUTE = 60
SECONDS_PER_HOUR = 3600
SECONDS_PER_DAY = 86400
SECONDS_PER_MONTH = 2629746  # 365.25 / 12 days
SECONDS_PER_YEAR = 31557600  # 365.25 days

# Velocity domain
# Largest velocity fraction handed to the engine when a control would reach c.
MAX_VELOCITY_FRACTION = 0.999999999999

# Clock cadence
DEFAULT_TICK_INTERVAL = 0.1  # [s] ~10 Hz

# Destinations [ly]
ASTRONOMICAL_DISTANCES = MappingProxyType({
    'PROXIMA_CENTAURI': 4.24,
    'ALPHA_CENTAURI': 4.37,
    'SIRIUS': 8.6,
    'VEGA': 25.04,
    'POLARIS': 433.0,
    'GALACTIC_CENTER': 26000.0,
    'ANDROMEDA_GALAXY': 2537000.0,
    'OBSERVABLE_UNIVERSE': 46500000000.0,
})

DESTINATION_NAMES = MappingProxyType({
    'PROXIMA_CENTAURI': 'Proxima Centauri',
    'ALPHA_CENTAURI': 'Alpha Centauri',
    'SIRIUS': 'Sirius',
    'VEGA': 'Vega',
    'POLARIS': 'Polaris',
    'GALACTIC_CENTER': 'Galactic Center',
    'ANDROMEDA_GALAXY': 'Andromeda Galaxy',
    'OBSERVABLE_UNIVERSE': 'Observable Universe',
})
