"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Planar distance in degrees; not a geodesic radius.
DEFAULT_GEOFENCE_RADIUS = Decimal("0.1")

# Day credit thresholds, in hours.
HALF_DAY_MIN_HOURS = Decimal("5")
FULL_DAY_MIN_HOURS = Decimal("9")

DEFAULT_BONUS_MAX_ABSENCE_DAYS = Decimal("2")

DEFAULT_ADMIN_TOKEN_MAX_AGE = 3600
ADMIN_TOKEN_SALT = "timeclock-admin-auth"

MIN_PASSWORD_LENGTH = 6
DEFAULT_PAYROLL_HISTORY_LIMIT = 500
