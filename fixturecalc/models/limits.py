"""Physical limits of the frame fixture.

Limits are inclusive. They describe the hardware and are not configurable.
"""

from __future__ import annotations
from pydantic import BaseModel

MIN_ST_HT_ANGLE = -10.0
MAX_ST_HT_ANGLE = 10.0
MIN_HTX = 80.0
MAX_HTX = 700.0
MIN_HTY = 0.0
MAX_HTY = 400.0             # Accounts for the upper cone standoff
MIN_HT_LENGTH_LARGEST = 60.0  # Shortest head tube for the largest reasonable diameter
HT_CONE_RANGE = 20.0        # Y difference from smallest to largest reasonable HT diameter
MIN_DAX = 50.0
MAX_DAX = 600.0
MIN_DAY = 0.0
MAX_DAY = 250.0

# Highest head tube top for the widest and narrowest reasonable head tube
MAX_HTY_TOP_LARGEST = MAX_HTY + MIN_HT_LENGTH_LARGEST
MAX_HTY_TOP_SMALLEST = MAX_HTY + MIN_HT_LENGTH_LARGEST - HT_CONE_RANGE


class Bounds(BaseModel, frozen=True):
    """Inclusive range for one fixture output."""
    min: float
    max: float

    def contains(self, value: float) -> bool:
        return self.min <= value <= self.max


RANGE_LIMITS: dict[str, Bounds] = {
    "st_ht_angle": Bounds(min=MIN_ST_HT_ANGLE, max=MAX_ST_HT_ANGLE),
    "htx": Bounds(min=MIN_HTX, max=MAX_HTX),
    "hty": Bounds(min=MIN_HTY, max=MAX_HTY),
    "dax": Bounds(min=MIN_DAX, max=MAX_DAX),
    "day": Bounds(min=MIN_DAY, max=MAX_DAY),
}
