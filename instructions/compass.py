"""
Purpose: Turn a heading in degrees into a localized compass direction
("north", "Südwesten", ...) for templates such as "Head {direction}".
"""

from __future__ import annotations

from typing import Mapping, Optional, Tuple

# (inclusive upper bound in whole degrees, compass key), checked in order.
# north covers [340, 360] and [0, 20]; the odd buckets are half-open.
COMPASS_BUCKETS: Tuple[Tuple[int, str], ...] = (
    (20, "north"),
    (69, "northeast"),
    (110, "east"),
    (159, "southeast"),
    (200, "south"),
    (249, "southwest"),
    (290, "west"),
    (339, "northwest"),
    (360, "north"),
)


def compass_key(heading: Optional[float]) -> Optional[str]:
    """Compass key for `heading`, or None when the step has no heading."""
    if heading is None:
        return None

    # wrapped into [0, 360) first, then whole degrees
    degree = int(heading % 360)
    for upper, key in COMPASS_BUCKETS:
        if degree <= upper:
            return key
    return None


def direction_from_degree(heading: Optional[float], directions: Mapping[str, str]) -> str:
    """Localized compass phrase for `heading`; empty string without a heading."""
    key = compass_key(heading)
    if key is None:
        return ""
    return directions.get(key, "")
