"""
Purpose: Lane signature used as the key into the dictionary's lane phrases.

Each approach lane becomes "o" (usable) or "x" (not usable), left to right,
and runs of the same character are folded into one:

    [x, o, o, x]  ->  "xox"
    [o, o, o]     ->  "o"
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from .models import Intersection

logger = logging.getLogger(__name__)

USABLE = "o"
UNUSABLE = "x"


def lane_config(lane_count: int, usable_indices: Optional[Iterable[int]]) -> str:
    """
    Run-length signature for `lane_count` lanes of which `usable_indices` can be
    used. Empty string when there is no lane data.
    """
    if not lane_count or usable_indices is None:
        return ""

    config = [UNUSABLE] * lane_count
    for index in usable_indices:
        if 0 <= index < lane_count:
            config[index] = USABLE
        else:
            logger.debug("Ignoring usable lane index %s outside %s lanes", index, lane_count)

    signature = ""
    for lane in config:
        if not signature or signature[-1] != lane:
            signature += lane
    return signature


def lane_config_for_intersection(intersection: Optional[Intersection]) -> str:
    if intersection is None or intersection.approach_lanes is None:
        return ""
    return lane_config(intersection.lane_count, intersection.usable_approach_lanes)
