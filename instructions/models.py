"""
Purpose: Domain models for the Instructions capability.
What it does:
- Defines the per-step input the formatter consumes:
- RouteStep (maneuver type/modifier/mode, names, refs, exits, destinations,
  intersections, final heading)
- Intersection (approach lanes + which of them are usable)

Defines enums/constants:
- ManeuverType = depart | arrive | turn | rotary | roundabout | use lane | ...
- ManeuverDirection = uturn | sharp right | right | ... | sharp left
- TransportType = driving | ferry | train | ...
- RoadClass = motorway | toll | ferry | restricted | tunnel

Enum values are the keys used in the phrase dictionary, so a member and its
plain string compare equal.

Rule: No dictionary lookups, no formatting. Models only.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Union


class ManeuverType(str, Enum):
    DEPART = "depart"
    ARRIVE = "arrive"
    TURN = "turn"
    CONTINUE = "continue"
    PASS_NAME_CHANGE = "new name"
    MERGE = "merge"
    TAKE_ON_RAMP = "on ramp"
    TAKE_OFF_RAMP = "off ramp"
    REACH_FORK = "fork"
    REACH_END = "end of road"
    USE_LANE = "use lane"
    TAKE_ROUNDABOUT = "roundabout"
    TAKE_ROTARY = "rotary"
    TURN_AT_ROUNDABOUT = "roundabout turn"
    EXIT_ROUNDABOUT = "exit roundabout"
    EXIT_ROTARY = "exit rotary"
    HEED_WARNING = "notification"


class ManeuverDirection(str, Enum):
    UTURN = "uturn"
    SHARP_RIGHT = "sharp right"
    RIGHT = "right"
    SLIGHT_RIGHT = "slight right"
    STRAIGHT = "straight"
    SLIGHT_LEFT = "slight left"
    LEFT = "left"
    SHARP_LEFT = "sharp left"


class TransportType(str, Enum):
    DRIVING = "driving"
    FERRY = "ferry"
    MOVABLE_BRIDGE = "movable bridge"
    INACCESSIBLE = "unaccessible"
    WALKING = "walking"
    CYCLING = "cycling"
    TRAIN = "train"


class RoadClass(str, Enum):
    MOTORWAY = "motorway"
    TOLL = "toll"
    FERRY = "ferry"
    RESTRICTED = "restricted"
    TUNNEL = "tunnel"


def describe(value: Union[Enum, str, None]) -> Optional[str]:
    """Dictionary key for an enum member or a raw string (None stays None)."""
    if isinstance(value, Enum):
        return value.value
    return value


@dataclass(frozen=True)
class Intersection:
    """
    Lane layout when approaching an intersection.

    approach_lanes: one entry per lane, left to right (lane indications such
    as "left", "straight;right"). usable_approach_lanes: indices into
    approach_lanes that can be used to perform the maneuver.
    """
    approach_lanes: Optional[List[str]] = None
    usable_approach_lanes: Optional[List[int]] = None

    @property
    def lane_count(self) -> int:
        return len(self.approach_lanes) if self.approach_lanes is not None else 0


@dataclass(frozen=True)
class RouteStep:
    """
    One maneuver of a route leg, already parsed from the routing response.

    maneuver_type may be a ManeuverType or any string: types the phrase
    dictionary does not know are rendered as "turn".
    """
    maneuver_type: Union[ManeuverType, str, None] = ManeuverType.TURN
    maneuver_direction: Union[ManeuverDirection, str, None] = None
    transport_type: Union[TransportType, str, None] = None

    names: Optional[List[str]] = None
    codes: Optional[List[str]] = None  # road refs, e.g. "US 1"
    exit_names: Optional[List[str]] = None  # road taken when leaving a rotary

    destinations: Optional[List[str]] = None
    destination_codes: Optional[List[str]] = None
    exit_codes: Optional[List[str]] = None
    exit_index: Optional[int] = None  # 1-based

    intersections: Optional[List[Intersection]] = None
    final_heading: Optional[float] = None  # degrees, bearing after the maneuver

    @property
    def type_key(self) -> Optional[str]:
        return describe(self.maneuver_type)

    @property
    def modifier_key(self) -> Optional[str]:
        return describe(self.maneuver_direction)

    @property
    def mode_key(self) -> Optional[str]:
        return describe(self.transport_type)
