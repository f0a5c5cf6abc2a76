"""
Purpose: Convert OSRM step JSON into instructions.models.RouteStep.

What it does:
- name / ref / exits          "A;B" -> ["A", "B"]
- destinations                "A 1, A 2: Berlin, Hamburg" -> codes + names
- rotary/roundabout steps     rotary_name -> names, name -> exit_names
- maneuver                    type, modifier, exit (1-based), bearing_after
- intersections[].lanes       lane indications + indices of "valid" lanes
- intersections[0].classes    road classes ("motorway", ...)

Rule: pure data mapping, no HTTP and no wording.
"""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Set, Tuple, Union

from instructions.models import Intersection, ManeuverType, RoadClass, RouteStep

_ROTARY_TYPES = (ManeuverType.TAKE_ROTARY.value, ManeuverType.TAKE_ROUNDABOUT.value)


def _split(value: Optional[str], separator: str) -> Optional[List[str]]:
    if not value:
        return None
    parts = [part.strip() for part in value.split(separator)]
    parts = [part for part in parts if part]
    return parts or None


def parse_destinations(value: Optional[str]) -> Tuple[Optional[List[str]], Optional[List[str]]]:
    """
    Split OSRM's destinations string into (codes, names).

    "A 1, A 2: Berlin, Hamburg" -> (["A 1", "A 2"], ["Berlin", "Hamburg"])
    "Berlin, Hamburg"           -> (None, ["Berlin", "Hamburg"])
    """
    if not value:
        return None, None
    if ":" in value:
        codes, names = value.split(":", 1)
        return _split(codes, ","), _split(names, ",")
    return None, _split(value, ",")


def intersection_from_osrm(data: Dict[str, Any]) -> Intersection:
    lanes = data.get("lanes")
    if lanes is None:
        return Intersection()

    approach_lanes = [";".join(lane.get("indications", [])) for lane in lanes]
    usable = [index for index, lane in enumerate(lanes) if lane.get("valid")]
    return Intersection(approach_lanes=approach_lanes, usable_approach_lanes=usable)


def road_classes_from_osrm(step: Dict[str, Any]) -> Set[Union[RoadClass, str]]:
    """Classes of the road the step is on, from its first intersection."""
    intersections = step.get("intersections") or []
    if not intersections:
        return set()

    classes: Set[Union[RoadClass, str]] = set()
    for name in intersections[0].get("classes", []):
        try:
            classes.add(RoadClass(name))
        except ValueError:
            classes.add(name)
    return classes


def step_from_osrm(step: Dict[str, Any]) -> RouteStep:
    """Build a RouteStep from one element of an OSRM leg's "steps" list."""
    maneuver = step.get("maneuver", {})
    maneuver_type = maneuver.get("type") or ManeuverType.TURN.value

    try:
        maneuver_type = ManeuverType(maneuver_type)
    except ValueError:
        # keep unknown types as plain strings; the formatter treats them as "turn"
        pass

    names = _split(step.get("name"), ";")
    exit_names = None
    if maneuver_type in _ROTARY_TYPES:
        exit_names = names
        names = _split(step.get("rotary_name"), ";")

    destination_codes, destinations = parse_destinations(step.get("destinations"))
    intersections = [intersection_from_osrm(item) for item in step.get("intersections") or []]

    return RouteStep(
        maneuver_type=maneuver_type,
        maneuver_direction=maneuver.get("modifier"),
        transport_type=step.get("mode"),
        names=names,
        codes=_split(step.get("ref"), ";"),
        exit_names=exit_names,
        destinations=destinations,
        destination_codes=destination_codes,
        exit_codes=_split(step.get("exits"), ";"),
        exit_index=maneuver.get("exit"),
        intersections=intersections or None,
        final_heading=maneuver.get("bearing_after"),
    )
