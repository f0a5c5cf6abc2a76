"""
Purpose: Template selection: pick the one phrase template for a step.

What it does:
Walks the phrase dictionary in a fixed order of fallbacks:

1) type: the step's maneuver type, or "turn" when the dictionary has no
   entry for it (new types must still render)
2) no modifier on anything but depart/arrive -> no instruction (None)
3) rotary/roundabout: name_exit -> name -> exit -> default variant
4) everything else: transport mode set -> modifier set -> type default set,
   and the way name is assembled from name/ref
5) use lane: lane signature -> lane phrase, or the "no_lanes" set
6) within the chosen set:
   exit_destination -> destination -> exit -> name -> default

and computes every token value once into a RenderContext.

Rule: no string rendering here (tokens.py) and no file access (phrases.loader).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple, Union

from phrases.dictionary import (
    FALLBACK_TYPE,
    USE_LANE_TYPE,
    ModifierTable,
    PhraseDictionary,
    PhraseTemplateSet,
    RotaryTable,
)
from phrases.ordinals import OrdinalFormatter, ordinal as default_ordinal

from .compass import direction_from_degree
from .lanes import lane_config_for_intersection
from .models import ManeuverDirection, ManeuverType, RoadClass, RouteStep, describe
from .tokens import ModifyValue, PreRendered, RenderContext, TokenType

logger = logging.getLogger(__name__)

# types that render without a modifier
_MODIFIER_OPTIONAL = (ManeuverType.DEPART.value, ManeuverType.ARRIVE.value)

MAX_EXIT_ORDINAL = 10


@dataclass(frozen=True)
class Selection:
    """
    Output of the selection cascade for one step.
    """
    template: str
    context: RenderContext


def _first(values: Optional[List[str]]) -> Optional[str]:
    if not values:
        return None
    return values[0]


def _apply(modify_value: Optional[ModifyValue], token: TokenType, value: str) -> str:
    if modify_value is None:
        return value
    return modify_value(token, value)


def is_motorway(road_classes: Optional[Iterable[Union[RoadClass, str]]]) -> bool:
    if not road_classes:
        return False
    return RoadClass.MOTORWAY.value in {describe(road_class) for road_class in road_classes}


def way_name_for(
    step: RouteStep,
    road_classes: Optional[Iterable[Union[RoadClass, str]]] = None,
    modify_value: Optional[ModifyValue] = None,
) -> PreRendered:
    """
    Display name of the road the step leads onto.

    name + different ref  -> "Main St (US 1)"   (not on motorways)
    motorway ref w/ digit -> "A 1"
    ref only              -> "A 1"
    name only             -> "Main St"

    Name and ref pass through `modify_value` separately; the result is marked
    PreRendered so the token engine does not modify it again.
    """
    name = _first(step.names)
    ref = _first(step.codes)
    motorway = is_motorway(road_classes)

    if name and ref and name != ref and not motorway:
        text = "{} ({})".format(
            _apply(modify_value, TokenType.WAY_NAME, name),
            _apply(modify_value, TokenType.CODE, ref),
        )
    elif ref and motorway and any(char.isdigit() for char in ref):
        text = _apply(modify_value, TokenType.CODE, ref)
    elif not name and ref:
        text = _apply(modify_value, TokenType.CODE, ref)
    elif name:
        text = _apply(modify_value, TokenType.WAY_NAME, name)
    else:
        text = ""
    return PreRendered(text)


def _rotary_set(table: RotaryTable, step: RouteStep) -> Tuple[PhraseTemplateSet, str]:
    """
    Template set + rotary name for a rotary/roundabout step. A first name that
    is present counts as a rotary name even when it is empty.
    """
    rotary_name = _first(step.names)
    has_exit = step.exit_index is not None

    if rotary_name is not None and has_exit and table.get("name_exit") is not None:
        return table.get("name_exit"), rotary_name
    if rotary_name is not None and table.get("name") is not None:
        return table.get("name"), rotary_name
    if has_exit and table.get("exit") is not None:
        return table.get("exit"), ""
    return table.default, ""


def _modifier_set(dictionary: PhraseDictionary, table: ModifierTable, step: RouteStep) -> PhraseTemplateSet:
    mode = step.mode_key
    if mode is not None and mode in dictionary.modes:
        # transport mode (e.g. ferry) wins over the modifier
        return dictionary.modes[mode]

    template_set = table.get(step.modifier_key)
    if template_set is not None:
        return template_set
    return table.default


def has_destination(step: RouteStep) -> bool:
    return bool(step.destination_codes) or bool(step.destinations)


def choose_template(template_set: PhraseTemplateSet, step: RouteStep, way_name: PreRendered) -> str:
    """Destination beats exit, exit beats name, name beats default."""
    destination = has_destination(step)
    exit_code = _first(step.exit_codes)

    if destination and exit_code is not None and template_set.get("exit_destination") is not None:
        return template_set.get("exit_destination")
    if destination and template_set.get("destination") is not None:
        return template_set.get("destination")
    if exit_code is not None and template_set.get("exit") is not None:
        return template_set.get("exit")
    if way_name and template_set.get("name") is not None:
        return template_set.get("name")
    return template_set.default


def destination_text(step: RouteStep) -> str:
    """Text like "A 1: Berlin" from the first destination code and name, whichever exist."""
    parts = [part for part in (_first(step.destination_codes), _first(step.destinations)) if part]
    return ": ".join(parts)


def select_template(
    dictionary: PhraseDictionary,
    step: RouteStep,
    *,
    leg_index: Optional[int] = None,
    leg_count: Optional[int] = None,
    road_classes: Optional[Iterable[Union[RoadClass, str]]] = None,
    modify_value: Optional[ModifyValue] = None,
    ordinal: OrdinalFormatter = default_ordinal,
    max_exit_ordinal: int = MAX_EXIT_ORDINAL,
) -> Optional[Selection]:
    """
    Resolve the template and token values for `step`.

    Returns None when the step cannot be described (no modifier on a type that
    needs one). Raises MissingTemplateError when the dictionary lacks a
    required "default" entry.
    """
    maneuver_type = step.type_key
    if not dictionary.has_type(maneuver_type):
        # unknown maneuver types are treated as "turn"
        maneuver_type = FALLBACK_TYPE

    modifier = step.modifier_key
    if maneuver_type not in _MODIFIER_OPTIONAL and modifier is None:
        logger.debug("Skipping %r step without modifier", maneuver_type)
        return None

    table = dictionary.type_table(maneuver_type)
    rotary_name = ""
    if isinstance(table, RotaryTable):
        template_set, rotary_name = _rotary_set(table, step)
        exit_name = _first(step.exit_names)
        way_name = PreRendered(_apply(modify_value, TokenType.WAY_NAME, exit_name) if exit_name else "")
    else:
        template_set = _modifier_set(dictionary, table, step)
        way_name = way_name_for(step, road_classes, modify_value)

    lane_instruction = ""
    if maneuver_type == USE_LANE_TYPE:
        intersection = step.intersections[0] if step.intersections else None
        signature = lane_config_for_intersection(intersection)
        phrase = dictionary.constants.lanes.get(signature)
        if phrase is None:
            logger.debug("No lane phrase for signature %r, using no_lanes", signature)
            template_set = dictionary.no_lanes()
        else:
            lane_instruction = phrase

    template = choose_template(template_set, step, way_name)

    way_point = ""
    if leg_index is not None and leg_count is not None and leg_index != leg_count - 1:
        way_point = ordinal(leg_index + 1, dictionary.locale)

    exit_index = ""
    if step.exit_index is not None and step.exit_index <= max_exit_ordinal:
        exit_index = ordinal(step.exit_index, dictionary.locale)

    context = RenderContext(
        way_name=way_name,
        code=_first(step.codes) or "",
        destination=destination_text(step),
        exit_code=_first(step.exit_codes) or "",
        exit_index=exit_index,
        rotary_name=rotary_name,
        lane_instruction=lane_instruction,
        modifier=dictionary.constants.modifier.get(modifier or ManeuverDirection.STRAIGHT.value, ""),
        direction=direction_from_degree(step.final_heading, dictionary.constants.direction),
        way_point=way_point,
    )
    return Selection(template=template, context=context)
