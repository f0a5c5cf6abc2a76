"""
Instructions domain package.

Public API:
- Domain models: RouteStep, Intersection, ManeuverType, ManeuverDirection,
  TransportType, RoadClass
- Formatter entry: InstructionFormatter (+ FormatterPolicy)
- Building blocks: select_template, render, TokenType, lane_config,
  direction_from_degree
"""
from .compass import direction_from_degree
from .formatter import InstructionFormatter
from .lanes import lane_config, lane_config_for_intersection
from .models import (
    Intersection,
    ManeuverDirection,
    ManeuverType,
    RoadClass,
    RouteStep,
    TransportType,
)
from .policy import FormatterPolicy, default_policy, policy_from_env
from .selection import Selection, select_template
from .tokens import PreRendered, RenderContext, TokenType, render

__all__ = [
    "InstructionFormatter",
    "FormatterPolicy",
    "default_policy",
    "policy_from_env",
    "RouteStep",
    "Intersection",
    "ManeuverType",
    "ManeuverDirection",
    "TransportType",
    "RoadClass",
    "Selection",
    "select_template",
    "RenderContext",
    "PreRendered",
    "TokenType",
    "render",
    "lane_config",
    "lane_config_for_intersection",
    "direction_from_degree",
]
