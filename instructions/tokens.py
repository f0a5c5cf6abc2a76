"""
Purpose: Token engine, fills "{token}" placeholders of a phrase template.

What it does:
- Scans the template left to right, copying literal text as-is.
- Each "{name}" is resolved against the fixed token vocabulary (TokenType).
  Unknown names, and a "{" that is never closed, are copied literally.
- Every substituted value goes through the optional `modify_value` hook
  (token type, value) -> value, used e.g. to wrap road names in markup.
  The one exception is a PreRendered value (the way name), which already went
  through the hook while it was assembled and is copied unchanged.

Rule: no template selection here; the context is computed by selection.py.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable, Dict, List, Optional, Union


class TokenType(str, Enum):
    CODE = "code"
    WAY_NAME = "wayName"
    DESTINATION = "destination"
    EXIT_CODE = "exitCode"
    EXIT_INDEX = "exitIndex"
    ROTARY_NAME = "rotaryName"
    LANE_INSTRUCTION = "laneInstruction"
    MODIFIER = "modifier"
    DIRECTION = "direction"
    WAY_POINT = "wayPoint"

    @classmethod
    def from_placeholder(cls, name: str) -> Optional[TokenType]:
        """Token for a placeholder name, accepting the osrm-text-instructions spellings."""
        try:
            return cls(name)
        except ValueError:
            return _ALIASES.get(name)


# placeholder spellings used by the upstream osrm-text-instructions JSON files
_ALIASES: Dict[str, TokenType] = {
    "ref": TokenType.CODE,
    "way_name": TokenType.WAY_NAME,
    "exit": TokenType.EXIT_CODE,
    "exit_number": TokenType.EXIT_INDEX,
    "rotary_name": TokenType.ROTARY_NAME,
    "lane_instruction": TokenType.LANE_INSTRUCTION,
    "nth": TokenType.WAY_POINT,
}

ModifyValue = Callable[[TokenType, str], str]


@dataclass(frozen=True)
class PreRendered:
    """Text that already went through the modify_value hook."""
    text: str = ""

    def __bool__(self) -> bool:
        return bool(self.text)


TokenValue = Union[str, PreRendered]


@dataclass(frozen=True)
class RenderContext:
    """
    Values for every token of one step, computed once per formatting call.
    """
    way_name: PreRendered = PreRendered()
    code: str = ""
    destination: str = ""
    exit_code: str = ""
    exit_index: str = ""  # localized ordinal, e.g. "2nd"
    rotary_name: str = ""
    lane_instruction: str = ""
    modifier: str = ""
    direction: str = ""
    way_point: str = ""  # localized ordinal of the leg, empty on the last leg

    def value_for(self, token: TokenType) -> TokenValue:
        return getattr(self, _FIELDS[token])


_FIELDS: Dict[TokenType, str] = {
    TokenType.CODE: "code",
    TokenType.WAY_NAME: "way_name",
    TokenType.DESTINATION: "destination",
    TokenType.EXIT_CODE: "exit_code",
    TokenType.EXIT_INDEX: "exit_index",
    TokenType.ROTARY_NAME: "rotary_name",
    TokenType.LANE_INSTRUCTION: "lane_instruction",
    TokenType.MODIFIER: "modifier",
    TokenType.DIRECTION: "direction",
    TokenType.WAY_POINT: "way_point",
}


def render(template: str, context: RenderContext, modify_value: Optional[ModifyValue] = None) -> str:
    """Replace the tokens of `template` with values from `context`."""
    result: List[str] = []
    position = 0
    length = len(template)

    while position < length:
        start = template.find("{", position)
        if start == -1:
            result.append(template[position:])
            break

        result.append(template[position:start])

        end = template.find("}", start + 1)
        if end == -1:
            # unterminated placeholder, keep the rest as text
            result.append(template[start:])
            break

        token = TokenType.from_placeholder(template[start + 1:end])
        if token is None:
            result.append(template[start:end + 1])
        else:
            result.append(_substitute(token, context.value_for(token), modify_value))
        position = end + 1

    return "".join(result)


def _substitute(token: TokenType, value: TokenValue, modify_value: Optional[ModifyValue]) -> str:
    if isinstance(value, PreRendered):
        return value.text
    if modify_value is None:
        return value
    return modify_value(token, value)
