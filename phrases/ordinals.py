"""
Purpose: Default ordinal collaborator ("1st", "2nd", "3." ...).

Used for waypoint numbering ("your 2nd destination") and exit ordinals
("take the 3rd exit"). Any callable with the same signature can be injected
into InstructionFormatter instead.
"""

from __future__ import annotations

from typing import Callable

OrdinalFormatter = Callable[[int, str], str]


def _english(number: int) -> str:
    if 10 <= number % 100 <= 20:
        suffix = "th"
    else:
        suffix = {1: "st", 2: "nd", 3: "rd"}.get(number % 10, "th")
    return f"{number}{suffix}"


def _dotted(number: int) -> str:
    return f"{number}."


_BY_LANGUAGE = {
    "en": _english,
    "de": _dotted,
    "da": _dotted,
    "fi": _dotted,
    "nb": _dotted,
}


def ordinal(number: int, locale: str) -> str:
    """
    Ordinal form of `number` for `locale` ("en" -> "2nd", "de" -> "2.").
    Languages without a rule get the plain number.
    """
    language = (locale or "").replace("_", "-").split("-")[0].lower()
    rule = _BY_LANGUAGE.get(language)
    if rule is None:
        return str(number)
    return rule(number)
