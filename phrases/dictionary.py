"""
Purpose: Typed, read-only view of one locale's phrase dictionary.

What it does:
- Parses the raw nested mapping (as found in the JSON resource) ONCE into
  frozen records:
    PhraseDictionary
      meta       -> DictionaryMeta (capitalize_first_letter)
      constants  -> Constants (direction / lanes / modifier phrases)
      modes      -> transport mode -> PhraseTemplateSet
      types      -> maneuver type -> ModifierTable | RotaryTable
- Validates that every set the selection cascade can reach has a "default"
  template, so a broken dictionary fails at load time and not on the first
  unlucky step.

Rule: no file access here (see loader.py), no selection logic.
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Union

from .errors import MissingResourceError, MissingTemplateError

DEFAULT = "default"

# maneuver types whose table has the extra "default" level
ROTARY_TYPES = ("rotary", "roundabout")
FALLBACK_TYPE = "turn"
USE_LANE_TYPE = "use lane"
NO_LANES = "no_lanes"

COMPASS_KEYS = (
    "north",
    "northeast",
    "east",
    "southeast",
    "south",
    "southwest",
    "west",
    "northwest",
)

# top-level keys of a version table that are not maneuver types
_RESERVED_KEYS = ("constants", "modes", "phrase", "meta")


def _frozen(values: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType(dict(values))


def _require_default(entries: Mapping[str, Any], path: str) -> Any:
    if DEFAULT not in entries:
        raise MissingTemplateError(f"{path}/{DEFAULT}")
    return entries[DEFAULT]


@dataclass(frozen=True)
class PhraseTemplateSet:
    """
    Templates for one (type, modifier) cell, keyed by content discriminator:
    exit_destination / destination / exit / name / default.
    """
    templates: Mapping[str, str]
    path: str = ""

    def get(self, discriminator: str) -> Optional[str]:
        return self.templates.get(discriminator)

    @property
    def default(self) -> str:
        return _require_default(self.templates, self.path)

    @classmethod
    def parse(cls, raw: Mapping[str, Any], path: str) -> PhraseTemplateSet:
        if not isinstance(raw, Mapping):
            raise MissingTemplateError(path)
        templates = {key: value for key, value in raw.items() if isinstance(value, str)}
        _require_default(templates, path)
        return cls(templates=_frozen(templates), path=path)


@dataclass(frozen=True)
class ModifierTable:
    """Regular maneuver type: modifier -> template set (must have "default")."""
    sets: Mapping[str, PhraseTemplateSet]
    path: str = ""

    def get(self, modifier: Optional[str]) -> Optional[PhraseTemplateSet]:
        if modifier is None:
            return None
        return self.sets.get(modifier)

    @property
    def default(self) -> PhraseTemplateSet:
        return _require_default(self.sets, self.path)

    @classmethod
    def parse(cls, raw: Mapping[str, Any], path: str) -> ModifierTable:
        if not isinstance(raw, Mapping):
            raise MissingTemplateError(path)
        _require_default(raw, path)
        sets = {
            modifier: PhraseTemplateSet.parse(value, f"{path}/{modifier}")
            for modifier, value in raw.items()
        }
        return cls(sets=_frozen(sets), path=path)


@dataclass(frozen=True)
class RotaryTable:
    """
    Rotary/roundabout type. The source data nests one extra level keyed to
    "default"; below it the sets are keyed by name_exit / name / exit / default.
    """
    variants: Mapping[str, PhraseTemplateSet]
    path: str = ""

    def get(self, variant: str) -> Optional[PhraseTemplateSet]:
        return self.variants.get(variant)

    @property
    def default(self) -> PhraseTemplateSet:
        return _require_default(self.variants, f"{self.path}/{DEFAULT}")

    @classmethod
    def parse(cls, raw: Mapping[str, Any], path: str) -> RotaryTable:
        if not isinstance(raw, Mapping):
            raise MissingTemplateError(path)
        level = _require_default(raw, path)
        if not isinstance(level, Mapping):
            raise MissingTemplateError(f"{path}/{DEFAULT}")
        _require_default(level, f"{path}/{DEFAULT}")
        variants = {
            variant: PhraseTemplateSet.parse(value, f"{path}/{DEFAULT}/{variant}")
            for variant, value in level.items()
        }
        return cls(variants=_frozen(variants), path=path)


TypeTable = Union[ModifierTable, RotaryTable]


@dataclass(frozen=True)
class Constants:
    direction: Mapping[str, str]
    lanes: Mapping[str, str]
    modifier: Mapping[str, str]

    @classmethod
    def parse(cls, raw: Mapping[str, Any], path: str) -> Constants:
        if not isinstance(raw, Mapping):
            raise MissingTemplateError(path)

        direction = dict(raw.get("direction") or {})
        for key in COMPASS_KEYS:
            if key not in direction:
                raise MissingTemplateError(f"{path}/direction/{key}")

        return cls(
            direction=_frozen(direction),
            lanes=_frozen(raw.get("lanes") or {}),
            modifier=_frozen(raw.get("modifier") or {}),
        )


@dataclass(frozen=True)
class DictionaryMeta:
    capitalize_first_letter: bool = False

    @classmethod
    def parse(cls, raw: Optional[Mapping[str, Any]]) -> DictionaryMeta:
        raw = raw or {}
        return cls(capitalize_first_letter=bool(raw.get("capitalizeFirstLetter", False)))


@dataclass(frozen=True)
class PhraseDictionary:
    """
    One locale's phrases for one format version. Immutable once built; share it
    freely between formatting calls.
    """
    locale: str
    version: str
    meta: DictionaryMeta
    constants: Constants
    modes: Mapping[str, PhraseTemplateSet]
    types: Mapping[str, TypeTable]

    def has_type(self, maneuver_type: Optional[str]) -> bool:
        return maneuver_type is not None and maneuver_type in self.types

    def type_table(self, maneuver_type: str) -> TypeTable:
        return self.types[maneuver_type]

    def no_lanes(self) -> PhraseTemplateSet:
        """Fallback set used when a lane layout has no phrase."""
        table = self.types.get(USE_LANE_TYPE)
        template_set = table.get(NO_LANES) if isinstance(table, ModifierTable) else None
        if template_set is None:
            raise MissingTemplateError(f"{self.version}/{USE_LANE_TYPE}/{NO_LANES}")
        return template_set

    @classmethod
    def from_mapping(cls, raw: Mapping[str, Any], *, version: str, locale: str) -> PhraseDictionary:
        """
        Build from the raw resource mapping:
            {"meta": {...}, "<version>": {"constants": ..., "modes": ..., "<type>": ...}}
        """
        instructions = raw.get(version)
        if not isinstance(instructions, Mapping):
            raise MissingResourceError(f"Phrase dictionary for {locale!r} has no {version!r} table")

        constants = Constants.parse(instructions.get("constants"), f"{version}/constants")

        modes: Dict[str, PhraseTemplateSet] = {}
        for mode, value in (instructions.get("modes") or {}).items():
            modes[mode] = PhraseTemplateSet.parse(value, f"{version}/modes/{mode}")

        types: Dict[str, TypeTable] = {}
        for maneuver_type, value in instructions.items():
            if maneuver_type in _RESERVED_KEYS:
                continue
            path = f"{version}/{maneuver_type}"
            if maneuver_type in ROTARY_TYPES:
                types[maneuver_type] = RotaryTable.parse(value, path)
            else:
                types[maneuver_type] = ModifierTable.parse(value, path)

        # unknown maneuver types are rendered as "turn"
        if FALLBACK_TYPE not in types:
            raise MissingTemplateError(f"{version}/{FALLBACK_TYPE}")
        if USE_LANE_TYPE in types and types[USE_LANE_TYPE].get(NO_LANES) is None:
            raise MissingTemplateError(f"{version}/{USE_LANE_TYPE}/{NO_LANES}")

        return cls(
            locale=locale,
            version=version,
            meta=DictionaryMeta.parse(raw.get("meta")),
            constants=constants,
            modes=_frozen(modes),
            types=_frozen(types),
        )
