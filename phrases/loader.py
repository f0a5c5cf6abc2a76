"""
Purpose: Locate and load the phrase dictionary resource for a locale.

What it does:
- Looks for "<locale>.json" in the bundled data directory (or a directory you
  pass in), trying in order:
    exact locale ("de-AT" / "de_AT") -> language ("de") -> development locale ("en")
- Parses the JSON and hands the raw mapping to PhraseDictionary.from_mapping,
  which validates it.
- reload(locale) returns a NEW dictionary every time. It never mutates one
  that is already in use, so a caller can build the new table and then swap
  its reference.

Rule: no formatting logic here.
"""

from __future__ import annotations

import json
import logging
import os
from typing import List, Optional

from .dictionary import PhraseDictionary
from .errors import MissingResourceError

logger = logging.getLogger(__name__)

DATA_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "data")
DEFAULT_VERSION = "v5"
DEVELOPMENT_LOCALE = "en"


def candidate_locales(locale: Optional[str], development_locale: str = DEVELOPMENT_LOCALE) -> List[str]:
    """
    Ordered list of locale identifiers to try for `locale`.

    "de-AT" -> ["de-AT", "de_AT", "de", "en"]
    """
    candidates: List[str] = []
    if locale:
        candidates.append(locale)
        candidates.append(locale.replace("-", "_"))
        language = locale.replace("_", "-").split("-")[0]
        candidates.append(language)
    candidates.append(development_locale)

    # keep order, drop duplicates
    unique: List[str] = []
    for candidate in candidates:
        if candidate not in unique:
            unique.append(candidate)
    return unique


def resource_path(locale: str, data_dir: str = DATA_DIR) -> str:
    return os.path.join(data_dir, f"{locale}.json")


def reload(
    locale: Optional[str] = None,
    *,
    version: str = DEFAULT_VERSION,
    development_locale: str = DEVELOPMENT_LOCALE,
    data_dir: Optional[str] = None,
) -> PhraseDictionary:
    """
    Load a fresh PhraseDictionary for `locale`.

    Raises
    ------
    MissingResourceError:
        no resource exists for the locale nor for the development locale, or
        the chosen resource is not valid JSON.
    MissingTemplateError:
        the resource parsed but lacks a required "default" entry.
    """
    data_dir = data_dir or DATA_DIR

    for candidate in candidate_locales(locale, development_locale):
        path = resource_path(candidate, data_dir)
        if not os.path.isfile(path):
            continue

        if locale and candidate != locale:
            logger.warning("No phrase dictionary for locale %r, falling back to %r", locale, candidate)

        return load_file(path, version=version, locale=candidate)

    raise MissingResourceError(
        f"No phrase dictionary found for locale {locale!r} "
        f"(fallback {development_locale!r}) in {data_dir}"
    )


def load_file(path: str, *, version: str = DEFAULT_VERSION, locale: str = DEVELOPMENT_LOCALE) -> PhraseDictionary:
    """Parse one JSON resource file into a PhraseDictionary."""
    try:
        with open(path, "r", encoding="utf-8") as file:
            raw = json.load(file)
    except (OSError, ValueError) as exc:
        raise MissingResourceError(f"Could not read phrase dictionary {path}: {exc}") from exc

    if not isinstance(raw, dict):
        raise MissingResourceError(f"Phrase dictionary {path} is not a JSON object")

    dictionary = PhraseDictionary.from_mapping(raw, version=version, locale=locale)
    logger.debug("Loaded phrase dictionary %s (%s, %d maneuver types)", path, version, len(dictionary.types))
    return dictionary
