"""
Purpose: Central configuration for instruction formatting (single source of truth).
What it does:

Stores the tunables of the formatter:

VERSION = "v5"              (phrase format version inside each resource)
LOCALE = None               (None -> development locale)
DEVELOPMENT_LOCALE = "en"   (fallback when a locale has no resource)
MAX_EXIT_ORDINAL = 10       (larger exit numbers are not spelled as ordinals)

Values can come from the environment / a .env file:
INSTRUCTIONS_LOCALE=de
INSTRUCTIONS_VERSION=v5
INSTRUCTIONS_DATA_DIR=/path/to/phrase/files

Rule: No logic here, just parameters so you can tune without rewriting code.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from dotenv import load_dotenv

from phrases.loader import DEFAULT_VERSION, DEVELOPMENT_LOCALE

from .selection import MAX_EXIT_ORDINAL


@dataclass(frozen=True)
class FormatterPolicy:
    """
    Configuration for InstructionFormatter.
    """

    # --- Phrase resource ---
    version: str = DEFAULT_VERSION
    locale: Optional[str] = None
    development_locale: str = DEVELOPMENT_LOCALE

    # Directory holding "<locale>.json" files; None -> bundled phrases/data
    data_dir: Optional[str] = None

    # --- Token values ---
    # Exit numbers above this are left out of "{exitIndex}".
    max_exit_ordinal: int = MAX_EXIT_ORDINAL

    def validate(self) -> None:
        """
        Basic sanity checks. Call once at startup.
        """
        if not self.version:
            raise ValueError("version must not be empty")

        if not self.development_locale:
            raise ValueError("development_locale must not be empty")

        if self.max_exit_ordinal < 0:
            raise ValueError("max_exit_ordinal must be >= 0")

        if self.data_dir is not None and not os.path.isdir(self.data_dir):
            raise ValueError(f"data_dir {self.data_dir!r} is not a directory")


def default_policy() -> FormatterPolicy:
    """
    Convenience factory for the default policy.
    """
    p = FormatterPolicy()
    p.validate()
    return p


def policy_from_env() -> FormatterPolicy:
    """
    Policy read from INSTRUCTIONS_* environment variables (a .env file is
    loaded first if present).
    """
    load_dotenv()
    p = FormatterPolicy(
        version=os.getenv("INSTRUCTIONS_VERSION") or DEFAULT_VERSION,
        locale=os.getenv("INSTRUCTIONS_LOCALE") or None,
        development_locale=os.getenv("INSTRUCTIONS_DEVELOPMENT_LOCALE") or DEVELOPMENT_LOCALE,
        data_dir=os.getenv("INSTRUCTIONS_DATA_DIR") or None,
    )
    p.validate()
    return p
