"""
Purpose: Exceptions raised when the phrase dictionary itself is broken.

Two kinds of failure are kept apart so callers can tell them apart:
- MissingTemplateError: the dictionary loaded, but a required entry
  (a "default" set or template, "no_lanes") is absent.
- MissingResourceError: no dictionary file could be found or parsed for the
  requested locale and its fallbacks.

Rule: per-step conditions (no heading, no lanes, unknown token...) are NOT
errors and never raise these.
"""


class PhraseDictionaryError(Exception):
    """Base class for phrase dictionary configuration errors."""
    pass


class MissingTemplateError(PhraseDictionaryError):
    """A required template entry is missing from the phrase dictionary."""

    def __init__(self, path: str):
        self.path = path
        super().__init__(f"Phrase dictionary is missing required template entry '{path}'")


class MissingResourceError(PhraseDictionaryError):
    """No usable phrase dictionary resource for the locale (or its fallback)."""
    pass
