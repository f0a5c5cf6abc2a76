"""
Phrase dictionary package.

Public API:
- PhraseDictionary and its typed parts
- reload / load_file: locate + parse a locale's JSON resource
- ordinal: default ordinal collaborator
- errors: PhraseDictionaryError, MissingTemplateError, MissingResourceError
"""
from .dictionary import (
    Constants,
    DictionaryMeta,
    ModifierTable,
    PhraseDictionary,
    PhraseTemplateSet,
    RotaryTable,
)
from .errors import MissingResourceError, MissingTemplateError, PhraseDictionaryError
from .loader import DEFAULT_VERSION, DEVELOPMENT_LOCALE, load_file, reload
from .ordinals import ordinal

__all__ = [
    "Constants",
    "DictionaryMeta",
    "ModifierTable",
    "PhraseDictionary",
    "PhraseTemplateSet",
    "RotaryTable",
    "PhraseDictionaryError",
    "MissingTemplateError",
    "MissingResourceError",
    "DEFAULT_VERSION",
    "DEVELOPMENT_LOCALE",
    "load_file",
    "reload",
    "ordinal",
]
