"""
Purpose: Final touches on a rendered instruction.

- Tokens that rendered empty leave two spaces behind ("your  destination");
  each pair of whitespace characters is replaced by one space, in a single
  pass. Longer runs are only halved, which is what the phrase files expect.
- Upper-cases the first character when the dictionary asks for it.
"""

from __future__ import annotations

import re

from phrases.dictionary import DictionaryMeta

_WHITESPACE_PAIR = re.compile(r"\s\s")


def collapse_spaces(text: str) -> str:
    return _WHITESPACE_PAIR.sub(" ", text)


def sentence_cased(text: str) -> str:
    return text[:1].upper() + text[1:]


def finish(rendered: str, meta: DictionaryMeta) -> str:
    result = collapse_spaces(rendered)
    if meta.capitalize_first_letter:
        result = sentence_cased(result)
    return result
