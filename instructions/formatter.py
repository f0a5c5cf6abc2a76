"""
Purpose: The instruction formatter (single entry point).
What it does:

Coordinates the pipeline for one RouteStep:

- selection.py picks the phrase template and computes token values
- tokens.py substitutes the tokens (with the caller's modify_value hook)
- normalize.py folds double spaces and capitalizes

Also owns the "current" phrase dictionary. Changing `locale` loads a complete
new dictionary first and only then swaps the reference, so a format() call
that already holds the old dictionary finishes with it.

Rule: Formatter is the only object other modules should call for instructions.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Optional, Union

from phrases.dictionary import PhraseDictionary
from phrases.loader import reload
from phrases.ordinals import OrdinalFormatter, ordinal as default_ordinal

from .models import RoadClass, RouteStep
from .normalize import finish
from .policy import FormatterPolicy, default_policy
from .selection import select_template
from .tokens import ModifyValue, render

logger = logging.getLogger(__name__)


class InstructionFormatter:
    """
    Turns route steps into localized instructions:

        formatter = InstructionFormatter()
        formatter.format(step)            -> "Turn left onto Main St (US 1)"
        formatter.locale = "de"
        formatter.format(step)            -> "Links abbiegen auf Main St (US 1)"
    """

    def __init__(
        self,
        policy: Optional[FormatterPolicy] = None,
        *,
        dictionary: Optional[PhraseDictionary] = None,
        ordinal: OrdinalFormatter = default_ordinal,
    ):
        self.policy = policy or default_policy()
        self.policy.validate()
        self.ordinal = ordinal  # (number, locale) -> "2nd"

        self._locale = self.policy.locale
        self._dictionary = dictionary or self.reload(self._locale)

    @property
    def version(self) -> str:
        return self.policy.version

    @property
    def dictionary(self) -> PhraseDictionary:
        return self._dictionary

    @property
    def locale(self) -> Optional[str]:
        return self._locale

    @locale.setter
    def locale(self, locale: Optional[str]) -> None:
        # build first, swap after: a failed load leaves the current table in place
        dictionary = self.reload(locale)
        self._dictionary = dictionary
        self._locale = locale

    def reload(self, locale: Optional[str]) -> PhraseDictionary:
        """Load a new dictionary for `locale` without touching the current one."""
        return reload(
            locale,
            version=self.policy.version,
            development_locale=self.policy.development_locale,
            data_dir=self.policy.data_dir,
        )

    def format(
        self,
        step: RouteStep,
        leg_index: Optional[int] = None,
        leg_count: Optional[int] = None,
        road_classes: Optional[Iterable[Union[RoadClass, str]]] = None,
        modify_value: Optional[ModifyValue] = None,
    ) -> Optional[str]:
        """
        Instruction for `step`, or None when the step has nothing to say.

        Parameters
        ----------
        leg_index, leg_count:
            Current leg and number of legs of the route. On every leg but the
            last, "{wayPoint}" becomes the ordinal of the waypoint ("1st").
        road_classes:
            Classes of the road of the step; only "motorway" matters.
        modify_value:
            (token type, value) -> value, applied to every substituted value,
            e.g. to highlight road names.
        """
        dictionary = self._dictionary

        selection = select_template(
            dictionary,
            step,
            leg_index=leg_index,
            leg_count=leg_count,
            road_classes=road_classes,
            modify_value=modify_value,
            ordinal=self.ordinal,
            max_exit_ordinal=self.policy.max_exit_ordinal,
        )
        if selection is None:
            return None

        rendered = render(selection.template, selection.context, modify_value)
        return finish(rendered, dictionary.meta)

    def string_for(self, obj: Any) -> Optional[str]:
        """Like format(), for arbitrary objects; anything but a RouteStep gives None."""
        if not isinstance(obj, RouteStep):
            return None
        return self.format(obj)
