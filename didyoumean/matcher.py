# SPDX-License-Identifier: AGPL-3.0-or-later
"""Match the spellcheck suggestions of a backend against the values of the
fulltext filters of the current request.

A :py:obj:`SuggestionMatcher` lives for one request.  The *filter set* and the
*current query* can be passed as values or as callables, in the latter case
they are computed on first access and cached for the lifetime of the matcher.

.. code:: python

   matcher = SuggestionMatcher(
       filters={"search": "seach"},
       suggestions=parse_suggestions(["seach", {"suggestion": ["search"]}]),
       current_query={"search": "seach", "page": "2"},
   )
   matcher.match()
   # [SuggestionLink(label='search', params={'search': 'search', 'page': '2'})]
"""

from __future__ import annotations

__all__ = ["SuggestionMatcher"]

import typing as t
from collections.abc import Callable, Sequence
from functools import cached_property

from flask_babel import gettext

from didyoumean import logger
from didyoumean.filters import FilterSet
from didyoumean.result_types import QueryParams, SuggestionLink
from didyoumean.suggestions import SuggestionRecord

logger = logger.getChild('matcher')

T = t.TypeVar("T")


def _resolve(value: T | Callable[[], T]) -> T:
    if callable(value):
        return value()
    return value


class SuggestionMatcher:
    """Produces the corrected searches for the suggestions of a backend."""

    def __init__(
        self,
        filters: FilterSet | Callable[[], FilterSet],
        suggestions: Sequence[SuggestionRecord],
        current_query: QueryParams | Callable[[], QueryParams],
        hide_on_result: bool = True,
        result_is_empty: bool = True,
        label: str = "",
        always_show: bool = False,
    ):  # pylint:disable=too-many-arguments
        self._filters = filters
        self._current_query = current_query
        self.suggestions = tuple(suggestions)
        self.hide_on_result = hide_on_result
        self.result_is_empty = result_is_empty
        self.always_show = always_show
        self._label = label

    @cached_property
    def filters(self) -> FilterSet:
        return _resolve(self._filters)

    @cached_property
    def current_query(self) -> QueryParams:
        return _resolve(self._current_query)

    @property
    def label(self) -> str:
        """The title to announce the suggestions, default: ``Suggestions:``"""
        return self._label or gettext("Suggestions:")

    def should_display(self) -> bool:
        """Suggestions are suppressed when there are already results (unless
        ``always_show`` is set)."""
        if self.always_show or not self.hide_on_result:
            return True
        return self.result_is_empty

    def filter_match(self, record: SuggestionRecord) -> str | None:
        """Return the name of the first filter whose value is the term of the
        ``record``."""
        for name, value in self.filters.items():
            if isinstance(value, str) and value == record.term:
                return name
        return None

    def match(self) -> list[SuggestionLink]:
        """Return one :py:obj:`SuggestionLink` for each suggestion whose term
        is the value of a filter, in the order of the suggestions."""
        if not self.should_display():
            logger.debug("suggestions suppressed, the search has results")
            return []

        links = []
        for record in self.suggestions:
            if not record.correction:
                continue
            name = self.filter_match(record)
            if name is None:
                continue
            params = {**self.current_query, name: record.correction}
            links.append(SuggestionLink(label=record.correction, params=params))
        return links

    def corrected_phrase(self, phrase: str) -> str | None:
        """Replace every term in ``phrase`` by its correction.  Returns ``None``
        when there is nothing to correct."""
        if not self.should_display():
            return None

        # an empty term would insert the correction between every character
        corrections = [r for r in self.suggestions if r.term and r.correction]
        if not corrections:
            return None
        for record in corrections:
            phrase = phrase.replace(record.term, record.correction)  # type: ignore[arg-type]
        return phrase
