# SPDX-License-Identifier: AGPL-3.0-or-later
"""Spellcheck area providing "Did you mean?" corrections above the result
listing.

The area reads the spellcheck suggestions the backend attached to the *extra
data* of its response and matches them against the values of the fulltext
filters of the search form.  Two render modes are available:

``links``
  A list of corrected searches, one per suggestion whose term is the value of
  a filter.  Only the value of that filter is replaced, all other query
  parameters of the current request are kept.

``sentence``
  A single ``Did you mean: <phrase>?`` where all corrections are applied to
  the search phrase (query parameter ``keys_parameter``).

Options (``parameters`` in the area settings, defaults from the
``spellcheck:`` section of the settings):

- ``title``: the title to announce the suggestions, default ``Suggestions:``
- ``hide_on_result``: hide the area when the view has results
- ``always_show``: show the area even if ``hide_on_result`` would hide it
- ``mode``: ``links`` or ``sentence``
- ``backend``: key of the backend response in the extra data
- ``keys_parameter``: query parameter of the search phrase
"""

from __future__ import annotations

import typing as t

import flask
import msgspec
from flask_babel import gettext
from typing_extensions import override

import didyoumean
from didyoumean.areas import Area, AreaInfo
from didyoumean.exceptions import DidYouMeanAreaException
from didyoumean.filters import build_filter_set
from didyoumean.matcher import SuggestionMatcher
from didyoumean.result_types import DidYouMean, SuggestionList
from didyoumean.suggestions import extract_spellcheck, parse_suggestions

if t.TYPE_CHECKING:
    from didyoumean.areas import AreaCfg
    from didyoumean.settings_defaults import SpellcheckSettings
    from didyoumean.view import SearchView

QUERY_OPTION = "search_api_spellcheck"


def get_current_query() -> dict[str, t.Any]:
    """Query parameters of the current request, parameters given more than
    once are kept as a list."""
    if not flask.has_request_context():
        return {}
    query = {}
    for name, values in flask.request.args.lists():
        query[name] = values[0] if len(values) == 1 else values
    return query


class SpellCheckArea(Area):
    """Spellcheck area."""

    id = "spellcheck"

    def __init__(self, area_cfg: AreaCfg) -> None:
        super().__init__(area_cfg)
        try:
            self.options: SpellcheckSettings = didyoumean.get_setting("spellcheck").merge(self.parameters)
        except msgspec.ValidationError as e:
            raise DidYouMeanAreaException(self.id, str(e)) from e

        self.info = AreaInfo(
            id=self.id,
            name=gettext("Spell Check"),
            description=gettext("Suggest corrected searches when typos are detected"),
            options=msgspec.structs.asdict(self.options),
        )

    @override
    def pre_query(self, view: SearchView) -> None:
        """Ask the backend to run its spellcheck component."""
        view.set_option(QUERY_OPTION, True)

    @override
    def render(self, view: SearchView, empty: bool = False) -> SuggestionList | DidYouMean | None:
        raw = extract_spellcheck(view.extra_data, self.options.backend)
        if raw is None:
            return None

        matcher = SuggestionMatcher(
            filters=lambda: build_filter_set(view.filters, view.exposed_input),
            suggestions=parse_suggestions(raw),
            current_query=get_current_query,
            hide_on_result=self.options.hide_on_result,
            result_is_empty=empty,
            label=self.options.title,
            always_show=self.options.always_show,
        )

        if self.options.mode == "sentence":
            return self._render_sentence(view, matcher)
        return self._render_links(matcher)

    def _render_links(self, matcher: SuggestionMatcher) -> SuggestionList | None:
        links = matcher.match()
        if not links:
            return None
        return SuggestionList(label=matcher.label, links=links)

    def _render_sentence(self, view: SearchView, matcher: SuggestionMatcher) -> DidYouMean | None:
        keys_parameter = self.options.keys_parameter
        keys = view.exposed_input.get(keys_parameter)
        if not isinstance(keys, str) or not keys:
            return None

        phrase = matcher.corrected_phrase(keys)
        if phrase is None or phrase == keys:
            return None
        title = phrase.replace("+", " ")
        return DidYouMean(title=title, params={keys_parameter: title})
