# SPDX-License-Identifier: AGPL-3.0-or-later
# pylint: disable=too-few-public-methods
"""Typification of the output of the areas.  Rendering these types into
markup is up to the host application.

.. autoclass:: SuggestionLink
   :members:

.. autoclass:: SuggestionList
   :members:

.. autoclass:: DidYouMean
   :members:
"""

from __future__ import annotations

__all__ = ["SuggestionLink", "SuggestionList", "DidYouMean"]

import typing as t
from urllib.parse import urlencode

from flask_babel import gettext
import msgspec

QueryParams: t.TypeAlias = dict[str, t.Any]
"""Parameter name --> value (or list of values) of a query string."""


def query_string(params: QueryParams) -> str:
    return "?" + urlencode(params, doseq=True)


class SuggestionLink(msgspec.Struct, kw_only=True):
    """A corrected search: the query of the current request with the value of
    one filter replaced by the correction."""

    label: str
    """The corrected value."""

    params: QueryParams = {}
    """Query parameters of the link target."""

    @property
    def url(self) -> str:
        return query_string(self.params)


class SuggestionList(msgspec.Struct, kw_only=True):
    """Output of the *links* mode: a label and the list of corrected
    searches."""

    label: str
    links: list[SuggestionLink] = []

    def __len__(self):
        return len(self.links)


class DidYouMean(msgspec.Struct, kw_only=True):
    """Output of the *sentence* mode: ``Did you mean: <title>?`` where the
    title links to the search with the corrected phrase."""

    title: str
    params: QueryParams = {}

    @property
    def url(self) -> str:
        return query_string(self.params)

    @property
    def prefix(self) -> str:
        return gettext("Did you mean: ")

    @property
    def suffix(self) -> str:
        return gettext("?")
