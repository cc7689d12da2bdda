# SPDX-License-Identifier: AGPL-3.0-or-later
"""Containers for the search context an area is rendered in.

The host application builds a :py:obj:`SearchView` per request from its search
form (the configured filters and the exposed input) and from the response of
the search backend (the *extra data* and the number of results).
"""

from __future__ import annotations

__all__ = ["FulltextFilter", "SearchView"]

import typing as t


class FulltextFilter:
    """A search-form filter bound to a free-text query field."""

    __slots__ = 'key', 'identifier'

    def __init__(self, key: str, identifier: str | None = None):
        self.key = key
        self.identifier = identifier

    def __repr__(self):
        return "FulltextFilter({!r}, {!r})".format(self.key, self.identifier)

    def __eq__(self, other):
        return (
            isinstance(other, FulltextFilter) and self.key == other.key and self.identifier == other.identifier
        )

    def __hash__(self):
        return hash((self.key, self.identifier))


@t.final
class SearchView:
    """container for the per-request search context (form input, filters,
    backend response data, ...)"""

    def __init__(
        self,
        exposed_input: dict[str, t.Any] | None = None,
        filters: dict[str, t.Any] | None = None,
        extra_data: dict[str, t.Any] | None = None,
        result_count: int = 0,
    ):
        self.exposed_input: dict[str, t.Any] = exposed_input or {}
        # insertion order of the filters decides which filter wins a match
        self.filters: dict[str, t.Any] = filters or {}
        self.extra_data: dict[str, t.Any] = extra_data or {}
        self.result_count = result_count
        self.options: dict[str, t.Any] = {}

    @property
    def empty(self) -> bool:
        return self.result_count == 0

    def set_option(self, name: str, value: t.Any) -> None:
        """Set an option of the backend query (e.g. to request the spellcheck
        component of the backend)."""
        self.options[name] = value

    def get_option(self, name: str, default: t.Any = None) -> t.Any:
        return self.options.get(name, default)

    def __repr__(self):
        return "SearchView({!r}, {!r}, {!r}, {!r})".format(
            self.exposed_input,
            self.filters,
            self.extra_data,
            self.result_count,
        )
