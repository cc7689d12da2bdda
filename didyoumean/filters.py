# SPDX-License-Identifier: AGPL-3.0-or-later
"""Build the *filter set* of a request: the values submitted for the fulltext
filters of the search form."""

from __future__ import annotations

import typing as t

from didyoumean import logger
from didyoumean.view import FulltextFilter

logger = logger.getChild('filters')

FilterSet: t.TypeAlias = dict[str, "str | t.Literal[False]"]
"""Parameter name --> submitted value (``False`` when not submitted)."""


def build_filter_set(filters: t.Mapping[str, t.Any], exposed_input: t.Mapping[str, t.Any]) -> FilterSet:
    """Scan the configured ``filters`` and read the exposed value of each
    fulltext filter from ``exposed_input``.

    A filter is exposed as its ``identifier`` (if set) or else its ``key``;
    the keys of ``filters`` are not used.  The order of the returned mapping
    is the order of ``filters``; filters which are not a
    :py:obj:`FulltextFilter` are skipped.
    """
    filter_set: FilterSet = {}
    for _filter in filters.values():
        if not isinstance(_filter, FulltextFilter):
            continue
        # the exposed identifier could be different from the key
        name = _filter.identifier or _filter.key
        value = exposed_input.get(name)
        # "0" counts as not submitted, like an empty value
        filter_set[name] = value if value and value != "0" else False

    logger.debug("filter set: %s", filter_set)
    return filter_set
