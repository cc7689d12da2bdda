# SPDX-License-Identifier: AGPL-3.0-or-later
"""Ingestion of the spellcheck data a search backend attaches to its response.

Backends do not agree on the shape of the suggestions, two shapes are known:

``AlternatingArrayShape``
  A flat list where a term is followed by its correction data::

    ["seach", {"suggestion": ["search"]}, "engiine", {"suggestion": ["engine"]}]

``KeyedMapShape``
  A mapping keyed by the term, the value is an error string or the correction
  data::

    {"seach": {"suggestion": ["search"]}, "foo": "no suggestion available"}

The shape is resolved once by :py:obj:`parse_suggestions`, downstream code only
sees a list of :py:obj:`SuggestionRecord`.
"""

from __future__ import annotations

__all__ = ["SuggestionRecord", "extract_spellcheck", "parse_suggestions"]

import typing as t
from collections.abc import Mapping, Sequence
from dataclasses import dataclass

from didyoumean import logger

logger = logger.getChild('suggestions')


@dataclass(frozen=True)
class SuggestionRecord:
    """A term of the search phrase and the correction proposed by the backend."""

    term: str
    correction: str | None = None


def extract_spellcheck(extra_data: t.Any, backend_key: str) -> t.Any:
    """Return the raw suggestions from ``extra_data[backend_key]`` or ``None``
    if any level of ``[backend_key]["spellcheck"]["suggestions"]`` is missing.
    """
    value = extra_data
    for name in (backend_key, "spellcheck", "suggestions"):
        if not isinstance(value, Mapping):
            logger.debug("no spellcheck data in %s (missing %r)", backend_key, name)
            return None
        value = value.get(name)
    return value


def _first_correction(data: t.Any) -> str | None:
    if not isinstance(data, Mapping):
        return None
    candidates = data.get("suggestion")
    if not isinstance(candidates, Sequence) or isinstance(candidates, str):
        return None
    for candidate in candidates:
        # extended results: {"word": "search", "freq": 3}
        if isinstance(candidate, Mapping):
            candidate = candidate.get("word")
        if isinstance(candidate, str) and candidate:
            return candidate
    return None


def _parse_alternating(raw: Sequence[t.Any]) -> list[SuggestionRecord]:
    records = []
    for i, item in enumerate(raw):
        if not isinstance(item, str):
            continue
        data = raw[i + 1] if i + 1 < len(raw) else None
        if not item:
            logger.debug("skip suggestion without term: %r", data)
            continue
        records.append(SuggestionRecord(term=item, correction=_first_correction(data)))
    return records


def _parse_keyed(raw: Mapping[t.Any, t.Any]) -> list[SuggestionRecord]:
    records = []
    for term, data in raw.items():
        if not isinstance(term, str) or not term:
            continue
        # an error string carries no correction
        records.append(SuggestionRecord(term=term, correction=_first_correction(data)))
    return records


def parse_suggestions(raw: t.Any) -> list[SuggestionRecord]:
    """Normalize the raw suggestions of a backend into a list of
    :py:obj:`SuggestionRecord` (in the order of the backend).  Unknown shapes
    result in an empty list."""

    if isinstance(raw, Mapping):
        return _parse_keyed(raw)
    if isinstance(raw, Sequence) and not isinstance(raw, (str, bytes)):
        return _parse_alternating(raw)
    if raw is not None:
        logger.debug("unknown shape of spellcheck suggestions: %s", type(raw).__name__)
    return []
