# SPDX-License-Identifier: AGPL-3.0-or-later
"""Typed settings of didyoumean.

The YAML settings are converted into the :py:obj:`DidYouMeanSettings`
structure; unknown options and values of the wrong type are reported with the
dotted name of the option.
"""
# pylint: disable=too-few-public-methods

# Struct fields aren't discovered in Python 3.14 without postponed annotations
from __future__ import annotations

__all__ = ["SpellcheckSettings", "DidYouMeanSettings", "apply_schema"]

import typing as t
import logging

import msgspec

from didyoumean.exceptions import DidYouMeanSettingsException

logger = logging.getLogger('didyoumean')

RenderMode = t.Literal["links", "sentence"]

Identifier = t.Annotated[str, msgspec.Meta(min_length=1, pattern=r"\S")]
"""A non-blank name, usable as key of the extra data or as query parameter."""


class GeneralSettings(msgspec.Struct, kw_only=True, forbid_unknown_fields=True):
    """The ``general:`` section."""

    debug: bool = False
    """Log at DEBUG level with a compact format."""


class SpellcheckSettings(msgspec.Struct, kw_only=True, forbid_unknown_fields=True):
    """Defaults of the spellcheck area (section ``spellcheck:``).  An area
    overrides them with its ``parameters``, see :py:obj:`SpellcheckSettings.merge`.

    .. code:: yaml

       spellcheck:
         title: "Try:"
         hide_on_result: true
         always_show: false
         mode: sentence
         backend: search_api_solr_response
         keys_parameter: keys
    """

    title: str = ""
    """Label announcing the suggestions, empty: the translated ``Suggestions:``"""

    hide_on_result: bool = True
    always_show: bool = False

    mode: RenderMode = "links"
    """``links``: one link per matched filter, ``sentence``: one corrected
    phrase."""

    backend: Identifier = "search_api_solr_response"
    """Key of the backend response in the extra data of the view."""

    keys_parameter: Identifier = "keys"
    """Query parameter of the search phrase (sentence mode)."""

    def merge(self, parameters: dict[str, t.Any]) -> SpellcheckSettings:
        """Returns a copy updated by the known names in ``parameters``, the
        result is validated like the settings."""
        names = msgspec.structs.fields(self)
        options = msgspec.structs.asdict(self)
        options.update({f.name: parameters[f.name] for f in names if f.name in parameters})
        return msgspec.convert(options, type=SpellcheckSettings)


class DidYouMeanSettings(msgspec.Struct, kw_only=True):
    """Root of the settings, unknown top-level sections are ignored."""

    general: GeneralSettings = msgspec.field(default_factory=GeneralSettings)
    spellcheck: SpellcheckSettings = msgspec.field(default_factory=SpellcheckSettings)

    areas: dict[str, t.Any] = {}
    """Fully qualified class name of an area --> :py:obj:`AreaCfg` values."""


def apply_schema(cfg: dict[str, t.Any], filename: str | None = None) -> DidYouMeanSettings:
    """Validate ``cfg`` and fill in the defaults.  A
    :py:obj:`DidYouMeanSettingsException` is raised for invalid settings."""
    try:
        return msgspec.convert(cfg, type=DidYouMeanSettings)
    except msgspec.ValidationError as e:
        # Expected `str`, got `int` - at `$.spellcheck.title`
        # --> Expected `str`, got `int` - at `spellcheck.title`
        msg = str(e).replace("`$.", "`")
        logger.error(msg)
        raise DidYouMeanSettingsException(msg, filename) from e
