# SPDX-License-Identifier: AGPL-3.0-or-later
# pylint: disable=missing-module-docstring, cyclic-import
from __future__ import annotations

import typing as t
import logging

import msgspec

LOG_FORMAT_DEBUG: str = '%(levelname)-7s %(name)-30.30s: %(message)s'
LOG_FORMAT_PROD: str = '%(asctime)-15s %(levelname)s:%(name)s: %(message)s'

settings: dict[str, t.Any] = {}
"""The validated settings, section name --> section (see
:py:obj:`didyoumean.settings_defaults.DidYouMeanSettings`)."""

logger = logging.getLogger('didyoumean')

_unset = object()


def init_settings():
    """(Re-)load the global ``settings`` and set up the ``logger``.  The user
    settings are read from ``DIDYOUMEAN_SETTINGS_PATH``."""

    # pylint: disable=import-outside-toplevel
    from didyoumean import settings_loader
    from didyoumean.settings_defaults import apply_schema

    cfg, msg = settings_loader.load_settings(load_user_settings=True)
    validated = apply_schema(cfg)

    settings.clear()
    settings.update(msgspec.structs.asdict(validated))

    if validated.general.debug:
        logging.basicConfig(level=logging.DEBUG, format=LOG_FORMAT_DEBUG)
        logger.setLevel(logging.DEBUG)
    else:
        logging.basicConfig(level=logging.WARNING, format=LOG_FORMAT_PROD)
        logger.setLevel(logging.WARNING)
    logger.debug(msg)


def get_setting(name: str, default: t.Any = _unset) -> t.Any:
    """Returns the value to which the dotted ``name`` points, e.g.
    ``spellcheck.mode``.  If there is no such name in the settings and the
    ``default`` is unset, a :py:obj:`KeyError` is raised.
    """
    value = settings
    for a in name.split('.'):
        if isinstance(value, msgspec.Struct):
            value = getattr(value, a, _unset)
        elif isinstance(value, dict):
            value = value.get(a, _unset)
        else:
            value = _unset

        if value is _unset:
            if default is _unset:
                raise KeyError(name)
            return default

    return value


init_settings()
