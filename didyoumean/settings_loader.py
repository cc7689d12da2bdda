# SPDX-License-Identifier: AGPL-3.0-or-later
"""Load the settings from YAML files.

The defaults are read from :origin:`didyoumean/settings.yml`.  The file named
by the environment variable ``DIDYOUMEAN_SETTINGS_PATH`` (if set) is merged
into the defaults: sections are updated name by name, only the ``areas:``
section is replaced as a whole, so a host enables exactly the areas it lists.
"""

import typing as t
import os
from collections.abc import MutableMapping
from pathlib import Path

import yaml

from didyoumean.exceptions import DidYouMeanSettingsException

SettingsType: t.TypeAlias = dict[str, t.Any]

DEFAULT_SETTINGS_FILE = Path(__file__).parent / "settings.yml"


def load_yaml(file_name: str | Path) -> SettingsType:
    """Load YAML config from a file, an empty file is an empty config."""
    try:
        with open(file_name, 'r', encoding='utf-8') as settings_yaml:
            return yaml.safe_load(settings_yaml) or {}
    except (IOError, yaml.YAMLError) as e:
        raise DidYouMeanSettingsException(e, str(file_name)) from e


def get_user_settings_file() -> Path | None:
    """Returns the file named by ``DIDYOUMEAN_SETTINGS_PATH`` or ``None`` when
    the variable is unset.  A :py:obj:`EnvironmentError` is raised if the file
    does not exist."""
    settings_path = os.environ.get("DIDYOUMEAN_SETTINGS_PATH")
    if not settings_path:
        return None
    cfg_file = Path(settings_path)
    if not cfg_file.is_file():
        raise EnvironmentError(1, f"{cfg_file} not exists!", str(cfg_file))
    return cfg_file


def update_settings(default_settings: MutableMapping[str, t.Any], user_settings: MutableMapping[str, t.Any]):
    for k, v in user_settings.items():
        if k != 'areas' and isinstance(v, MutableMapping) and isinstance(default_settings.get(k), MutableMapping):
            update_settings(default_settings[k], v)
        else:
            default_settings[k] = v
    return default_settings


def load_settings(load_user_settings: bool = True) -> tuple[SettingsType, str]:
    """Returns the merged settings and a message naming the files they were
    loaded from."""

    cfg = load_yaml(DEFAULT_SETTINGS_FILE)
    cfg_file = get_user_settings_file() if load_user_settings else None
    if cfg_file is None:
        return cfg, f"load the default settings from {DEFAULT_SETTINGS_FILE}"

    update_settings(cfg, load_yaml(cfg_file))
    return cfg, f"merge the default settings ( {DEFAULT_SETTINGS_FILE} ) and the user settings ( {cfg_file} )"
