# SPDX-License-Identifier: AGPL-3.0-or-later
# pylint: disable=missing-module-docstring,disable=missing-class-docstring,invalid-name

from pathlib import Path

import os

import mock
from parameterized import parameterized

import didyoumean
from didyoumean.exceptions import DidYouMeanSettingsException
from didyoumean import settings_loader
from didyoumean.settings_defaults import DidYouMeanSettings, apply_schema
from tests import DYMTestCase


def _settings(f_name):
    return str(Path(__file__).parent.absolute() / "settings" / f_name)


class TestLoad(DYMTestCase):

    def test_load_zero(self):
        with self.assertRaises(DidYouMeanSettingsException):
            settings_loader.load_yaml('/dev/zero')

        with self.assertRaises(DidYouMeanSettingsException) as e:
            settings_loader.load_yaml(_settings("syntaxerror_settings.yml"))
        self.assertEqual(e.exception.filename, _settings("syntaxerror_settings.yml"))

        self.assertEqual(settings_loader.load_yaml(_settings("empty_settings.yml")), {})

    def test_load_not_exists(self):
        with self.assertRaises(DidYouMeanSettingsException):
            settings_loader.load_yaml(_settings("not_exists.yml"))


class TestDefaultSettings(DYMTestCase):

    def test_load(self):
        settings, msg = settings_loader.load_settings(load_user_settings=False)
        self.assertTrue(msg.startswith('load the default settings from'))
        self.assertFalse(settings['general']['debug'])
        self.assertEqual(settings['spellcheck']['mode'], "links")
        self.assertIn('didyoumean.areas.spellcheck.SpellCheckArea', settings['areas'])

    def test_schema_defaults(self):
        settings, _msg = settings_loader.load_settings(load_user_settings=False)
        self.assertEqual(apply_schema(settings), DidYouMeanSettings(areas=settings['areas']))
        self.assertEqual(apply_schema({}), DidYouMeanSettings())

    def test_get_setting(self):
        self.assertEqual(didyoumean.get_setting("spellcheck.mode"), "links")
        self.assertEqual(didyoumean.get_setting("spellcheck.keys_parameter"), "keys")
        self.assertIs(didyoumean.get_setting("general.debug"), False)
        self.assertIsNone(didyoumean.get_setting("spellcheck.not_exists", None))
        self.assertIsNone(didyoumean.get_setting("spellcheck.mode.deeper", None))
        with self.assertRaises(KeyError):
            didyoumean.get_setting("spellcheck.not_exists")


class TestUserSettings(DYMTestCase):

    def test_user_settings_not_found(self):
        with mock.patch.dict(os.environ, {'DIDYOUMEAN_SETTINGS_PATH': _settings("not_exists.yml")}):
            with self.assertRaises(EnvironmentError):
                settings_loader.load_settings()

    def test_user_settings_folder(self):
        # only a file can hold the user settings
        with mock.patch.dict(os.environ, {'DIDYOUMEAN_SETTINGS_PATH': _settings("")}):
            with self.assertRaises(EnvironmentError):
                settings_loader.load_settings()

    def test_user_settings_unset(self):
        with mock.patch.dict(os.environ, {'DIDYOUMEAN_SETTINGS_PATH': ''}):
            _settings_cfg, msg = settings_loader.load_settings()
        self.assertTrue(msg.startswith('load the default settings from'))

    def test_merge(self):
        with mock.patch.dict(os.environ, {'DIDYOUMEAN_SETTINGS_PATH': _settings("user_settings.yml")}):
            settings, msg = settings_loader.load_settings()
        self.assertTrue(msg.startswith('merge the default settings'))
        self.assertEqual(settings['spellcheck']['title'], "Try:")
        self.assertEqual(settings['spellcheck']['mode'], "sentence")
        self.assertEqual(settings['spellcheck']['keys_parameter'], "q")
        self.assertFalse(settings['spellcheck']['hide_on_result'])
        # not in the user settings
        self.assertFalse(settings['spellcheck']['always_show'])
        self.assertEqual(settings['spellcheck']['backend'], "search_api_solr_response")
        self.assertFalse(settings['general']['debug'])

    def test_areas_replaced(self):
        default_settings = {'areas': {'a.A': {'active': True, 'parameters': {'x': 1}}}}
        settings_loader.update_settings(default_settings, {'areas': {'b.B': {'active': True}}})
        self.assertEqual(default_settings['areas'], {'b.B': {'active': True}})

    @parameterized.expand(
        [
            ("invalid value", "invalid_settings.yml", "spellcheck.mode"),
            ("unknown option", "unknown_option_settings.yml", "spellcheck"),
        ]
    )
    def test_invalid_settings(self, _name, f_name, where):
        with mock.patch.dict(os.environ, {'DIDYOUMEAN_SETTINGS_PATH': _settings(f_name)}):
            settings, _msg = settings_loader.load_settings()
        with self.assertLogs("didyoumean", level="ERROR"):
            with self.assertRaises(DidYouMeanSettingsException) as e:
                apply_schema(settings, _settings(f_name))
        self.assertIn(f"`{where}`", str(e.exception))
        self.assertEqual(e.exception.filename, _settings(f_name))

    def test_init_settings(self):
        with mock.patch.dict(os.environ, {'DIDYOUMEAN_SETTINGS_PATH': _settings("user_settings.yml")}):
            didyoumean.init_settings()
        self.assertEqual(didyoumean.get_setting("spellcheck.mode"), "sentence")
        self.assertEqual(
            list(didyoumean.get_setting("areas")["didyoumean.areas.spellcheck.SpellCheckArea"]["parameters"]),
            ["mode"],
        )
