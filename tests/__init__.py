# SPDX-License-Identifier: AGPL-3.0-or-later
# pylint: disable=missing-module-docstring,disable=missing-class-docstring,invalid-name

import pathlib
import os
import aiounittest


os.environ.pop('DIDYOUMEAN_SETTINGS_PATH', None)


class DYMTestCase(aiounittest.AsyncTestCase):
    """Base test case."""

    SETTINGS_FOLDER = pathlib.Path(__file__).parent / "unit" / "settings"
    TEST_SETTINGS = "test_settings.yml"

    def setUp(self):
        self.init_test_settings()

    def setattr4test(self, obj, attr, value):
        """setattr(obj, attr, value) but reset to the previous value in the
        cleanup."""
        previous_value = getattr(obj, attr)

        def cleanup_patch():
            setattr(obj, attr, previous_value)

        self.addCleanup(cleanup_patch)
        setattr(obj, attr, value)

    def init_test_settings(self):
        """Sets ``DIDYOUMEAN_SETTINGS_PATH`` environment variable, initialize
        the global ``settings`` variable and the ``logger`` from a test config
        in :origin:`tests/unit/settings/` and set up a flask application with
        babel to render the (translated) labels.
        """

        os.environ['DIDYOUMEAN_SETTINGS_PATH'] = str(self.SETTINGS_FOLDER / self.TEST_SETTINGS)

        # pylint: disable=import-outside-toplevel
        import flask
        import flask_babel
        import didyoumean

        didyoumean.init_settings()

        # pylint: disable=attribute-defined-outside-init
        self.app = flask.Flask("didyoumean.tests")
        self.app.config["TESTING"] = True
        flask_babel.Babel(self.app)
