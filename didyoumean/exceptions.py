# SPDX-License-Identifier: AGPL-3.0-or-later
"""Exception types raised by didyoumean modules."""

import typing as t


class DidYouMeanException(Exception):
    """Base didyoumean exception."""


@t.final
class DidYouMeanSettingsException(DidYouMeanException):
    """Error while loading the settings"""

    def __init__(self, message: str | Exception, filename: str | None):
        super().__init__(message)
        self.message = message
        self.filename = filename


class DidYouMeanAreaException(DidYouMeanException):
    """Raised when an area can't be loaded or registered"""

    def __init__(self, area_id: str, message: str):
        super().__init__(f"area {area_id}: {message}")
        self.message: str = message
        self.area_id: str = area_id
