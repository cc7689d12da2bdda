# SPDX-License-Identifier: AGPL-3.0-or-later
# pylint: disable=too-few-public-methods,missing-module-docstring
from __future__ import annotations

__all__ = ["AreaInfo", "Area", "AreaCfg", "AreaStorage"]

import abc
import importlib
import logging
import re

import typing as t
from collections.abc import Iterator
from dataclasses import dataclass, field

import msgspec

from didyoumean.exceptions import DidYouMeanAreaException

if t.TYPE_CHECKING:
    import flask
    from didyoumean.view import SearchView

log: logging.Logger = logging.getLogger("didyoumean.areas")

ID_REGXP = re.compile("[a-z][a-z0-9_]+")


@dataclass
class AreaInfo:
    """Describes an *area* to the configuration UI of the host application.
    Texts are written in English and translated with
    :py:obj:`flask_babel.gettext`."""

    id: str
    name: str
    description: str

    options: dict[str, t.Any] = field(default_factory=dict)
    """The effective options of the *area*."""


class AreaCfg(msgspec.Struct, kw_only=True, forbid_unknown_fields=True):
    """Settings of one area in the ``areas:`` section.

    .. code:: yaml

       areas:
         didyoumean.areas.spellcheck.SpellCheckArea:
           active: true
           parameters:
             title: "Try:"
    """

    active: bool = False
    parameters: dict[str, t.Any] = {}
    """Area specific options, unknown names are ignored by the area."""


class Area(abc.ABC):
    """Base class of the areas rendered above (or below) the result listing
    of a search view.  A subclass sets :py:obj:`Area.id` and implements
    :py:obj:`Area.render`."""

    id: str = ""
    """Lowercase ASCII name of the area, the key of its output in
    :py:obj:`AreaStorage.render`."""

    info: AreaInfo

    def __init__(self, area_cfg: AreaCfg) -> None:
        if not ID_REGXP.fullmatch(self.id or ""):
            raise ValueError(f"area ID {self.id!r} contains invalid character (use lowercase ASCII)")

        self.active: bool = area_cfg.active
        self.parameters: dict[str, t.Any] = dict(area_cfg.parameters)
        self.fqn: str = self.__class__.__module__
        self.log: logging.Logger = logging.getLogger(f"{self.fqn.rpartition('.')[0] or self.fqn}.{self.id}")

    def init(self, app: flask.Flask) -> bool:  # pylint: disable=unused-argument
        """Called once when the host application is set up; an area that
        returns ``False`` is dropped from the storage."""
        return True

    def pre_query(self, view: SearchView) -> None:  # pylint: disable=unused-argument
        """Runs before the backend query, an area can set query options
        (:py:obj:`SearchView.set_option`)."""
        return

    @abc.abstractmethod
    def render(self, view: SearchView, empty: bool = False) -> t.Any:
        """Runs after the backend query, returns the output of the area or
        ``None``.  ``empty`` is true when the view has no results."""


def load_area_class(fqn: str) -> type[Area]:
    mod_name, _, cls_name = fqn.rpartition('.')
    cls = None
    try:
        cls = getattr(importlib.import_module(mod_name), cls_name, None)
    except ImportError as exc:
        log.exception(exc)
    if not (isinstance(cls, type) and issubclass(cls, Area)):
        raise DidYouMeanAreaException(fqn, "is not implemented")
    return cls


class AreaStorage:
    """The registered *areas*, in the order of registration."""

    def __init__(self):
        self.area_list: list[Area] = []

    def __iter__(self) -> Iterator[Area]:
        return iter(self.area_list)

    def __len__(self):
        return len(self.area_list)

    @property
    def info(self) -> list[AreaInfo]:
        return [a.info for a in self.area_list]

    def load_settings(self, cfg: dict[str, t.Any]):
        """Instantiate and register the active areas of the ``areas:``
        section, ``cfg`` maps the class name to the :py:obj:`AreaCfg` values."""

        for fqn, area_settings in cfg.items():
            cls = load_area_class(fqn)
            try:
                area_cfg = msgspec.convert(area_settings or {}, type=AreaCfg)
            except msgspec.ValidationError as e:
                raise DidYouMeanAreaException(fqn, str(e)) from e

            area = cls(area_cfg)
            if not area.active:
                log.debug("area %s is not active", area.id)
                continue
            self.register(area)

    def register(self, area: Area):
        """Add ``area`` to the storage, a :py:obj:`KeyError` is raised when an
        area with the same ID is already registered."""

        if any(a.id == area.id for a in self.area_list):
            msg = f"name collision '{area.id}'"
            area.log.critical(msg)
            raise KeyError(msg)

        self.area_list.append(area)
        area.log.debug("area has been loaded")

    def init(self, app: flask.Flask) -> None:
        self.area_list = [a for a in self.area_list if a.init(app)]

    def pre_query(self, view: SearchView) -> None:
        for area in self.area_list:
            try:
                area.pre_query(view)
            except Exception:  # pylint: disable=broad-except
                area.log.exception("Exception while calling pre_query")

    def render(self, view: SearchView, empty: bool | None = None) -> dict[str, t.Any]:
        """Returns area ID --> output of the areas that rendered something.
        ``empty`` defaults to :py:obj:`SearchView.empty`."""

        if empty is None:
            empty = view.empty

        output: dict[str, t.Any] = {}
        for area in self.area_list:
            try:
                ret = area.render(view, empty=empty)
            except Exception:  # pylint: disable=broad-except
                area.log.exception("Exception while calling render")
                continue
            if ret is not None:
                output[area.id] = ret
        return output
