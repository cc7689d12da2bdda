# SPDX-License-Identifier: AGPL-3.0-or-later
"""Areas are rendered above (or below) the result listing of a search view.

Entry points (hooks) define when an area runs:

- before the backend query: :py:obj:`Area.pre_query`
- after the backend query: :py:obj:`Area.render`

Here is an example of a very simple area that announces the number of
results:

.. code:: python

   from flask_babel import gettext as _
   from didyoumean.areas import Area, AreaInfo

   class MyArea(Area):

       id = "result_count"

       def __init__(self, area_cfg):
           super().__init__(area_cfg)
           self.info = AreaInfo(id=self.id, name=_("Count"), description=_("demo area"))

       def render(self, view, empty=False):
           return _("%(count)s results", count=view.result_count)

Areas are configured in the ``areas:`` section of the settings:

.. code:: yaml

   areas:
     mypackage.mymodule.MyArea:
       active: true

Implementation
==============

.. autoclass:: Area
   :members:

.. autoclass:: AreaInfo
   :members:

.. autoclass:: AreaStorage
   :members:

.. autoclass:: AreaCfg
   :members:
"""

from __future__ import annotations

__all__ = ["AreaInfo", "Area", "AreaStorage", "AreaCfg"]


import didyoumean
from ._core import AreaInfo, Area, AreaStorage, AreaCfg

STORAGE: AreaStorage = AreaStorage()


def initialize(app):
    STORAGE.load_settings(didyoumean.get_setting("areas"))
    STORAGE.init(app)
