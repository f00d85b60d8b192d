# -*- coding: utf-8 -*-
"""
__init__

Utilities for working with admin form widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# formadmin/widgets/__init__.py
from __future__ import annotations

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import WidgetRegistry, registry

__all__ = ["BaseWidget", "WidgetKind", "WidgetRegistry", "registry"]

# Import built-in widgets so they register themselves:
from .text import LineWidget, PasswordWidget, TextAreaWidget  # noqa: F401,E402
from .number import DecimalWidget, IntegerWidget, MoneyWidget, RealWidget  # noqa: F401,E402
from .datetime import DatePickerWidget, TimeWidget  # noqa: F401,E402
from .checkbox import CheckboxWidget  # noqa: F401,E402
from .readonly import ReadonlyWidget  # noqa: F401,E402
from .choices import DropdownWidget, RadioWidget, ValueListWidget  # noqa: F401,E402
from .upload import ImageWidget, UploadWidget  # noqa: F401,E402

# The End
