# -*- coding: utf-8 -*-
"""
checkbox

Checkbox widget rendered as a Bootstrap switch.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Dict

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import registry

_TRUE = {"1", "true", "yes", "on", "y"}
_FALSE = {"", "0", "false", "no", "off", "n"}


@registry.register(WidgetKind.CHECKBOX)
class CheckboxWidget(BaseWidget):
    """Render boolean values as a checkbox or Bootstrap switch."""

    def get_schema(self) -> Dict[str, Any]:
        schema = {
            "type": "boolean",
            "format": "checkbox",
            "title": self.get_title(),
            "options": {
                "containerAttributes": {
                    "class": "form-check form-switch"
                },
                "inputAttributes": {
                    "class": "form-check-input",
                    "type": "checkbox",
                    "role": "switch"
                }
            }
        }
        return self.merge_common(schema)

    def to_python(self, value: Any) -> Any:
        if value is None or isinstance(value, bool):
            return value
        if isinstance(value, (int, float)):
            return bool(value)
        normalized = str(value).strip().lower()
        if normalized in _TRUE:
            return True
        if normalized in _FALSE:
            return False
        raise ValueError(f"'{value}' is not a boolean")

# The End
