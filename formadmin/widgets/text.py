# -*- coding: utf-8 -*-
"""
text

Single-line, multi-line and password inputs.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import registry


@registry.register(WidgetKind.LINE)
class LineWidget(BaseWidget):
    """Text input widget."""

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_common({"type": "string", "title": self.get_title()})

    def to_python(self, value: Any) -> Any:
        if value is None:
            return None
        return str(value)


@registry.register(WidgetKind.TEXT)
class TextAreaWidget(LineWidget):
    """Multi-line text input."""

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_common(
            {"type": "string", "title": self.get_title(), "format": "textarea"}
        )


@registry.register(WidgetKind.PASSWORD)
class PasswordWidget(LineWidget):
    """Masked input; the stored secret is never echoed back to the client."""

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_common(
            {"type": "string", "title": self.get_title(), "format": "password"}
        )

    def to_python(self, value: Any) -> Any:
        # A blank submission keeps the stored secret.
        if value is None or (isinstance(value, str) and not value):
            return self.value
        return str(value)

    def to_storage(self, value: Any) -> Any:
        return ""

# The End
