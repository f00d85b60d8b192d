# -*- coding: utf-8 -*-
"""
readonly

Display-only widget.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import registry


@registry.register(WidgetKind.READONLY)
class ReadonlyWidget(BaseWidget):
    """Show the value without accepting edits."""

    readonly = True

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_common({"type": "string", "title": self.get_title()})

    def to_python(self, value: Any) -> Any:
        # Submitted values are ignored; the seeded value is kept.
        return self.value

    def to_storage(self, value: Any) -> Any:
        if value is None or isinstance(value, (str, int, float, bool)):
            return value
        return str(value)

# The End
