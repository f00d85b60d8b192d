# -*- coding: utf-8 -*-
"""
datetime

Date, date-time and time-of-day pickers.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import date, datetime, time
from typing import Any, Dict

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import registry


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@registry.register(WidgetKind.DATE_PICKER)
class DatePickerWidget(BaseWidget):
    """Picker for dates and date-times in ISO 8601 notation."""

    def get_schema(self) -> Dict[str, Any]:
        fmt = "datetime-local" if isinstance(self.value, datetime) else "date"
        return self.merge_common(
            {"type": "string", "title": self.get_title(), "format": fmt}
        )

    def to_python(self, value: Any) -> Any:
        if _blank(value):
            return None
        if isinstance(value, (date, datetime)):
            return value
        raw = str(value).strip()
        try:
            if "T" in raw or " " in raw:
                return datetime.fromisoformat(raw)
            return date.fromisoformat(raw)
        except ValueError as exc:
            raise ValueError(f"'{value}' is not a valid date") from exc

    def to_storage(self, value: Any) -> Any:
        if isinstance(value, (date, datetime)):
            return value.isoformat()
        return value


@registry.register(WidgetKind.TIME)
class TimeWidget(BaseWidget):
    """Time-of-day picker."""

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_common(
            {"type": "string", "title": self.get_title(), "format": "time"}
        )

    def to_python(self, value: Any) -> Any:
        if _blank(value):
            return None
        if isinstance(value, time):
            return value
        try:
            return time.fromisoformat(str(value).strip())
        except ValueError as exc:
            raise ValueError(f"'{value}' is not a valid time") from exc

    def to_storage(self, value: Any) -> Any:
        if isinstance(value, time):
            return value.isoformat()
        return value

# The End
