# -*- coding: utf-8 -*-
"""
kinds

Widget kinds a form field can be rendered with.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from enum import Enum


class WidgetKind(str, Enum):
    """Editable input representations available to forms."""

    LINE = "line"
    TEXT = "text"
    INTEGER = "integer"
    DECIMAL = "decimal"
    MONEY = "money"
    REAL = "real"
    DATE_PICKER = "date_picker"
    TIME = "time"
    CHECKBOX = "checkbox"
    READONLY = "readonly"
    DROPDOWN = "dropdown"
    PASSWORD = "password"
    RADIO = "radio"
    IMAGE = "image"
    UPLOAD = "upload"

    @property
    def supports_empty_choice(self) -> bool:
        """Return ``True`` for value-list kinds that can offer a "no value" option."""
        return self in _VALUE_LIST_KINDS

    @classmethod
    def coerce(cls, value: "WidgetKind | str") -> "WidgetKind | None":
        """Return the kind named by ``value`` or ``None`` when it is unknown."""
        if isinstance(value, cls):
            return value
        normalized = str(value).strip().lower()
        for kind in cls:
            if normalized in (kind.value, kind.name.lower()):
                return kind
        return None


_VALUE_LIST_KINDS = frozenset({WidgetKind.DROPDOWN, WidgetKind.RADIO})


__all__ = ["WidgetKind"]

# The End
