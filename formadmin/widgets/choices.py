# -*- coding: utf-8 -*-
"""
choices

Value-list widgets: dropdowns and radio groups.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com

Both widgets take their options from ``set_value_list`` or, when a reference
model is bound, from the model's ``fetch_choices`` coroutine during
``prefetch``. A non-mandatory field gets an empty choice whose value is
``None``.
"""

from __future__ import annotations

import logging
from typing import Any, Dict

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import registry

logger = logging.getLogger(__name__)


class ValueListWidget(BaseWidget):
    """Common behaviour of widgets offering a fixed set of values."""

    schema_format = "select"

    async def prefetch(self) -> None:
        """Load options from the bound reference model."""
        fetch = getattr(self.reference_model, "fetch_choices", None)
        if fetch is None:
            return None
        self.set_value_list(await fetch())
        logger.debug(
            "Loaded %d choices for %s from %r",
            len(self.value_list or []),
            self.name,
            self.reference_model,
        )
        return None

    def get_choices(self) -> tuple[list[Any], list[str]]:
        """Return ``(values, titles)`` including the empty choice when offered."""
        values: list[Any] = []
        titles: list[str] = []
        if self.empty_choice is not None:
            values.append(None)
            titles.append(self.empty_choice)
        for choice in self.value_list or []:
            values.append(choice.const)
            titles.append(choice.title)
        return values, titles

    def get_schema(self) -> Dict[str, Any]:
        values, titles = self.get_choices()
        consts = [v for v in values if v is not None]
        if consts and all(isinstance(v, int) and not isinstance(v, bool) for v in consts):
            typ: Any = "integer"
        else:
            typ = "string"
        if self.empty_choice is not None:
            typ = [typ, "null"]
        schema: Dict[str, Any] = {
            "type": typ,
            "title": self.get_title(),
            "format": self.schema_format,
            "enum": values,
            "options": {"enum_titles": titles},
        }
        return self.merge_common(schema)

    def to_python(self, value: Any) -> Any:
        raw = getattr(value, "value", value)  # Enum member: use its value
        if raw is None or (isinstance(raw, str) and not raw.strip()):
            return None
        if not self.value_list:
            return raw
        for choice in self.value_list:
            if choice.const == raw or str(choice.const) == str(raw):
                return choice.const
        raise ValueError(f"'{value}' is not one of the available choices")


@registry.register(WidgetKind.DROPDOWN)
class DropdownWidget(ValueListWidget):
    """Single-value select box."""


@registry.register(WidgetKind.RADIO)
class RadioWidget(ValueListWidget):
    """Radio buttons for fields with a short list of choices."""

    schema_format = "radio"

# The End
