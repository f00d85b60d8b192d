# -*- coding: utf-8 -*-
"""
number

Widgets for numeric fields.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from decimal import Decimal, InvalidOperation
from typing import Any, Dict

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import registry


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


@registry.register(WidgetKind.INTEGER)
class IntegerWidget(BaseWidget):
    """Whole numbers."""

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_common({"type": "integer", "title": self.get_title()})

    def to_python(self, value: Any) -> Any:
        if _blank(value):
            return None
        if isinstance(value, bool):
            raise ValueError(f"'{value}' is not a whole number")
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"'{value}' is not a whole number") from exc
        if number != number.to_integral_value():
            raise ValueError(f"'{value}' is not a whole number")
        return int(number)


@registry.register(WidgetKind.DECIMAL)
class DecimalWidget(BaseWidget):
    """Exact decimal numbers."""

    places: int | None = None

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {"type": "number", "title": self.get_title()}
        if self.places is not None:
            schema["multipleOf"] = float(Decimal(1).scaleb(-self.places))
        return self.merge_common(schema)

    def to_python(self, value: Any) -> Any:
        if _blank(value):
            return None
        try:
            number = Decimal(str(value).strip())
        except InvalidOperation as exc:
            raise ValueError(f"'{value}' is not a number") from exc
        if self.places is not None:
            number = number.quantize(Decimal(1).scaleb(-self.places))
        return number


@registry.register(WidgetKind.MONEY)
class MoneyWidget(DecimalWidget):
    """Currency amounts kept with two decimal places."""

    places = 2


@registry.register(WidgetKind.REAL)
class RealWidget(BaseWidget):
    """Floating point numbers."""

    def get_schema(self) -> Dict[str, Any]:
        return self.merge_common({"type": "number", "title": self.get_title()})

    def to_python(self, value: Any) -> Any:
        if _blank(value):
            return None
        try:
            return float(value)
        except (TypeError, ValueError) as exc:
            raise ValueError(f"'{value}' is not a number") from exc

# The End
