# -*- coding: utf-8 -*-
"""
validators

Value validators attached to widgets.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any


class NotNullValidator:
    """Reject empty values (``None``, blank strings and empty collections)."""

    def __init__(self, message: str) -> None:
        self.message = message

    def __call__(self, value: Any) -> str | None:
        if value is None:
            return self.message
        if isinstance(value, str) and not value.strip():
            return self.message
        if isinstance(value, (list, tuple, set, dict)) and not value:
            return self.message
        return None

    def __repr__(self) -> str:
        return f"NotNullValidator({self.message!r})"


__all__ = ["NotNullValidator"]

# The End
