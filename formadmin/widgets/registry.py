# -*- coding: utf-8 -*-
"""
registry

Widget registry.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Dict, Iterator, Type

from ..core.exceptions import WidgetNotRegistered
from .base import BaseWidget
from .kinds import WidgetKind


class WidgetRegistry:
    def __init__(self) -> None:
        self._by_kind: Dict[WidgetKind, Type[BaseWidget]] = {}

    def register(self, kind: WidgetKind | str):
        """Decorator to register a widget class for a widget kind."""
        resolved = self._resolve(kind)

        def _decorator(cls: Type[BaseWidget]) -> Type[BaseWidget]:
            cls.kind = resolved
            self._by_kind[resolved] = cls
            return cls
        return _decorator

    def get(self, kind: WidgetKind | str) -> Type[BaseWidget] | None:
        resolved = WidgetKind.coerce(kind)
        if resolved is None:
            return None
        return self._by_kind.get(resolved)

    def create(
        self, kind: WidgetKind | str, name: str, caption: str | None = None
    ) -> BaseWidget:
        """Instantiate the widget registered for ``kind``."""
        cls = self.get(kind)
        if cls is None:
            raise WidgetNotRegistered(f"No widget registered for kind '{kind}'")
        return cls(name, caption)

    def kinds(self) -> Iterator[WidgetKind]:
        return iter(self._by_kind)

    @staticmethod
    def _resolve(kind: WidgetKind | str) -> WidgetKind:
        resolved = WidgetKind.coerce(kind)
        if resolved is None:
            raise WidgetNotRegistered(f"Unknown widget kind '{kind}'")
        return resolved

registry = WidgetRegistry()

# The End
