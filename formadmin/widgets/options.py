# -*- coding: utf-8 -*-
"""
options

Normalization of selectable value lists.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from enum import Enum, EnumMeta
from typing import Any, Iterable, cast

from ..schema.descriptors import Choice


def _humanize(name: str) -> str:
    return name.replace("_", " ").title()


def _label(item: Any) -> str:
    if isinstance(item, Enum):
        return str(getattr(item, "label", None) or getattr(item, "title", None) or _humanize(item.name))
    return str(item)


def _const(item: Any) -> Any:
    return item.value if isinstance(item, Enum) else item


def normalize_choices(choices: Any) -> list[Choice]:
    """
    Supported forms:
      - dict {value: label}
      - iterable of pairs (value, label)
      - iterable of ``Choice`` objects or {"value"/"const", "label"/"title"} dicts
      - iterable of plain values (the value doubles as its label)
      - Enum class (EnumMeta) or iterable of Enum members
    """
    if not choices:
        return []

    if isinstance(choices, EnumMeta):
        return [Choice(const=m.value, title=_label(m)) for m in cast(Iterable[Enum], choices)]

    if isinstance(choices, dict):
        return [Choice(const=_const(k), title=_label(v)) for k, v in choices.items()]

    if isinstance(choices, (str, bytes)) or not isinstance(choices, Iterable):
        return [Choice(const=choices, title=str(choices))]

    out: list[Choice] = []
    for item in choices:
        if isinstance(item, Choice):
            out.append(item)
        elif isinstance(item, (tuple, list)) and len(item) == 2:
            value, label = item
            out.append(Choice(const=_const(value), title=_label(label)))
        elif isinstance(item, dict) and ("value" in item or "const" in item):
            value = item.get("value", item.get("const"))
            label = item.get("label", item.get("title", value))
            out.append(Choice(const=_const(value), title=_label(label)))
        else:
            out.append(Choice(const=_const(item), title=_label(item)))
    return out


__all__ = ["normalize_choices"]

# The End
