# -*- coding: utf-8 -*-
"""
base

Base widget class.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# formadmin/widgets/base.py
from __future__ import annotations
from typing import Any, Callable, Dict
from abc import ABC, abstractmethod

from ..schema.descriptors import Choice
from .kinds import WidgetKind
from .options import normalize_choices
from .validators import NotNullValidator

Validator = Callable[[Any], "str | None"]


class BaseWidget(ABC):
    """
    Base Widget Class

    A widget holds the current value of one form field together with the
    presentation hints the binding engine attaches to it, and describes
    itself as a JSON Schema fragment.
    """
    kind: WidgetKind = WidgetKind.LINE
    readonly: bool = False

    def __init__(self, name: str, caption: str | None = None) -> None:
        self.name = name
        self.caption = caption
        self.value: Any = None
        self.attributes: dict[str, Any] = {}
        self.hint: str | None = None
        self.empty_choice: str | None = None
        self.value_list: list[Choice] | None = None
        self.reference_model: Any = None
        self.validators: list[Validator] = []

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}={self.value!r}>"

    # === Widget contract ===
    def set_value(self, value: Any) -> "BaseWidget":
        self.value = value
        return self

    def get_value(self) -> Any:
        return self.value

    def set_value_list(self, values: Any) -> "BaseWidget":
        """Seed the selectable values from a list, mapping or Enum class."""
        self.value_list = normalize_choices(values)
        return self

    def set_attribute(self, key: str, value: Any) -> "BaseWidget":
        self.attributes[key] = value
        return self

    def set_hint(self, text: str) -> "BaseWidget":
        self.hint = text
        return self

    def set_empty_choice(self, label: str) -> "BaseWidget":
        """Offer a "no value" option labelled ``label``."""
        if not self.kind.supports_empty_choice:
            raise TypeError(f"{type(self).__name__} does not offer an empty choice")
        self.empty_choice = label
        return self

    def attach_not_null_validator(self, message: str) -> "BaseWidget":
        self.validators.append(NotNullValidator(message))
        return self

    def bind_reference_model(self, model: Any) -> "BaseWidget":
        """Let the widget offer the records of ``model`` as its choices."""
        self.reference_model = model
        return self

    async def prefetch(self) -> None:
        """Stub for asynchronous data preparation before schema generation."""
        return None

    # === Validation ===
    def validate(self) -> str | None:
        """Return the first validation message for the current value, if any."""
        for validator in self.validators:
            message = validator(self.value)
            if message:
                return message
        return None

    # === Schema Generation ===
    def get_title(self) -> str:
        if self.caption:
            return self.caption
        name = self.name.replace("_", " ")
        return name[:1].upper() + name[1:]

    @abstractmethod
    def get_schema(self) -> Dict[str, Any]:
        """JSON Schema fragment for a specific field."""
        raise NotImplementedError

    def merge_common(self, schema: Dict[str, Any]) -> Dict[str, Any]:
        """Insert hint, input attributes and the ``readonly`` flag into the schema."""
        schema.setdefault("title", self.get_title())
        if self.hint:
            schema["description"] = self.hint
        if self.attributes:
            options = schema.setdefault("options", {})
            options.setdefault("inputAttributes", {}).update(self.attributes)
        if self.readonly:
            schema["readonly"] = True
        return schema

    # === Value Converters ===
    def to_python(self, value: Any) -> Any:
        """Convert a submitted raw value into the value stored on the widget."""
        return value

    def to_storage(self, value: Any) -> Any:
        return value

# The End
