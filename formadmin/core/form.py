# -*- coding: utf-8 -*-
"""
form

Form surface holding widgets, validation and the ``update`` hook.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Mapping

from ..conf import FormAdminSettings
from ..widgets import BaseWidget, WidgetKind, WidgetRegistry, registry as widget_registry
from .binding.resolver import FieldTypeResolver
from .binding.session import BindingSession, FieldSelector
from .exceptions import ConfigurationError, ValidationError
from .hooks import HookRegistry

logger = logging.getLogger(__name__)

UPDATE = "update"


class Form:
    """Ordered collection of widgets that can be bound to models.

    ``update`` validates the current values and then fires the ``update``
    hook, which is where a binding session writes the values back into the
    models and saves them.
    """

    def __init__(
        self,
        name: str = "form",
        *,
        title: str | None = None,
        widgets: WidgetRegistry | None = None,
        resolver: FieldTypeResolver | None = None,
        settings: FormAdminSettings | None = None,
    ) -> None:
        self.name = name
        self.title = title
        self.model: Any = None
        self.elements: Dict[str, BaseWidget] = {}
        self.hooks = HookRegistry()
        self.session: BindingSession | None = None
        self._widgets = widgets or widget_registry
        self._resolver = resolver
        self._settings = settings

    def __repr__(self) -> str:
        return f"<Form {self.name} fields={list(self.elements)}>"

    # === Fields ===
    def add_field(
        self, kind: WidgetKind | str, name: str, caption: str | None = None
    ) -> BaseWidget:
        """Create a widget of ``kind`` named ``name`` and append it to the form."""
        if name in self.elements:
            raise ConfigurationError(f"Form {self.name} already has a field '{name}'")
        widget = self._widgets.create(kind, name, caption)
        self.elements[name] = widget
        return widget

    def get_field(self, name: str) -> BaseWidget:
        try:
            return self.elements[name]
        except KeyError as exc:
            raise ConfigurationError(f"Form {self.name} has no field '{name}'") from exc

    def get_field_value(self, name: str) -> Any:
        return self.get_field(name).get_value()

    def set_field_value(self, name: str, value: Any) -> None:
        self.get_field(name).set_value(value)

    def list_elements(self) -> list[str]:
        return list(self.elements)

    # === Model binding ===
    def set_model(self, model: Any, fields: FieldSelector = None) -> BindingSession:
        """Bind ``model`` to the form and import its ``fields``."""
        self.model = model
        return self.import_fields(model, fields)

    def import_fields(self, model: Any, fields: FieldSelector = None) -> BindingSession:
        """Import ``fields`` of ``model`` through the form's binding session."""
        if self.model is None:
            self.model = model
        if self.session is None:
            self.session = BindingSession(
                self, resolver=self._resolver, settings=self._settings
            )
        self.session.import_fields(model, fields)
        return self.session

    # === Submission ===
    def load(self, data: Mapping[str, Any]) -> None:
        """Apply submitted raw values; unknown and read-only fields are ignored."""
        errors: dict[str, str] = {}
        for name, raw in data.items():
            widget = self.elements.get(name)
            if widget is None or widget.readonly:
                continue
            try:
                widget.set_value(widget.to_python(raw))
            except ValueError as exc:
                errors[name] = str(exc)
        if errors:
            raise ValidationError(errors)

    def validate(self) -> None:
        errors: dict[str, str] = {}
        for name, widget in self.elements.items():
            message = widget.validate()
            if message:
                errors[name] = message
        if errors:
            raise ValidationError(errors)

    async def update(self, data: Mapping[str, Any] | None = None) -> list[Any]:
        """Apply ``data``, validate and fire the ``update`` hook."""
        if data is not None:
            self.load(data)
        self.validate()
        logger.debug("Form %s passed validation", self.name)
        return await self.hooks.fire_async(UPDATE, self)

    # === Presentation ===
    async def prefetch(self) -> None:
        for widget in self.elements.values():
            await widget.prefetch()

    def get_schema(self) -> Dict[str, Any]:
        """JSON Schema describing every field of the form."""
        schema: Dict[str, Any] = {
            "type": "object",
            "title": self.title or self.name,
            "properties": {
                name: widget.get_schema() for name, widget in self.elements.items()
            },
        }
        required = [name for name, widget in self.elements.items() if widget.validators]
        if required:
            schema["required"] = required
        return schema

    def get_values(self) -> Dict[str, Any]:
        return {
            name: widget.to_storage(widget.get_value())
            for name, widget in self.elements.items()
        }


__all__ = ["Form", "UPDATE"]

# The End
