# -*- coding: utf-8 -*-
"""
descriptors

Model and field descriptors read by the form binding engine.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations
from typing import Any, Literal, Optional
from pydantic import BaseModel, Field as PField

# Semantic field types a model can declare
FieldKind = Literal[
    "string", "text", "integer", "decimal", "money", "real",
    "date", "datetime", "time", "boolean", "reference", "reference_id",
    "password", "enum", "choice", "readonly", "image", "file",
]


class Choice(BaseModel):
    """Single selectable option for a field with discrete choices."""
    const: Any
    title: str


class Relation(BaseModel):
    """Information about the model a foreign-key field points to."""
    kind: Literal["fk"] = "fk"
    target: str  # dotted path "app.Model"
    to_field: Optional[str] = None  # usually the target model's PK


class FieldDescriptor(BaseModel):
    """Metadata of one model field as seen by the form layer.

    ``display`` is either a widget kind or a mapping of rendering context to
    widget kind (``{"form": "radio", "grid": "line"}``). ``mandatory`` is
    ``True`` or the message reported when the value is left empty.
    """
    name: str
    kind: str = "string"
    caption: str | None = None
    editable: bool = True
    mandatory: bool | str = False
    placeholder: str | None = None
    hint: str | None = None
    display: str | dict[str, str] | None = None
    enum: list[Any] | dict[Any, str] | None = None
    relation: Relation | None = None
    default: Any | None = None

    @property
    def is_mandatory(self) -> bool:
        return bool(self.mandatory)

    @property
    def mandatory_message(self) -> str | None:
        """Return the configured not-null message, if the field carries one."""
        if isinstance(self.mandatory, str) and self.mandatory:
            return self.mandatory
        return None


class ModelDescriptor(BaseModel):
    """Metadata describing a model for the form layer."""
    app_label: str
    model_name: str
    dotted: str
    pk_attr: str = "id"

    fields: list[FieldDescriptor] = PField(default_factory=list)
    only_fields: list[str] | None = None

    def field(self, name: str) -> FieldDescriptor | None:
        for f in self.fields:
            if f.name == name:
                return f
        return None

    @property
    def fields_map(self) -> dict[str, FieldDescriptor]:
        """Return a mapping of field names to descriptors."""
        return {f.name: f for f in self.fields}

# The End
