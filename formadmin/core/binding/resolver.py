# -*- coding: utf-8 -*-
"""
resolver

Map model field descriptors to widget kinds.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Mapping

from ...schema.descriptors import FieldDescriptor
from ...widgets.kinds import WidgetKind

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..interface.model import ModelSurface

logger = logging.getLogger(__name__)

FORM_CONTEXT = "form"

TYPE_ASSOCIATIONS: Mapping[str, WidgetKind] = {
    "string": WidgetKind.LINE,
    "text": WidgetKind.TEXT,
    "integer": WidgetKind.INTEGER,
    "decimal": WidgetKind.DECIMAL,
    "money": WidgetKind.MONEY,
    "real": WidgetKind.REAL,
    "date": WidgetKind.DATE_PICKER,
    "datetime": WidgetKind.DATE_PICKER,
    "time": WidgetKind.TIME,
    "boolean": WidgetKind.CHECKBOX,
    "reference": WidgetKind.READONLY,
    "reference_id": WidgetKind.DROPDOWN,
    "password": WidgetKind.PASSWORD,
    "enum": WidgetKind.DROPDOWN,
    "choice": WidgetKind.RADIO,
    "readonly": WidgetKind.READONLY,
    "image": WidgetKind.IMAGE,
    "file": WidgetKind.UPLOAD,
}


class FieldTypeResolver:
    """Pick the widget kind a model field is edited with.

    Priority, lowest first: the type table, a companion has-one reference,
    an enumerated value list, and finally an explicit ``display`` override
    declared on the field. Subclass and extend :meth:`resolve`, or pass
    ``type_associations``, to handle custom field types.
    """

    default_kind = WidgetKind.LINE

    def __init__(self, type_associations: Mapping[str, WidgetKind | str] | None = None) -> None:
        self.type_associations: dict[str, WidgetKind] = dict(TYPE_ASSOCIATIONS)
        for field_type, kind in (type_associations or {}).items():
            resolved = WidgetKind.coerce(kind)
            if resolved is None:
                raise ValueError(f"Unknown widget kind '{kind}' for field type '{field_type}'")
            self.type_associations[field_type] = resolved

    def resolve(
        self, field: FieldDescriptor, model: "ModelSurface | None" = None
    ) -> WidgetKind:
        kind = self.type_associations.get((field.kind or "").lower(), self.default_kind)

        if model is not None and model.get_reference(field.name) is not None:
            kind = WidgetKind.DROPDOWN

        if field.enum is not None:
            kind = WidgetKind.DROPDOWN

        override = self._display_override(field)
        if override is not None:
            kind = override
        return kind

    def _display_override(self, field: FieldDescriptor) -> WidgetKind | None:
        display = field.display
        if isinstance(display, Mapping):
            display = display.get(FORM_CONTEXT)
        if not display:
            return None
        kind = WidgetKind.coerce(display)
        if kind is None:
            logger.warning(
                "Ignoring unknown display override %r on field %s", display, field.name
            )
        return kind


resolver = FieldTypeResolver()

__all__ = ["FieldTypeResolver", "TYPE_ASSOCIATIONS", "resolver"]

# The End
