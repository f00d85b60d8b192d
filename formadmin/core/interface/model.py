# -*- coding: utf-8 -*-
"""
model

Abstract model surface consumed by the form binding engine.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Hashable

from ...schema.descriptors import Choice, FieldDescriptor, ModelDescriptor
from ..hooks import HookRegistry

AFTER_LOAD = "after_load"


@dataclass(frozen=True)
class Reference:
    """Companion reference of a has-one field.

    ``model`` is the source offering the linked records; anything exposing an
    awaitable ``fetch_choices()`` qualifies.
    """

    field: str
    model: Any


class ModelSurface(ABC):
    """Persistence-layer record with field metadata, get/set and load/save.

    Implementations fire the ``after_load`` hook whenever a record finishes
    loading so bound forms can re-seed their fields.
    """

    def __init__(self) -> None:
        self.hooks = HookRegistry()

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.name}>"

    # === Metadata ===
    @property
    @abstractmethod
    def descriptor(self) -> ModelDescriptor:
        """Return the model metadata."""

    @property
    def name(self) -> str:
        return self.descriptor.dotted

    @property
    def identity(self) -> Hashable:
        """Key under which a commit persists this record exactly once."""
        return id(self)

    @property
    def only_fields(self) -> list[str] | None:
        return self.descriptor.only_fields

    def has_field(self, name: str) -> FieldDescriptor | None:
        return self.descriptor.field(name)

    def get_reference(self, name: str) -> Reference | None:
        """Return the companion reference declared for field ``name``."""
        return None

    def field_names(self) -> list[str]:
        return [f.name for f in self.descriptor.fields]

    def editable_field_names(self) -> list[str]:
        return [f.name for f in self.descriptor.fields if f.editable]

    # === Values ===
    @abstractmethod
    def get_field_value(self, name: str) -> Any:
        """Return the current value of field ``name``."""

    @abstractmethod
    def set_field_value(self, name: str, value: Any) -> None:
        """Assign ``value`` to field ``name`` in memory."""

    # === Persistence ===
    @abstractmethod
    async def load(self, pk: Any) -> "ModelSurface":
        """Load the record identified by ``pk`` and fire ``after_load``."""

    @abstractmethod
    async def save(self) -> "ModelSurface":
        """Persist the record, raising on failure."""

    def after_load(self) -> None:
        self.hooks.fire(AFTER_LOAD, self)

    async def fetch_choices(self) -> list[Choice]:
        """Return the records of this model as selectable choices."""
        return []


__all__ = ["AFTER_LOAD", "ModelSurface", "Reference"]

# The End
