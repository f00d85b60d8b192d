# -*- coding: utf-8 -*-
"""
memory

In-process model surface backed by a dict record store.

Useful for forms over data that does not live in a database (settings
screens, wizards) and for exercising forms without an ORM.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, Iterator, Mapping

from ..core.exceptions import NotFoundError
from ..core.interface.model import ModelSurface, Reference
from ..schema.descriptors import Choice, FieldDescriptor, ModelDescriptor

logger = logging.getLogger(__name__)


class RecordStore:
    """Table of records keyed by an auto-incremented primary key."""

    def __init__(self) -> None:
        self._rows: dict[int, dict[str, Any]] = {}
        self._next_pk = 1

    def __len__(self) -> int:
        return len(self._rows)

    def insert(self, data: Mapping[str, Any]) -> int:
        pk = self._next_pk
        self._next_pk += 1
        self._rows[pk] = dict(data)
        return pk

    def update(self, pk: int, data: Mapping[str, Any]) -> None:
        if pk not in self._rows:
            raise NotFoundError(f"Record {pk} does not exist")
        self._rows[pk] = dict(data)

    def get(self, pk: Any) -> dict[str, Any] | None:
        row = self._rows.get(pk)
        return dict(row) if row is not None else None

    def items(self) -> Iterator[tuple[int, dict[str, Any]]]:
        for pk, row in self._rows.items():
            yield pk, dict(row)


class RecordModel(ModelSurface):
    """Model surface keeping field values in memory and rows in a ``RecordStore``.

    ``references`` maps a field name to the model whose records the field
    links to; such fields are treated as has-one references.
    """

    def __init__(
        self,
        descriptor: ModelDescriptor,
        store: RecordStore | None = None,
        *,
        references: Mapping[str, Any] | None = None,
        title_field: str | None = None,
        **values: Any,
    ) -> None:
        super().__init__()
        self._descriptor = descriptor
        self.store = store if store is not None else RecordStore()
        self._references = dict(references or {})
        self.title_field = title_field
        self.pk: int | None = None
        self._data: dict[str, Any] = {
            f.name: f.default for f in descriptor.fields
        }
        for name, value in values.items():
            self.set_field_value(name, value)

    @classmethod
    def from_fields(
        cls,
        model_name: str,
        fields: Iterable[FieldDescriptor],
        *,
        app_label: str = "memory",
        only_fields: list[str] | None = None,
        **kwargs: Any,
    ) -> "RecordModel":
        """Build a record model and its descriptor in one call."""
        descriptor = ModelDescriptor(
            app_label=app_label,
            model_name=model_name.lower(),
            dotted=f"{app_label}.{model_name}",
            fields=list(fields),
            only_fields=only_fields,
        )
        return cls(descriptor, **kwargs)

    @property
    def descriptor(self) -> ModelDescriptor:
        return self._descriptor

    def get_reference(self, name: str) -> Reference | None:
        target = self._references.get(name)
        if target is None:
            return None
        return Reference(field=name, model=target)

    def get_field_value(self, name: str) -> Any:
        if self.has_field(name) is None:
            raise KeyError(f"{self.name} has no field '{name}'")
        return self._data.get(name)

    def set_field_value(self, name: str, value: Any) -> None:
        if self.has_field(name) is None:
            raise KeyError(f"{self.name} has no field '{name}'")
        self._data[name] = value

    def as_dict(self) -> dict[str, Any]:
        return dict(self._data)

    async def load(self, pk: Any) -> "RecordModel":
        row = self.store.get(pk)
        if row is None:
            raise NotFoundError(f"{self.name} record {pk} does not exist")
        self.pk = pk
        self._data = {f.name: row.get(f.name, f.default) for f in self.descriptor.fields}
        self.after_load()
        return self

    async def save(self) -> "RecordModel":
        if self.pk is None:
            self.pk = self.store.insert(self._data)
            logger.debug("Inserted %s record %s", self.name, self.pk)
        else:
            self.store.update(self.pk, self._data)
            logger.debug("Updated %s record %s", self.name, self.pk)
        return self

    async def fetch_choices(self) -> list[Choice]:
        choices: list[Choice] = []
        for pk, row in self.store.items():
            title = row.get(self.title_field) if self.title_field else None
            choices.append(Choice(const=pk, title=str(title if title is not None else pk)))
        return choices


__all__ = ["RecordModel", "RecordStore"]

# The End
