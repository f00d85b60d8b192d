# -*- coding: utf-8 -*-
"""
tortoise

Tortoise ORM adapter utilities.

This module defines :class:`TortoiseAdapter`, which introspects Tortoise
models into form descriptors, and :class:`TortoiseModel`, the model surface
wrapping one Tortoise record for the binding engine.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from typing import Any, Hashable, Iterable, Mapping

from tortoise import fields
from tortoise.exceptions import DoesNotExist as TortoiseDoesNotExist
from tortoise.models import Model as TortoiseModelBase

from ....adapters.base import BaseAdapter
from ....adapters.registry import registry
from ....core.exceptions import NotFoundError
from ....core.interface.model import ModelSurface, Reference
from ....schema.descriptors import Choice, FieldDescriptor, ModelDescriptor, Relation

logger = logging.getLogger(__name__)

Model = TortoiseModelBase

_RELATION_TYPES = (
    fields.relational.ForeignKeyFieldInstance,
    fields.relational.OneToOneFieldInstance,
)
_SKIPPED_TYPES = (
    fields.relational.BackwardFKRelation,
    fields.relational.ManyToManyFieldInstance,
)


class TortoiseChoiceSource:
    """Offer the records of a Tortoise model as choices."""

    def __init__(self, model: type[Model]) -> None:
        self.model = model

    def __repr__(self) -> str:
        return f"<TortoiseChoiceSource {self.model.__name__}>"

    async def fetch_choices(self) -> list[Choice]:
        return [Choice(const=obj.pk, title=str(obj)) for obj in await self.model.all()]


class TortoiseAdapter(BaseAdapter):
    """Facade translating Tortoise models for the form layer."""

    name = "tortoise"

    def _app_label(self, model: type[Any]) -> str:
        """Return the app label for a model, with safe fallback."""
        meta = getattr(model, "_meta", None)
        label = getattr(meta, "app", None)
        return label or model.__module__.split(".")[0]

    def _build_choices(self, f: fields.Field) -> list[Choice] | None:
        """Create ``Choice`` instances for enum fields."""
        # CharEnumField / IntEnumField
        enum_type = getattr(f, "enum_type", None)
        if enum_type is None:
            return None
        return [
            Choice(const=m.value, title=str(getattr(m, "label", None) or m.name.replace("_", " ").title()))
            for m in enum_type
        ]

    def _kind_for_field(self, f: fields.Field) -> str:
        """Map a Tortoise field instance to a semantic field kind."""
        if isinstance(f, _RELATION_TYPES):
            return "reference"
        if getattr(f, "enum_type", None) is not None:
            return "enum"
        if isinstance(f, fields.BooleanField):
            return "boolean"
        if isinstance(f, (fields.IntField, fields.BigIntField, fields.SmallIntField)):
            return "integer"
        if isinstance(f, fields.FloatField):
            return "real"
        if isinstance(f, fields.DecimalField):
            return "decimal"
        if isinstance(f, fields.DatetimeField):
            return "datetime"
        if isinstance(f, fields.DateField):
            return "date"
        time_field = getattr(fields, "TimeField", None)
        if time_field and isinstance(f, time_field):
            return "time"
        if isinstance(f, (fields.JSONField, fields.BinaryField)):
            return "readonly"
        if isinstance(f, fields.TextField):
            return "text"
        # By default, everything else is considered string (CharField and so on)
        return "string"

    def _relation_for_field(self, f: fields.Field) -> Relation | None:
        if not isinstance(f, _RELATION_TYPES):
            return None
        target = getattr(f, "related_model", None)
        if target is None:
            return Relation(target=str(getattr(f, "model_name", "")), to_field="id")
        meta = getattr(target, "_meta", None)
        dotted = f"{self._app_label(target)}.{target.__name__}"
        return Relation(target=dotted, to_field=getattr(meta, "pk_attr", "id"))

    def _field_descriptor(self, name: str, f: fields.Field) -> FieldDescriptor:
        """Build a :class:`FieldDescriptor` from a Tortoise field."""
        raw_default = getattr(f, "default", None)
        default = None if callable(raw_default) else raw_default
        primary_key = bool(getattr(f, "pk", False))
        editable = not (
            primary_key
            or getattr(f, "generated", False)
            or getattr(f, "auto_now", False)
            or getattr(f, "auto_now_add", False)
        )
        # NOT NULL columns are mandatory whether or not they carry a default.
        mandatory = (
            not getattr(f, "null", False)
            and not primary_key
            and not isinstance(f, fields.BooleanField)
        )
        return FieldDescriptor(
            name=name,
            kind=self._kind_for_field(f),
            editable=editable,
            mandatory=mandatory,
            hint=getattr(f, "description", None) or None,
            enum=self._build_choices(f),
            relation=self._relation_for_field(f),
            default=default,
        )

    def get_model_descriptor(
        self,
        model: type[Any],
        *,
        overrides: Mapping[str, Mapping[str, Any]] | None = None,
        only_fields: Iterable[str] | None = None,
    ) -> ModelDescriptor:
        """Build a descriptor for ``model``.

        ``overrides`` maps field names to descriptor attributes (``caption``,
        ``display``, ``placeholder``, ``hint``, ``mandatory``, ``kind`` ...)
        replacing the introspected values.
        """
        meta = getattr(model, "_meta", None)
        app = self._app_label(model)
        overrides = overrides or {}
        fds: list[FieldDescriptor] = []
        if meta is not None:
            fields_map = getattr(meta, "fields_map", {})
            source_fields = {
                getattr(f, "source_field", None)
                for f in fields_map.values()
                if isinstance(f, _RELATION_TYPES)
            }
            for name, f in fields_map.items():
                if isinstance(f, _SKIPPED_TYPES) or name in source_fields:
                    continue
                fd = self._field_descriptor(name, f)
                if name in overrides:
                    fd = fd.model_copy(update=dict(overrides[name]))
                fds.append(fd)

        return ModelDescriptor(
            app_label=app,
            model_name=getattr(model, "__name__", "Model").lower(),
            dotted=f"{app}.{getattr(model, '__name__', 'Model')}",
            pk_attr=getattr(meta, "pk_attr", "id") if meta else "id",
            fields=fds,
            only_fields=list(only_fields) if only_fields else None,
        )

    def wrap(
        self, model: type[Model], instance: Model | None = None, **options: Any
    ) -> "TortoiseModel":
        return TortoiseModel(model, instance, adapter=self, **options)


class TortoiseModel(ModelSurface):
    """Model surface over one Tortoise record."""

    def __init__(
        self,
        model: type[Model],
        instance: Model | None = None,
        *,
        adapter: TortoiseAdapter | None = None,
        overrides: Mapping[str, Mapping[str, Any]] | None = None,
        only_fields: Iterable[str] | None = None,
    ) -> None:
        super().__init__()
        self.model = model
        self.instance = instance if instance is not None else model()
        self.adapter = adapter or tortoise_adapter
        self._descriptor = self.adapter.get_model_descriptor(
            model, overrides=overrides, only_fields=only_fields
        )

    @property
    def descriptor(self) -> ModelDescriptor:
        return self._descriptor

    @property
    def identity(self) -> Hashable:
        return id(self.instance)

    @property
    def pk(self) -> Any:
        return self.instance.pk

    def _orm_field(self, name: str) -> fields.Field | None:
        return self.model._meta.fields_map.get(name)

    def get_reference(self, name: str) -> Reference | None:
        f = self._orm_field(name)
        if not isinstance(f, _RELATION_TYPES):
            return None
        return Reference(field=f.source_field, model=TortoiseChoiceSource(f.related_model))

    def get_field_value(self, name: str) -> Any:
        f = self._orm_field(name)
        if f is None:
            raise KeyError(f"{self.name} has no field '{name}'")
        if isinstance(f, _RELATION_TYPES):
            return getattr(self.instance, f.source_field)
        return getattr(self.instance, name)

    def set_field_value(self, name: str, value: Any) -> None:
        f = self._orm_field(name)
        if f is None:
            raise KeyError(f"{self.name} has no field '{name}'")
        if isinstance(f, _RELATION_TYPES):
            setattr(self.instance, f.source_field, value)
            return
        enum_type = getattr(f, "enum_type", None)
        if enum_type is not None and value is not None and not isinstance(value, enum_type):
            value = enum_type(value)
        setattr(self.instance, name, value)

    async def load(self, pk: Any) -> "TortoiseModel":
        try:
            self.instance = await self.model.get(pk=pk)
        except TortoiseDoesNotExist as exc:
            raise NotFoundError(f"{self.name} record {pk} does not exist") from exc
        self.after_load()
        return self

    async def refresh(self) -> "TortoiseModel":
        await self.instance.refresh_from_db()
        self.after_load()
        return self

    async def save(self) -> "TortoiseModel":
        await self.instance.save()
        logger.debug("Saved %s record %s", self.name, self.instance.pk)
        return self

    async def fetch_choices(self) -> list[Choice]:
        return await TortoiseChoiceSource(self.model).fetch_choices()


tortoise_adapter = adapter = TortoiseAdapter()
registry.register(adapter)

__all__ = ["TortoiseAdapter", "TortoiseChoiceSource", "TortoiseModel", "adapter", "tortoise_adapter", "Model"]

# The End
