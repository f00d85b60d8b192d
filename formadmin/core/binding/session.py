# -*- coding: utf-8 -*-
"""
session

Binding session connecting a form with one or more models.

Typical use goes through the form itself::

    session = form.set_model(invoice)

Fields of further models are imported into the same form with::

    session.import_fields(customer, ["name", "email"])

and single fields are added, returning the new widget for customization::

    widget = session.import_field("notes")

On load of the first bound model the form is re-seeded; when the form is
updated every touched model is written back and saved once.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Hashable, Literal, Sequence

from ...conf import FormAdminSettings, current_settings
from ...widgets.base import BaseWidget
from ..exceptions import ConfigurationError
from ..interface.model import AFTER_LOAD, ModelSurface
from .resolver import FieldTypeResolver, resolver as default_resolver

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from ..form import Form

logger = logging.getLogger(__name__)

# Associate a model with the form without creating any fields.
NO_FIELDS: Literal[False] = False

FieldSelector = str | Sequence[str] | None | Literal[False]


@dataclass(frozen=True)
class FieldAssociation:
    """Reference to the model field a form field mirrors."""

    model: ModelSurface
    field: str

    def get(self) -> Any:
        return self.model.get_field_value(self.field)

    def set(self, value: Any) -> None:
        self.model.set_field_value(self.field, value)


class BindingSession:
    """Import model fields into a form and keep both sides synchronized."""

    def __init__(
        self,
        form: "Form",
        *,
        resolver: FieldTypeResolver | None = None,
        settings: FormAdminSettings | None = None,
    ) -> None:
        model = getattr(form, "model", None)
        if not isinstance(model, ModelSurface):
            raise ConfigurationError(
                f"{type(self).__name__} can only be used with forms bound to a "
                f"ModelSurface model, got {type(model).__name__}"
            )
        self.form = form
        self.model: ModelSurface = model
        self.resolver = resolver or default_resolver
        self._settings = settings
        # form field name => model field
        self.field_associations: dict[str, FieldAssociation] = {}
        self._hook_set = False

    @property
    def settings(self) -> FormAdminSettings:
        return self._settings or current_settings()

    @property
    def hooks_registered(self) -> bool:
        return self._hook_set

    def import_fields(
        self, model: ModelSurface, fields: FieldSelector = None
    ) -> "BindingSession | None":
        """Import ``fields`` of ``model`` into the form.

        ``fields`` may be a single name, a list of names, ``None`` for every
        field of the model (its ``only_fields`` when declared) or
        :data:`NO_FIELDS` to associate the model without creating fields.
        """
        self.model = model

        if fields is NO_FIELDS:
            return None

        if not fields:
            fields = model.only_fields or model.editable_field_names()

        if isinstance(fields, str):
            fields = [fields]

        for name in fields:
            self.import_field(name)

        if not self._hook_set:
            self.form.hooks.add_hook("update", self.commit)
            model.hooks.add_hook(AFTER_LOAD, self.sync_form)
            self._hook_set = True

        return self

    def import_field(self, name: str, field_name: str | None = None) -> BaseWidget | None:
        """Import one field of the active model and return the new widget.

        Missing and non-editable fields are skipped and ``None`` is returned.
        """
        field = self.model.has_field(name)
        if field is None or not field.editable:
            logger.debug("Skipping field %s of %s: missing or not editable", name, self.model)
            return None

        if field_name is None:
            field_name = self._unique(field.name)
        kind = self.resolver.resolve(field, self.model)

        widget = self.form.add_field(kind, field_name, field.caption)
        widget.set_value(self.model.get_field_value(field.name))
        self.field_associations[field_name] = FieldAssociation(self.model, field.name)

        # has-one fields offer the linked model's records
        reference = self.model.get_reference(field.name)
        if reference is not None:
            widget.bind_reference_model(reference.model)

        if field.enum is not None:
            widget.set_value_list(field.enum)

        if field.is_mandatory:
            widget.attach_not_null_validator(
                field.mandatory_message or self.settings.mandatory_message
            )

        if field.placeholder:
            widget.set_attribute("placeholder", field.placeholder)

        if field.hint:
            widget.set_hint(field.hint)

        if widget.kind.supports_empty_choice and not field.is_mandatory:
            widget.set_empty_choice(self.settings.empty_choice_label)

        return widget

    def sync_form(self, *_: Any) -> None:
        """Copy model field values into the form."""
        for form_field, association in self.field_associations.items():
            self.form.set_field_value(form_field, association.get())

    def collect(self) -> dict[Hashable, ModelSurface]:
        """Write form values into their model fields.

        Returns the touched models keyed by identity, each appearing once.
        """
        models: dict[Hashable, ModelSurface] = {}
        for form_field, association in self.field_associations.items():
            association.set(self.form.get_field_value(form_field))
            models.setdefault(association.model.identity, association.model)
        return models

    async def commit(self, *_: Any) -> list[ModelSurface]:
        """Write the form back into its models and save each model once.

        Save failures propagate; models saved before the failure stay saved.
        """
        models = self.collect()
        saved: list[ModelSurface] = []
        for model in models.values():
            await model.save()
            saved.append(model)
            logger.info("Saved %s from form %s", model, self.form.name)
        return saved

    def _unique(self, desired: str) -> str:
        taken = set(self.form.list_elements()) | set(self.field_associations)
        candidate = desired
        postfix = 1
        while candidate in taken:
            postfix += 1
            candidate = f"{desired}_{postfix}"
        return candidate


__all__ = ["BindingSession", "FieldAssociation", "FieldSelector", "NO_FIELDS"]

# The End
