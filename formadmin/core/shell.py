# -*- coding: utf-8 -*-
"""
shell

Admin shell: layout, add-ons and model forms of one admin application.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Mapping

from ..adapters.registry import AdapterRegistry, registry as adapter_registry
from ..conf import FormAdminSettings, current_settings
from ..contrib.adapters import tortoise as _tortoise  # noqa: F401  registers the adapter
from .addons import AddonDescriptor, AddonLoader, AddonManifest, LocationRegistry
from .binding.session import FieldSelector
from .exceptions import ConfigurationError, NotFoundError
from .form import Form
from .layout import FluidLayout

logger = logging.getLogger(__name__)


@dataclass
class ModelFormEntry:
    """Model registered for editing through the admin."""

    slug: str
    model: type[Any]
    title: str
    fields: FieldSelector = None
    overrides: Mapping[str, Mapping[str, Any]] = field(default_factory=dict)
    only_fields: list[str] | None = None
    adapter_name: str = "tortoise"


class AdminShell:
    """Administration application wiring the layout, add-ons and forms."""

    def __init__(
        self,
        *,
        settings: FormAdminSettings | None = None,
        adapters: AdapterRegistry | None = None,
        title: str | None = None,
    ) -> None:
        self.settings = settings or current_settings()
        self.title = title or self.settings.admin_title
        self.layout = FluidLayout()
        self.menu = self.layout.add_menu()
        self.footer = self.layout.add_footer()
        self.locations = LocationRegistry()
        self.addons: list[AddonDescriptor] = []
        self.initiators: list[Any] = []
        self._adapters = adapters or adapter_registry
        self._forms: dict[str, ModelFormEntry] = {}

    def init_layout(self) -> FluidLayout:
        """Mount add-on locations and start add-ons when the sandbox is enabled."""
        if self.settings.sandbox_enabled:
            self.addons = AddonManifest.read(self.settings.manifest_path)
            loader = AddonLoader(
                self.settings.base_path,
                self.locations,
                base_url=self.settings.admin_path or "/",
            )
            loader.mount_locations(self.addons)
            self.initiators = loader.init_addons(self, self.addons)
            logger.info("Loaded %d add-ons", len(self.addons))
        return self.layout

    # === Model forms ===
    def register_model(
        self,
        slug: str,
        model: type[Any],
        *,
        fields: FieldSelector = None,
        overrides: Mapping[str, Mapping[str, Any]] | None = None,
        only_fields: Iterable[str] | None = None,
        title: str | None = None,
        icon: str | None = None,
        adapter_name: str | None = None,
    ) -> ModelFormEntry:
        if slug in self._forms:
            raise ConfigurationError(f"Model form '{slug}' is already registered")
        entry = ModelFormEntry(
            slug=slug,
            model=model,
            title=title or getattr(model, "__name__", slug),
            fields=fields,
            overrides=dict(overrides or {}),
            only_fields=list(only_fields) if only_fields else None,
            adapter_name=adapter_name or self.settings.adapter_name,
        )
        self._adapters.get(entry.adapter_name)
        self._forms[slug] = entry
        self.menu.add_item(entry.title, f"{self.settings.admin_path}/forms/{slug}", icon)
        return entry

    def get_entry(self, slug: str) -> ModelFormEntry:
        try:
            return self._forms[slug]
        except KeyError as exc:
            raise NotFoundError(f"Unknown model form '{slug}'") from exc

    async def build_form(self, slug: str, pk: Any) -> Form:
        """Bind a form to the record ``pk`` of the model registered as ``slug``."""
        entry = self.get_entry(slug)
        surface = self._adapters.get(entry.adapter_name).wrap(
            entry.model, overrides=entry.overrides, only_fields=entry.only_fields
        )
        form = Form(slug, title=entry.title, settings=self.settings)
        form.set_model(surface, entry.fields)
        await surface.load(pk)
        await form.prefetch()
        return form

    async def submit(self, slug: str, pk: Any, data: Mapping[str, Any]) -> Form:
        """Apply ``data`` to the record and persist it."""
        form = await self.build_form(slug, pk)
        await form.update(data)
        return form

    def mount(self, app: Any) -> None:
        """Expose the admin endpoints on the FastAPI ``app``."""
        from ..router import FormRouter

        FormRouter(self).mount(app)


__all__ = ["AdminShell", "ModelFormEntry"]

# The End
