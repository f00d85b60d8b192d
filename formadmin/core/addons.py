# -*- coding: utf-8 -*-
"""
addons

Add-on manifest reading, resource locations and initiator loading.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import importlib
import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import TYPE_CHECKING, Any, Iterable, List, Mapping

from pydantic import BaseModel, ValidationError as PydanticValidationError

from .exceptions import ConfigurationError

if TYPE_CHECKING:  # pragma: no cover - imported for type checking only
    from .shell import AdminShell

# Private locations hold code, templates and docs developed with the add-on.
PRIVATE_CONTENTS: Mapping[str, str] = {
    "docs": "docs",
    "code": "lib",
    "addons": "../..",
    "page": "page",
    "template": "templates",
}

# Public locations hold js, css and images served to the browser.
PUBLIC_CONTENTS: Mapping[str, str] = {
    "js": "js",
    "css": "css",
    "public": "./",
}


class AddonDescriptor(BaseModel):
    """Entry of the add-on manifest."""
    name: str
    addon_full_path: str
    addon_symlink_name: str = ""
    addon_public_symlink: str = ""

    @property
    def module_name(self) -> str:
        return self.name.replace("/", ".").replace("\\", ".").strip(".")


class AddonManifest:
    """Read the JSON list of installed add-ons."""

    @staticmethod
    def read(path: Path) -> list[AddonDescriptor]:
        if not path.exists():
            return []
        try:
            payload = json.loads(path.read_text(encoding="utf-8"))
        except json.JSONDecodeError as exc:
            raise ConfigurationError(f"Add-on manifest {path} is not valid JSON") from exc
        if not isinstance(payload, list):
            raise ConfigurationError(f"Add-on manifest {path} must contain a list")
        try:
            return [AddonDescriptor.model_validate(item) for item in payload]
        except PydanticValidationError as exc:
            raise ConfigurationError(f"Add-on manifest {path} has invalid entries: {exc}") from exc


@dataclass
class Location:
    """Directory tree holding resources of the given kinds."""

    contents: dict[str, str]
    base_path: Path
    base_url: str | None = None

    def path_for(self, kind: str) -> Path | None:
        relative = self.contents.get(kind)
        if relative is None:
            return None
        return (self.base_path / relative).resolve()

    def url_for(self, kind: str) -> str | None:
        relative = self.contents.get(kind)
        if relative is None or self.base_url is None:
            return None
        base = self.base_url.rstrip("/")
        relative = relative.strip("./")
        return f"{base}/{relative}" if relative else base


@dataclass
class LocationRegistry:
    """Resource locations searched in registration order."""

    locations: List[Location] = field(default_factory=list)

    def add_location(
        self,
        contents: Mapping[str, str],
        base_path: Path | str,
        base_url: str | None = None,
    ) -> Location:
        location = Location(dict(contents), Path(base_path), base_url)
        self.locations.append(location)
        return location

    def locate(self, kind: str) -> list[Path]:
        paths: list[Path] = []
        for location in self.locations:
            path = location.path_for(kind)
            if path is not None:
                paths.append(path)
        return paths


class AddonLoader:
    """Mount add-on locations and start their initiators."""

    logger = logging.getLogger(__name__)

    def __init__(self, base_path: Path, locations: LocationRegistry, base_url: str = "/") -> None:
        self.base_path = Path(base_path)
        self.locations = locations
        self.base_url = base_url

    def mount_locations(self, addons: Iterable[AddonDescriptor]) -> None:
        for addon in addons:
            self.locations.add_location(
                PRIVATE_CONTENTS, self.base_path.parent / addon.addon_full_path
            )
            self.locations.add_location(
                PUBLIC_CONTENTS,
                self.base_path / addon.addon_public_symlink,
                base_url=self.base_url.rstrip("/") + "/" + addon.addon_symlink_name,
            )
            self.logger.debug("Mounted locations of add-on %s", addon.name)

    def init_addons(self, shell: "AdminShell", addons: Iterable[AddonDescriptor]) -> list[Any]:
        """Instantiate ``Initiator`` of every add-on providing one."""
        initiators: list[Any] = []
        for addon in addons:
            initiator_cls = self._load_initiator(addon)
            if initiator_cls is None:
                continue
            initiators.append(initiator_cls(shell, addon))
            self.logger.info("Initialized add-on %s", addon.name)
        return initiators

    def _load_initiator(self, addon: AddonDescriptor) -> type | None:
        module_name = f"{addon.module_name}.initiator"
        try:
            module = importlib.import_module(module_name)
        except ModuleNotFoundError as exc:
            if getattr(exc, "name", None) in (module_name, addon.module_name):
                self.logger.debug("Add-on %s has no initiator", addon.name)
                return None
            self.logger.exception("Failed to import initiator of add-on %s", addon.name)
            raise
        initiator = getattr(module, "Initiator", None)
        if initiator is None:
            self.logger.debug("Module %s defines no Initiator", module_name)
        return initiator


__all__ = [
    "AddonDescriptor",
    "AddonLoader",
    "AddonManifest",
    "Location",
    "LocationRegistry",
    "PRIVATE_CONTENTS",
    "PUBLIC_CONTENTS",
]

# The End
