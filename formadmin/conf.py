# -*- coding: utf-8 -*-
"""
conf

Runtime configuration utilities for the form admin package.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from threading import RLock
from typing import Mapping


@dataclass
class FormAdminSettings:
    """Container for admin configuration derived from environment variables."""

    admin_title: str = "Admin"
    admin_path: str = "/admin"
    base_path: Path = field(default_factory=Path.cwd)
    addons_manifest: str = "sandbox_addons.json"
    sandbox_enabled: bool = False
    empty_choice_label: str = "- no value -"
    mandatory_message: str = "Must not be empty"
    adapter_name: str = "tortoise"

    def __post_init__(self) -> None:
        """Normalize path-like values."""
        self.admin_path = self._normalize_prefix(self.admin_path)
        if not isinstance(self.base_path, Path):
            self.base_path = Path(str(self.base_path))

    @property
    def manifest_path(self) -> Path:
        """Return the absolute location of the add-on manifest."""
        manifest = Path(self.addons_manifest)
        if manifest.is_absolute():
            return manifest
        return self.base_path / manifest

    @classmethod
    def from_env(
        cls,
        env: Mapping[str, str] | None = None,
        *,
        prefix: str = "FORMADMIN_",
    ) -> "FormAdminSettings":
        """Build a settings instance from environment variables."""
        source = env if env is not None else os.environ
        data = {key[len(prefix) :]: value for key, value in source.items() if key.startswith(prefix)}
        return cls(
            admin_title=data.get("ADMIN_TITLE") or "Admin",
            admin_path=data.get("ADMIN_PATH") or "/admin",
            base_path=Path(data.get("BASE_PATH") or Path.cwd()),
            addons_manifest=data.get("ADDONS_MANIFEST") or "sandbox_addons.json",
            sandbox_enabled=cls._to_bool(data.get("SANDBOX_ENABLED")),
            empty_choice_label=data.get("EMPTY_CHOICE_LABEL") or "- no value -",
            mandatory_message=data.get("MANDATORY_MESSAGE") or "Must not be empty",
            adapter_name=data.get("ADAPTER") or "tortoise",
        )

    @staticmethod
    def _to_bool(value: str | None, *, default: bool = False) -> bool:
        """Return a boolean parsed from ``value`` with a ``default`` fallback."""

        if value is None:
            return default
        normalized = value.strip().lower()
        if normalized in {"1", "true", "yes", "on"}:
            return True
        if normalized in {"0", "false", "no", "off"}:
            return False
        return default

    @staticmethod
    def _normalize_prefix(value: str) -> str:
        """Ensure paths contain a single leading slash and no trailing one."""
        stripped = value.strip().strip("/")
        if not stripped:
            return ""
        return "/" + stripped


class SettingsManager:
    """Central storage for the active ``FormAdminSettings`` instance."""

    def __init__(self, initial: FormAdminSettings | None = None) -> None:
        """Prepare storage with an optional preconfigured ``initial`` settings."""

        self._lock = RLock()
        self._settings = initial

    def configure(self, settings: FormAdminSettings) -> None:
        """Install a new settings instance."""
        with self._lock:
            self._settings = settings

    def current(self) -> FormAdminSettings:
        """Return the active settings, lazily initializing from the environment."""
        with self._lock:
            if self._settings is None:
                self._settings = FormAdminSettings.from_env()
            return self._settings

    def reset(self) -> None:
        """Forget the active settings so the next access re-reads the environment."""
        with self._lock:
            self._settings = None


_settings_manager = SettingsManager()


def configure(settings: FormAdminSettings) -> None:
    """Public entry point to install application specific settings."""
    _settings_manager.configure(settings)


def current_settings() -> FormAdminSettings:
    """Return the active settings instance used by form admin components."""
    return _settings_manager.current()


def reset_settings() -> None:
    """Drop the active settings instance."""
    _settings_manager.reset()


__all__ = [
    "FormAdminSettings",
    "SettingsManager",
    "configure",
    "current_settings",
    "reset_settings",
]


# The End
