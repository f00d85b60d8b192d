# -*- coding: utf-8 -*-
"""
test_addons

Verify add-on manifests, resource locations and initiator loading.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

import json
import sys
from pathlib import Path

import pytest

from formadmin.conf import FormAdminSettings
from formadmin.core.addons import (
    AddonDescriptor,
    AddonLoader,
    AddonManifest,
    LocationRegistry,
)
from formadmin.core.exceptions import ConfigurationError
from formadmin.core.shell import AdminShell

INITIATOR = '''
class Initiator:
    def __init__(self, shell, addon):
        self.shell = shell
        self.addon = addon
        shell.menu.add_item("Reports", shell.settings.admin_path + "/reports")
'''


def write_manifest(path: Path, entries: object) -> Path:
    path.write_text(json.dumps(entries), encoding="utf-8")
    return path


def make_package(root: Path, name: str, initiator: str | None = INITIATOR) -> None:
    package = root / name
    package.mkdir(parents=True)
    (package / "__init__.py").write_text("", encoding="utf-8")
    if initiator is not None:
        (package / "initiator.py").write_text(initiator, encoding="utf-8")


@pytest.fixture
def addon_root(tmp_path: Path, monkeypatch: pytest.MonkeyPatch):
    root = tmp_path / "addons"
    root.mkdir()
    monkeypatch.syspath_prepend(str(root))
    before = set(sys.modules)
    yield root
    for name in set(sys.modules) - before:
        sys.modules.pop(name, None)


class TestManifest:
    def test_missing_manifest_means_no_addons(self, tmp_path: Path) -> None:
        assert AddonManifest.read(tmp_path / "absent.json") == []

    def test_entries_are_parsed(self, tmp_path: Path) -> None:
        path = write_manifest(
            tmp_path / "addons.json",
            [
                {
                    "name": "shop/reports",
                    "addon_full_path": "vendor/shop/reports",
                    "addon_symlink_name": "reports",
                    "addon_public_symlink": "public/reports",
                }
            ],
        )
        (addon,) = AddonManifest.read(path)
        assert addon.module_name == "shop.reports"
        assert addon.addon_symlink_name == "reports"

    @pytest.mark.parametrize(
        "content",
        ["{not json", json.dumps({"name": "x"}), json.dumps([{"addon_full_path": "x"}])],
    )
    def test_broken_manifest(self, tmp_path: Path, content: str) -> None:
        path = tmp_path / "addons.json"
        path.write_text(content, encoding="utf-8")
        with pytest.raises(ConfigurationError):
            AddonManifest.read(path)


class TestLocations:
    def test_mount_private_and_public_locations(self, tmp_path: Path) -> None:
        site = tmp_path / "site"
        registry = LocationRegistry()
        addon = AddonDescriptor(
            name="reports",
            addon_full_path="vendor/reports",
            addon_symlink_name="reports",
            addon_public_symlink="public/reports",
        )

        AddonLoader(site, registry, base_url="/admin").mount_locations([addon])

        private, public = registry.locations
        assert private.path_for("code") == (tmp_path / "vendor/reports/lib").resolve()
        assert private.path_for("template") == (tmp_path / "vendor/reports/templates").resolve()
        assert private.url_for("code") is None
        assert public.path_for("js") == (site / "public/reports/js").resolve()
        assert public.url_for("css") == "/admin/reports/css"
        assert public.url_for("public") == "/admin/reports"
        assert public.path_for("docs") is None

    def test_locate_searches_every_location(self, tmp_path: Path) -> None:
        registry = LocationRegistry()
        registry.add_location({"js": "js"}, tmp_path / "a")
        registry.add_location({"css": "css"}, tmp_path / "b")
        registry.add_location({"js": "scripts"}, tmp_path / "c")

        assert registry.locate("js") == [
            (tmp_path / "a/js").resolve(),
            (tmp_path / "c/scripts").resolve(),
        ]


class TestInitiators:
    def test_initiators_are_instantiated(self, addon_root: Path) -> None:
        make_package(addon_root, "sales_reports")
        make_package(addon_root, "plain_theme", initiator=None)
        addons = [
            AddonDescriptor(name="sales_reports", addon_full_path="x"),
            AddonDescriptor(name="plain_theme", addon_full_path="y"),
            AddonDescriptor(name="not_installed", addon_full_path="z"),
        ]
        shell = AdminShell(settings=FormAdminSettings())

        initiators = AddonLoader(Path("."), shell.locations).init_addons(shell, addons)

        assert len(initiators) == 1
        assert initiators[0].shell is shell
        assert initiators[0].addon.name == "sales_reports"

    def test_broken_initiator_import_propagates(self, addon_root: Path) -> None:
        make_package(addon_root, "broken_addon", initiator="import does_not_exist_anywhere\n")
        shell = AdminShell(settings=FormAdminSettings())
        addon = AddonDescriptor(name="broken_addon", addon_full_path="x")

        with pytest.raises(ModuleNotFoundError):
            AddonLoader(Path("."), shell.locations).init_addons(shell, [addon])

    def test_shell_loads_addons_in_sandbox(self, tmp_path: Path, addon_root: Path) -> None:
        make_package(addon_root, "menu_addon")
        site = tmp_path / "site"
        site.mkdir()
        write_manifest(
            site / "sandbox_addons.json",
            [{"name": "menu_addon", "addon_full_path": "menu_addon", "addon_symlink_name": "menu"}],
        )
        shell = AdminShell(settings=FormAdminSettings(base_path=site, sandbox_enabled=True))

        shell.init_layout()

        assert [addon.name for addon in shell.addons] == ["menu_addon"]
        assert len(shell.initiators) == 1
        assert len(shell.locations.locations) == 2
        assert [item.path for item in shell.menu.items] == ["/admin/reports"]

    def test_sandbox_disabled_skips_addons(self, tmp_path: Path) -> None:
        write_manifest(tmp_path / "sandbox_addons.json", [{"name": "x", "addon_full_path": "x"}])
        shell = AdminShell(settings=FormAdminSettings(base_path=tmp_path))

        shell.init_layout()

        assert shell.addons == []
        assert shell.locations.locations == []


# The End
