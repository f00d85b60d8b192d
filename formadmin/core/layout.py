# -*- coding: utf-8 -*-
"""
layout

Fluid page layout composed of rows and bars.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Literal

BarPlacement = Literal["bottom", "left"]


@dataclass
class MenuItem:
    """Main navigation entry."""

    title: str
    path: str
    icon: str | None = None

    def as_dict(self) -> Dict[str, Any]:
        return {"title": self.title, "path": self.path, "icon": self.icon}


class Menu:
    """Navigation menu; entries are unique by path."""

    def __init__(self) -> None:
        self.items: List[MenuItem] = []

    def add_item(self, title: str, path: str, icon: str | None = None) -> MenuItem:
        for item in self.items:
            if item.path == path:
                return item
        item = MenuItem(title=title, path=path, icon=icon)
        self.items.append(item)
        return item

    def as_dict(self) -> Dict[str, Any]:
        return {"type": "menu", "items": [item.as_dict() for item in self.items]}


@dataclass
class Container:
    """Generic layout container holding child components."""

    kind: str
    classes: List[str] = field(default_factory=list)
    options: Dict[str, Any] = field(default_factory=dict)
    children: List[Any] = field(default_factory=list)

    def add(self, component: Any) -> Any:
        self.children.append(component)
        return component

    def add_class(self, name: str) -> "Container":
        if name not in self.classes:
            self.classes.append(name)
        return self

    def as_dict(self) -> Dict[str, Any]:
        return {
            "type": self.kind,
            "classes": list(self.classes),
            "options": dict(self.options),
            "children": [
                child.as_dict() if hasattr(child, "as_dict") else child
                for child in self.children
            ],
        }


class FluidLayout:
    """Responsive layout assembled from rows and edge bars.

    Rows stack top to bottom. Bottom bars are anchored to the lower edge of
    the page and the left bar hosts side navigation. Row ``options`` such as
    ``sticky``, ``responsive`` (``mobile``, ``desktop`` or ``both``), ``height``
    and ``element`` are kept for the templates that draw the layout.
    """

    row_class = "layout-row"

    def __init__(self) -> None:
        self.rows: List[Container] = []
        self.bars: Dict[BarPlacement, List[Container]] = {"bottom": [], "left": []}
        self.menu: Menu | None = None
        self.footer: Container | None = None

    def add_row(self, **options: Any) -> Container:
        row = Container(kind="row", options=options).add_class(self.row_class)
        self.rows.append(row)
        return row

    def add_menu(self, menu: Menu | None = None) -> Menu:
        """Place ``menu`` (a new one by default) in a row of its own."""
        menu = menu or Menu()
        self.add_row(element="nav").add(menu)
        self.menu = menu
        return menu

    def add_footer(self, **options: Any) -> Container:
        options.setdefault("element", "footer")
        self.footer = self.add_bottom_bar(**options)
        return self.footer

    def add_bottom_bar(self, **options: Any) -> Container:
        bar = Container(kind="bar", options=options).add_class("layout-bottom-bar")
        self.bars["bottom"].append(bar)
        return bar

    def add_left_bar(self, **options: Any) -> Container:
        bar = Container(kind="bar", options=options).add_class("layout-left-bar")
        self.bars["left"].append(bar)
        return bar

    def default_spot(self) -> str:
        return "Layout"

    def as_dict(self) -> Dict[str, Any]:
        return {
            "spot": self.default_spot(),
            "rows": [row.as_dict() for row in self.rows],
            "bars": {
                place: [bar.as_dict() for bar in bars]
                for place, bars in self.bars.items()
            },
        }


__all__ = ["Container", "FluidLayout", "Menu", "MenuItem"]

# The End
