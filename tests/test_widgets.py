# -*- coding: utf-8 -*-
"""
test_widgets

Verify widget registration, value conversion and schema fragments.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from datetime import date, datetime, time
from decimal import Decimal
from enum import Enum

import pytest

from formadmin.core.exceptions import WidgetNotRegistered
from formadmin.schema.descriptors import Choice
from formadmin.widgets import WidgetKind, registry
from formadmin.widgets.choices import DropdownWidget, RadioWidget
from formadmin.widgets.options import normalize_choices
from formadmin.widgets.registry import WidgetRegistry
from formadmin.widgets.text import LineWidget
from formadmin.widgets.validators import NotNullValidator


class Color(Enum):
    DARK_RED = "dark_red"
    BLUE = "blue"


class TestRegistry:
    def test_every_kind_has_a_widget(self) -> None:
        assert set(registry.kinds()) == set(WidgetKind)

    def test_create_by_value_or_name(self) -> None:
        assert registry.create("date_picker", "due").kind is WidgetKind.DATE_PICKER
        assert registry.create("DROPDOWN", "status").kind is WidgetKind.DROPDOWN

    def test_unknown_kind(self) -> None:
        with pytest.raises(WidgetNotRegistered):
            registry.create("slider", "volume")

    def test_empty_registry_reports_missing_widget(self) -> None:
        with pytest.raises(WidgetNotRegistered):
            WidgetRegistry().create(WidgetKind.LINE, "name")

    def test_register_sets_kind(self) -> None:
        local = WidgetRegistry()

        @local.register("radio")
        class Stars(RadioWidget):
            pass

        assert Stars.kind is WidgetKind.RADIO
        assert isinstance(local.create(WidgetKind.RADIO, "rating"), Stars)


class TestWidgetContract:
    def test_value_roundtrip_and_title(self) -> None:
        widget = LineWidget("first_name")
        widget.set_value("Ann")
        assert widget.get_value() == "Ann"
        assert widget.get_title() == "First name"
        assert widget.get_schema()["title"] == "First name"
        assert LineWidget("x", "Caption").get_title() == "Caption"

    def test_common_schema_parts(self) -> None:
        widget = LineWidget("email").set_attribute("placeholder", "user@example.com")
        widget.set_hint("Used for receipts")
        schema = widget.get_schema()
        assert schema["description"] == "Used for receipts"
        assert schema["options"]["inputAttributes"] == {"placeholder": "user@example.com"}

    def test_empty_choice_only_on_value_lists(self) -> None:
        with pytest.raises(TypeError):
            LineWidget("name").set_empty_choice("none")
        assert DropdownWidget("status").set_empty_choice("none").empty_choice == "none"

    def test_not_null_validator(self) -> None:
        widget = LineWidget("name").attach_not_null_validator("Required")
        assert widget.validate() == "Required"
        widget.set_value("  ")
        assert widget.validate() == "Required"
        widget.set_value("Ann")
        assert widget.validate() is None

    def test_validator_on_collections(self) -> None:
        validator = NotNullValidator("empty")
        assert validator([]) == "empty"
        assert validator(0) is None
        assert validator(False) is None


class TestConversions:
    @pytest.mark.parametrize(
        "kind, raw, expected",
        [
            (WidgetKind.INTEGER, "42", 42),
            (WidgetKind.INTEGER, "4.0", 4),
            (WidgetKind.DECIMAL, "1.005", Decimal("1.005")),
            (WidgetKind.MONEY, "150", Decimal("150.00")),
            (WidgetKind.MONEY, "3.456", Decimal("3.46")),
            (WidgetKind.REAL, "2.5", 2.5),
            (WidgetKind.CHECKBOX, "on", True),
            (WidgetKind.CHECKBOX, "0", False),
            (WidgetKind.DATE_PICKER, "2024-02-29", date(2024, 2, 29)),
            (WidgetKind.DATE_PICKER, "2024-02-29T10:30:00", datetime(2024, 2, 29, 10, 30)),
            (WidgetKind.TIME, "08:15", time(8, 15)),
            (WidgetKind.UPLOAD, " /media/a.pdf ", "/media/a.pdf"),
            (WidgetKind.INTEGER, "", None),
            (WidgetKind.LINE, 7, "7"),
        ],
    )
    def test_to_python(self, kind: WidgetKind, raw: object, expected: object) -> None:
        assert registry.create(kind, "field").to_python(raw) == expected

    @pytest.mark.parametrize(
        "kind, raw",
        [
            (WidgetKind.INTEGER, "4.5"),
            (WidgetKind.INTEGER, "many"),
            (WidgetKind.DECIMAL, "1,5"),
            (WidgetKind.REAL, "x"),
            (WidgetKind.CHECKBOX, "maybe"),
            (WidgetKind.DATE_PICKER, "29/02/2024"),
            (WidgetKind.TIME, "noon"),
        ],
    )
    def test_invalid_input(self, kind: WidgetKind, raw: str) -> None:
        with pytest.raises(ValueError):
            registry.create(kind, "field").to_python(raw)

    def test_password_is_not_echoed(self) -> None:
        widget = registry.create(WidgetKind.PASSWORD, "secret").set_value("s3cret")
        assert widget.to_storage(widget.get_value()) == ""
        assert widget.to_python("") == "s3cret"
        assert widget.to_python("new") == "new"

    def test_readonly_ignores_submissions(self) -> None:
        widget = registry.create(WidgetKind.READONLY, "number").set_value("INV-1")
        assert widget.readonly
        assert widget.to_python("INV-2") == "INV-1"
        assert widget.get_schema()["readonly"] is True

    def test_dates_are_stored_as_iso_strings(self) -> None:
        widget = registry.create(WidgetKind.DATE_PICKER, "due")
        assert widget.to_storage(date(2024, 1, 2)) == "2024-01-02"
        widget.set_value(datetime(2024, 1, 2, 3, 4))
        assert widget.get_schema()["format"] == "datetime-local"


class TestValueLists:
    def test_normalize_choices_forms(self) -> None:
        assert normalize_choices({"a": "Alpha"}) == [Choice(const="a", title="Alpha")]
        assert normalize_choices([(1, "One")]) == [Choice(const=1, title="One")]
        assert normalize_choices(["x"]) == [Choice(const="x", title="x")]
        assert normalize_choices([{"value": 2, "label": "Two"}]) == [Choice(const=2, title="Two")]
        assert normalize_choices(Color) == [
            Choice(const="dark_red", title="Dark Red"),
            Choice(const="blue", title="Blue"),
        ]
        assert normalize_choices(None) == []

    def test_dropdown_schema_with_empty_choice(self) -> None:
        widget = DropdownWidget("status").set_value_list(["draft", "sent"])
        widget.set_empty_choice("- no value -")
        schema = widget.get_schema()
        assert schema["type"] == ["string", "null"]
        assert schema["enum"] == [None, "draft", "sent"]
        assert schema["options"]["enum_titles"] == ["- no value -", "draft", "sent"]
        assert schema["format"] == "select"

    def test_radio_schema_with_integer_values(self) -> None:
        widget = RadioWidget("rating").set_value_list({1: "Bad", 2: "Good"})
        schema = widget.get_schema()
        assert schema["type"] == "integer"
        assert schema["format"] == "radio"
        assert schema["enum"] == [1, 2]

    def test_dropdown_to_python(self) -> None:
        widget = DropdownWidget("customer").set_value_list({1: "Acme", 2: "Globex"})
        assert widget.to_python("2") == 2
        assert widget.to_python("") is None
        with pytest.raises(ValueError):
            widget.to_python("3")

    async def test_prefetch_uses_reference_model(self) -> None:
        class Source:
            async def fetch_choices(self) -> list[Choice]:
                return [Choice(const=5, title="Five")]

        widget = DropdownWidget("customer").bind_reference_model(Source())
        await widget.prefetch()
        assert widget.value_list == [Choice(const=5, title="Five")]

    async def test_prefetch_without_reference_keeps_values(self) -> None:
        widget = DropdownWidget("status").set_value_list(["draft"])
        await widget.prefetch()
        assert [c.const for c in widget.value_list] == ["draft"]


# The End
