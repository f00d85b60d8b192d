# -*- coding: utf-8 -*-
"""
test_form

Verify form field management, submission handling and schema output.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from decimal import Decimal

import pytest

from formadmin.core.exceptions import ConfigurationError, ValidationError
from formadmin.core.form import UPDATE, Form
from formadmin.widgets import WidgetKind
from tests.sample_models import make_invoice


class TestFields:
    def test_add_and_read_fields(self) -> None:
        form = Form("profile")
        form.add_field(WidgetKind.LINE, "name", "Full name")
        form.add_field("checkbox", "active")
        form.set_field_value("name", "Ann")

        assert form.list_elements() == ["name", "active"]
        assert form.get_field_value("name") == "Ann"
        assert form.get_field("name").caption == "Full name"
        assert repr(form) == "<Form profile fields=['name', 'active']>"

    def test_duplicate_name_is_rejected(self) -> None:
        form = Form()
        form.add_field(WidgetKind.LINE, "name")
        with pytest.raises(ConfigurationError):
            form.add_field(WidgetKind.TEXT, "name")

    def test_unknown_field(self) -> None:
        with pytest.raises(ConfigurationError):
            Form().get_field("missing")


class TestSubmission:
    def test_load_converts_and_skips_unknown(self) -> None:
        form = Form()
        form.add_field(WidgetKind.INTEGER, "count")
        form.add_field(WidgetKind.READONLY, "number").set_value("INV-1")

        form.load({"count": "3", "number": "INV-9", "extra": "ignored"})

        assert form.get_field_value("count") == 3
        assert form.get_field_value("number") == "INV-1"

    def test_load_collects_conversion_errors(self) -> None:
        form = Form()
        form.add_field(WidgetKind.INTEGER, "count")
        form.add_field(WidgetKind.DATE_PICKER, "due")

        with pytest.raises(ValidationError) as info:
            form.load({"count": "many", "due": "tomorrow"})

        assert set(info.value.errors) == {"count", "due"}

    async def test_update_without_session_only_validates(self) -> None:
        form = Form()
        form.add_field(WidgetKind.LINE, "name").attach_not_null_validator("Required")

        with pytest.raises(ValidationError):
            await form.update()
        assert await form.update({"name": "Ann"}) == []

    async def test_update_fires_custom_hooks(self) -> None:
        form = Form()
        form.add_field(WidgetKind.LINE, "name")
        calls: list[str] = []
        form.hooks.add_hook(UPDATE, lambda f: calls.append(f.get_field_value("name")))

        await form.update({"name": "Bob"})

        assert calls == ["Bob"]


class TestPresentation:
    async def test_schema_and_values_of_bound_form(self) -> None:
        invoice = make_invoice(amount=Decimal("10.00"), status="sent")
        form = Form("invoice", title="Invoice")
        form.set_model(invoice, ["amount", "status", "notes"])
        await form.prefetch()

        schema = form.get_schema()
        values = form.get_values()

        assert schema["title"] == "Invoice"
        assert list(schema["properties"]) == ["amount", "status", "notes"]
        assert schema["required"] == ["amount"]
        assert schema["properties"]["amount"]["multipleOf"] == 0.01
        assert schema["properties"]["status"]["enum"] == [None, "draft", "sent", "paid"]
        assert schema["properties"]["notes"]["format"] == "textarea"
        assert values == {"amount": Decimal("10.00"), "status": "sent", "notes": None}

    def test_schema_title_defaults_to_name(self) -> None:
        schema = Form("empty").get_schema()
        assert schema == {"type": "object", "title": "empty", "properties": {}}


# The End
