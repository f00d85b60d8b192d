# -*- coding: utf-8 -*-
"""
upload

File upload and image widgets storing file paths.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Any, Dict

from .base import BaseWidget
from .kinds import WidgetKind
from .registry import registry


@registry.register(WidgetKind.UPLOAD)
class UploadWidget(BaseWidget):
    """Input holding the stored path of an uploaded file."""

    accept: str | None = None

    def get_schema(self) -> Dict[str, Any]:
        schema: Dict[str, Any] = {
            "type": "string",
            "title": self.get_title(),
            "format": "url",
            "options": {"upload": {"upload_handler": "formadminUpload"}},
        }
        if self.accept:
            schema["options"]["upload"]["accept"] = self.accept
        return self.merge_common(schema)

    def to_python(self, value: Any) -> Any:
        if value is None:
            return None
        value = str(value).strip()
        return value or None


@registry.register(WidgetKind.IMAGE)
class ImageWidget(UploadWidget):
    """Upload restricted to images."""

    accept = "image/*"

# The End
