# -*- coding: utf-8 -*-
"""
formadmin

Admin scaffolding for FastAPI: fluid layout, add-ons and forms bound to
ORM models.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from .conf import FormAdminSettings, configure, current_settings
from .core.binding import NO_FIELDS, BindingSession, FieldAssociation, FieldTypeResolver
from .core.exceptions import ConfigurationError, FormAdminError, PersistenceError, ValidationError
from .core.form import Form
from .core.interface.model import ModelSurface, Reference
from .widgets import WidgetKind

__version__ = "0.1.0"

__all__ = [
    "BindingSession",
    "ConfigurationError",
    "FieldAssociation",
    "FieldTypeResolver",
    "Form",
    "FormAdminError",
    "FormAdminSettings",
    "ModelSurface",
    "NO_FIELDS",
    "PersistenceError",
    "Reference",
    "ValidationError",
    "WidgetKind",
    "configure",
    "current_settings",
]

# The End
