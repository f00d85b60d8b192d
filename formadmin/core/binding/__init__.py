# -*- coding: utf-8 -*-
"""
binding

Model-to-form field binding engine.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .resolver import TYPE_ASSOCIATIONS, FieldTypeResolver, resolver
from .session import NO_FIELDS, BindingSession, FieldAssociation

__all__ = [
    "BindingSession",
    "FieldAssociation",
    "FieldTypeResolver",
    "NO_FIELDS",
    "TYPE_ASSOCIATIONS",
    "resolver",
]

# The End
