# -*- coding: utf-8 -*-
"""
schema

Descriptor models shared by adapters, widgets and the binding engine.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .descriptors import Choice, FieldDescriptor, FieldKind, ModelDescriptor, Relation

__all__ = ["Choice", "FieldDescriptor", "FieldKind", "ModelDescriptor", "Relation"]

# The End
