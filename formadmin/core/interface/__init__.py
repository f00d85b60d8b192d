# -*- coding: utf-8 -*-
"""
interface

Contracts the binding engine expects from its collaborators.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .model import AFTER_LOAD, ModelSurface, Reference

__all__ = ["AFTER_LOAD", "ModelSurface", "Reference"]

# The End
