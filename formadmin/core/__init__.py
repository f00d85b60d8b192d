# -*- coding: utf-8 -*-
"""
core

Core of the form admin: model and form surfaces, field binding, layout,
add-ons and the admin shell.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .exceptions import ConfigurationError, FormAdminError, ValidationError

__all__ = ["ConfigurationError", "FormAdminError", "ValidationError"]

# The End
