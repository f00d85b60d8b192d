# -*- coding: utf-8 -*-
"""
exceptions

Custom domain exceptions for the form admin core.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from typing import Mapping


class FormAdminError(Exception):
    """Base class for form admin exceptions."""


class ConfigurationError(FormAdminError):
    """Raised when components are wired together incorrectly."""


class WidgetNotRegistered(ConfigurationError):
    """Raised when no widget class is registered for a widget kind."""


class PersistenceError(FormAdminError):
    """Raised by model surfaces when a record cannot be stored."""


class ValidationError(FormAdminError):
    """Raised when submitted form values fail widget validation."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        self.detail = "; ".join(self.errors.values())
        super().__init__(self.detail)


# --- HTTP-like domain errors -------------------------------------------------

class HTTPError(FormAdminError):
    """Base class for exceptions carrying an HTTP status code."""

    status_code: int = 500

    def __init__(self, detail: str | None = None) -> None:
        super().__init__(detail or "")
        self.detail = detail


class BadRequestError(HTTPError):
    """Raised when a request fails validation or is malformed."""

    status_code = 400


class NotFoundError(HTTPError):
    """Raised when a requested resource is not found."""

    status_code = 404


__all__ = [
    "FormAdminError",
    "ConfigurationError",
    "WidgetNotRegistered",
    "PersistenceError",
    "ValidationError",
    "HTTPError",
    "BadRequestError",
    "NotFoundError",
]

# The End
