# -*- coding: utf-8 -*-
"""
base

Base class for ORM adapters.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any

from ..core.interface.model import ModelSurface
from ..schema.descriptors import ModelDescriptor


class BaseAdapter(ABC):
    """Translate ORM models into descriptors and model surfaces."""

    name: str = "base"

    @abstractmethod
    def get_model_descriptor(self, model: type[Any], **options: Any) -> ModelDescriptor:
        """Return metadata describing ``model``."""

    @abstractmethod
    def wrap(self, model: type[Any], instance: Any | None = None, **options: Any) -> ModelSurface:
        """Return a model surface for ``instance`` of ``model``."""


__all__ = ["BaseAdapter"]

# The End
