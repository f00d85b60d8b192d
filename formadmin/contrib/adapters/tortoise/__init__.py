# -*- coding: utf-8 -*-
"""
tortoise

Tortoise ORM integration.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .adapter import TortoiseAdapter, TortoiseChoiceSource, TortoiseModel, adapter, tortoise_adapter

__all__ = ["TortoiseAdapter", "TortoiseChoiceSource", "TortoiseModel", "adapter", "tortoise_adapter"]

# The End
