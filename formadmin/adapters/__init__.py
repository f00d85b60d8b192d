# -*- coding: utf-8 -*-
"""
__init__

Model surfaces and ORM adapters.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

from .base import BaseAdapter
from .memory import RecordModel, RecordStore
from .registry import AdapterRegistry, registry

__all__ = ["BaseAdapter", "AdapterRegistry", "RecordModel", "RecordStore", "registry"]

# The End
