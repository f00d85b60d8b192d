# -*- coding: utf-8 -*-
"""
contrib

Optional integrations shipped with the form admin.

Version:0.1.0
Author: Timur Kady
Email: timurkady@yandex.com
"""

# The End
