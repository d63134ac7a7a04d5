# -*- coding: utf-8 -*-
"""
GRIB2 → JSON 変換パッケージ
"""

__version__ = "1.0.0"
