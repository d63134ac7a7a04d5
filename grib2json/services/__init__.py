# -*- coding: utf-8 -*-
"""
サービス層モジュール
"""

from .grib2_service import Grib2Service

__all__ = [
    'Grib2Service'
]
