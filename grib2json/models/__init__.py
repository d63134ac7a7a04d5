# -*- coding: utf-8 -*-
"""
データモデルパッケージ
"""

from .data_models import (
    SectionNumber, MessageSections, Grib2Message, HEADER_FIELDS
)
from .product_catalog import ProductInfo, PRODUCT_CATALOG, lookup_product

__all__ = [
    'SectionNumber',
    'MessageSections',
    'Grib2Message',
    'HEADER_FIELDS',
    'ProductInfo',
    'PRODUCT_CATALOG',
    'lookup_product'
]
