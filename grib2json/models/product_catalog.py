# -*- coding: utf-8 -*-
"""
プロダクト（気象要素）マスターデータ
(discipline, parameterCategory, parameterNumber) → 単位・略称・名称
"""
from dataclasses import dataclass
from types import MappingProxyType
from typing import Optional


@dataclass(frozen=True)
class ProductInfo:
    """気象要素の表示情報"""
    unit: str
    short_name: str
    name: str


PRODUCT_CATALOG = MappingProxyType({
    # Discipline 0 - Meteorology
    #     Category 0 - Temperature
    (0, 0, 0): ProductInfo("K", "TMP", "Temperature"),
    (0, 0, 6): ProductInfo("K", "DPT", "Dew Point Temperature"),
    (0, 0, 12): ProductInfo("K", "HEATX", "Heat Index"),
    (0, 0, 13): ProductInfo("K", "WCF", "Wind Chill Factor"),
    #     Category 1 - Moisture
    (0, 1, 1): ProductInfo("%", "RH", "Relative Humidity"),
    (0, 1, 3): ProductInfo("kg m-2", "PWAT", "Precipitable Water"),
    (0, 1, 7): ProductInfo("kg m-2 s-1", "PRATE", "Precipitation Rate"),
    (0, 1, 19): ProductInfo("*", "PTYPE", "Precipitation Type"),
    (0, 1, 51): ProductInfo("kg/m-2", "TCWAT", "Total Column Water"),
    (0, 1, 52): ProductInfo("kg/m-2", "TPRATE", "Total Precipitation Rate"),
    (0, 1, 78): ProductInfo("kg/m-2", "TCOLWA", "Total Column Integrated Water"),
    #     Category 2 - Momentum
    (0, 2, 2): ProductInfo("m/s", "UGRD", "U-Component of Wind"),
    (0, 2, 3): ProductInfo("m/s", "VGRD", "V-Component of Wind"),
    #     Category 3 - Mass
    (0, 3, 1): ProductInfo("Pa", "PRMSL", "Pressure Reduced to MSL"),
    #     Category 4 - Short-wave Radiation
    (0, 4, 10): ProductInfo("W/m-2", "PHOTAR", "Photosynthetically Active Radiation"),
    (0, 4, 51): ProductInfo("", "UVI", "UV Index"),
    #     Category 6 - Cloud
    (0, 6, 1): ProductInfo("%", "TCDC", "Total Cloud Cover"),
    (0, 6, 3): ProductInfo("%", "LCDC", "Low Cloud Cover"),
    (0, 6, 4): ProductInfo("%", "MCDC", "Medium Cloud Cover"),
    (0, 6, 5): ProductInfo("%", "HCDC", "High Cloud Cover"),
    #     Category 7 - Thermodynamic Stability
    (0, 7, 6): ProductInfo("J/kg", "CAPE", "Convective Available Potential Energy"),
    (0, 7, 21): ProductInfo("", "SSI", "Storm Severity Index"),
    (0, 17, 192): ProductInfo("", "LTNG", "Lightning"),
    (0, 19, 0): ProductInfo("m", "VIS", "Visibility"),
    (0, 19, 25): ProductInfo("", "WW", "Weather Interpretation"),
    # Discipline 1 - Hydrology
    (1, 1, 11): ProductInfo("m", "SNOD", "Snow Depth"),
    # Discipline 3 - Satellite Remote Sensing
    (3, 5, 0): ProductInfo("K", "ISSTMP", "Interface Sea Surface Temperture"),
    (3, 5, 1): ProductInfo("K", "SKSSTMP", "Skin Sea Surface Temperature"),
    # Discipline 10 - Oceanographic Products
    #     Category 1 - Currents
    (10, 1, 2): ProductInfo("m/s", "UOGRG", "U-Component of Current"),
    (10, 1, 3): ProductInfo("m/s", "VOGRD", "V-Component of Current"),
})


def lookup_product(discipline, category, number) -> Optional[ProductInfo]:
    """マスター検索（該当なしはNone）"""
    return PRODUCT_CATALOG.get((discipline, category, number))
