# -*- coding: utf-8 -*-
"""
GRIB2セクション別デコーダー

オクテット番号はWMO/NCEPの資料と同じ1始まりで記述する。
https://www.nco.ncep.noaa.gov/pmb/docs/grib2/grib2_doc/
"""
from types import MappingProxyType
from typing import Any, Dict, Mapping
import logging

from ..exceptions import Grib2FormatError, UnsupportedTemplateError
from ..models import SectionNumber, lookup_product
from .bitstream_unpacker import unpack_simple_packing
from .scalar_codec import (
    bytes_to_unsigned_int, bytes_to_signed_int_9215, bytes_to_float32, bytes_to_str
)


logger = logging.getLogger(__name__)

# 緯度経度・格子間隔の単位（10^-6 度）
DEGREE_SCALE = 10e5
# 分解能及び成分フラグ: 風の成分が地球基準
WINDS_EARTH_RELATIVE = 32
BITMAP_APPLIES = 0
BITMAP_NOT_APPLIED = 255


def _octet(section: bytes, n: int) -> int:
    return section[n - 1]


def _octets(section: bytes, first: int, last: int) -> bytes:
    return section[first - 1:last]


def _uint(section: bytes, first: int, last: int) -> int:
    return bytes_to_unsigned_int(_octets(section, first, last))


def _int9215(section: bytes, first: int, last: int) -> int:
    return bytes_to_signed_int_9215(_octets(section, first, last))


def _require_length(section: bytes, minimum: int, number: int) -> None:
    """固定配置を読むのに必要な長さがあるか確認"""
    number = int(number)
    if len(section) < minimum:
        logger.error(f"セクション{number}が短すぎます: length={len(section)}, 必要={minimum}")
        raise Grib2FormatError(
            f"Section {number} too short: {len(section)} bytes, need {minimum}")


def _common(section: bytes) -> Dict[str, Any]:
    """セクション1〜7共通: 長さ・番号"""
    return {
        'length': _uint(section, 1, 4),
        'numberOfSection': _octet(section, 5),
    }


# ---------------------------------------------------------------------------
# セクション0: 指示節
# ---------------------------------------------------------------------------
def decode_section0(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    magic = bytes_to_str(_octets(section, 1, 4))
    if magic != "GRIB":
        logger.error("GRIB2ファイルではありません（マジック不一致）")
        raise Grib2FormatError(f"Probably not a GRIB2 file: magic={magic!r}")

    return {
        'length': 16,
        'numberOfSection': 0,
        'magic': magic,
        'discipline': _octet(section, 7),
        'gribEdition': _octet(section, 8),
        'lengthOfMessage': _uint(section, 9, 16),
    }


# ---------------------------------------------------------------------------
# セクション1: 識別節
# ---------------------------------------------------------------------------
def decode_section1(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    _require_length(section, 21, SectionNumber.IDENTIFICATION)
    info = _common(section)
    info.update({
        # https://www.nco.ncep.noaa.gov/pmb/docs/on388/table0.html
        'center': _uint(section, 6, 7),
        'subcenter': _uint(section, 8, 9),
        'gribEdition': _octet(section, 10),
        'version': _octet(section, 11),
        # 表1.2 参照時刻の意味
        'significanceOfRT': _octet(section, 12),
        'year': _uint(section, 13, 14),
        'month': _octet(section, 15),
        'day': _octet(section, 16),
        'hour': _octet(section, 17),
        'minute': _octet(section, 18),
        'seconds': _octet(section, 19),
        'productStatus': _octet(section, 20),
        'productType': _octet(section, 21),
    })
    return info


# ---------------------------------------------------------------------------
# セクション2: 地域使用節（内容は解釈しない）
# ---------------------------------------------------------------------------
def decode_section2(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    _require_length(section, 5, SectionNumber.LOCAL_USE)
    return _common(section)


# ---------------------------------------------------------------------------
# セクション3: 格子系定義節
# ---------------------------------------------------------------------------
def grid_definition_template0(section: bytes) -> Dict[str, Any]:
    """格子系定義テンプレート3.0（緯度・経度格子）"""
    _require_length(section, 72, SectionNumber.GRID_DEFINITION)
    resolution = _octet(section, 55)
    return {
        'shape': _octet(section, 15),
        'scaleFactorRadius1': _octet(section, 16),
        'scaleFactorRadius2': _uint(section, 17, 20),
        'nx': _uint(section, 31, 34),
        'ny': _uint(section, 35, 38),
        'basicAngle': _uint(section, 39, 42) / DEGREE_SCALE,
        'la1': _int9215(section, 47, 50) / DEGREE_SCALE,
        'lo1': _uint(section, 51, 54) / DEGREE_SCALE,
        'resolution': resolution,
        'winds': "true" if resolution & WINDS_EARTH_RELATIVE else "relative",
        'la2': _int9215(section, 56, 59) / DEGREE_SCALE,
        'lo2': _uint(section, 60, 63) / DEGREE_SCALE,
        'dx': _uint(section, 64, 67) / DEGREE_SCALE,
        'dy': _uint(section, 68, 71) / DEGREE_SCALE,
        'scanMode': _octet(section, 72),
    }


def decode_section3(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    _require_length(section, 14, SectionNumber.GRID_DEFINITION)
    template = _uint(section, 13, 14)

    info = _common(section)
    info.update({
        'sourceOfGridDefinition': _octet(section, 6),
        'numberPoints': _uint(section, 7, 10),
        'numberOfOctets': _octet(section, 11),
        'interpretationList': _octet(section, 12),
        'gridDefinitionTemplate': template,
    })

    if template == 0:
        info.update(grid_definition_template0(section))
    else:
        logger.error(f"未対応の格子系定義テンプレート: 3.{template}")
        raise UnsupportedTemplateError(SectionNumber.GRID_DEFINITION, template)

    return info


# ---------------------------------------------------------------------------
# セクション4: プロダクト定義節
# ---------------------------------------------------------------------------
def product_definition_template0(section: bytes) -> Dict[str, Any]:
    """
    プロダクト定義テンプレート4.0（ある時刻の水平面格子点値）
    テンプレート4.2も同じ配置で読める
    """
    _require_length(section, 34, SectionNumber.PRODUCT_DEFINITION)
    return {
        'parameterCategory': _octet(section, 10),
        'parameterNumber': _octet(section, 11),
        'typeOfGeneratingProcess': _octet(section, 12),
        'genProcessType': _octet(section, 13),
        'forecastGeneratingProcess': _octet(section, 14),
        'hoursAfterReferenceTime': _uint(section, 15, 16),
        'forecastTime': _uint(section, 19, 22),
        'surface1Type': _octet(section, 23),
        'surface1Value': _uint(section, 25, 28),
        'surface2Type': _octet(section, 29),
        'surface2Value': _uint(section, 31, 34),
    }


def decode_section4(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    _require_length(section, 9, SectionNumber.PRODUCT_DEFINITION)
    template = _uint(section, 8, 9)

    info = _common(section)
    info.update({
        'numberOfCoordinateValuesAfterTemplate': _uint(section, 6, 7),
        'productDefinitionTemplate': template,
    })

    if template in (0, 2):
        info.update(product_definition_template0(section))
    else:
        logger.error(f"未対応のプロダクト定義テンプレート: 4.{template}")
        raise UnsupportedTemplateError(SectionNumber.PRODUCT_DEFINITION, template)

    product = lookup_product(accumulator.get('discipline'),
                             info['parameterCategory'], info['parameterNumber'])
    if product is not None:
        info['parameterUnit'] = product.unit or "unknown"
        info['parameterName'] = product.short_name or "unknown"
        info['name'] = product.name or "unknown"

    return info


# ---------------------------------------------------------------------------
# セクション5: 資料表現節
# ---------------------------------------------------------------------------
def data_representation_template0(section: bytes) -> Dict[str, Any]:
    """資料表現テンプレート5.0（単純圧縮）"""
    _require_length(section, 21, SectionNumber.DATA_REPRESENTATION)
    return {
        'referenceValue': bytes_to_float32(_octets(section, 12, 15)),
        'binaryScaleFactor': _int9215(section, 16, 17),
        'decimalScaleFactor': _int9215(section, 18, 19),
        'nBits': _octet(section, 20),
        'typeOfOriginalFieldValues': 'int' if _octet(section, 21) else 'float',
    }


def decode_section5(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    _require_length(section, 11, SectionNumber.DATA_REPRESENTATION)
    template = _uint(section, 10, 11)

    info = _common(section)
    info.update({
        'nPoints': _uint(section, 6, 9),
        'dataRepresentationTemplateNumber': template,
    })

    if template == 0:
        info.update(data_representation_template0(section))
    else:
        logger.error(f"未対応の資料表現テンプレート: 5.{template}")
        raise UnsupportedTemplateError(SectionNumber.DATA_REPRESENTATION, template)

    return info


# ---------------------------------------------------------------------------
# セクション6: ビットマップ節
# ---------------------------------------------------------------------------
def decode_section6(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    _require_length(section, 6, SectionNumber.BITMAP)
    info = _common(section)
    indicator = _octet(section, 6)
    if indicator != BITMAP_NOT_APPLIED:
        logger.warning(f"ビットマップ指示符={indicator}: 正しく処理できない可能性があります")

    length = info['length']
    info['bitMapIndicator'] = indicator
    info['bitMapData'] = _octets(section, 7, length) if length > 6 else None
    return info


# ---------------------------------------------------------------------------
# セクション7: 資料節
# ---------------------------------------------------------------------------
def decode_section7(section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    _require_length(section, 5, SectionNumber.DATA)
    info = _common(section)

    template = accumulator.get('dataRepresentationTemplateNumber')
    if template != 0:
        logger.error(f"資料節を展開できません: 資料表現テンプレート 5.{template}")
        raise UnsupportedTemplateError(SectionNumber.DATA, template)

    number_points = accumulator.get('numberPoints')
    if number_points is None:
        number_points = accumulator.get('nPoints', 0)

    bitmap = None
    if accumulator.get('bitMapData') and accumulator.get('bitMapIndicator') == BITMAP_APPLIES:
        bitmap = accumulator['bitMapData']

    info['data'] = unpack_simple_packing(
        _octets(section, 6, info['length']),
        accumulator.get('nBits', 0),
        number_points,
        accumulator.get('referenceValue', 0.0),
        accumulator.get('binaryScaleFactor', 0),
        accumulator.get('decimalScaleFactor', 0),
        bitmap,
    )
    return info


SECTION_DECODERS = MappingProxyType({
    SectionNumber.INDICATOR: decode_section0,
    SectionNumber.IDENTIFICATION: decode_section1,
    SectionNumber.LOCAL_USE: decode_section2,
    SectionNumber.GRID_DEFINITION: decode_section3,
    SectionNumber.PRODUCT_DEFINITION: decode_section4,
    SectionNumber.DATA_REPRESENTATION: decode_section5,
    SectionNumber.BITMAP: decode_section6,
    SectionNumber.DATA: decode_section7,
})


def decode_section(number: int, section: bytes, accumulator: Mapping[str, Any]) -> Dict[str, Any]:
    """セクション番号に応じてデコード（未知の番号は警告してスキップ）"""
    decoder = SECTION_DECODERS.get(number)
    if decoder is None:
        logger.warning(f"不明なセクション番号: {number}")
        return {}
    return decoder(section, accumulator)
