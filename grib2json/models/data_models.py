# -*- coding: utf-8 -*-
"""
データモデル定義
GRIB2デコードで使用するデータクラス
"""
from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Dict, List, Optional, Tuple


class SectionNumber(IntEnum):
    """GRIB2セクション番号"""
    INDICATOR = 0
    IDENTIFICATION = 1
    LOCAL_USE = 2
    GRID_DEFINITION = 3
    PRODUCT_DEFINITION = 4
    DATA_REPRESENTATION = 5
    BITMAP = 6
    DATA = 7
    END = 8


# ヘッダーとして出力する項目（@cambecc/grib2json 互換）
HEADER_FIELDS = (
    'name', 'parameterName', 'discipline', 'gribEdition', 'center',
    'subcenter', 'refTime', 'significanceOfRT', 'productStatus',
    'productType', 'productDefinitionTemplate', 'parameterCategory',
    'parameterNumber', 'parameterUnit', 'genProcessType',
    'forecastTime', 'surface1Type', 'surface1Value', 'surface2Type',
    'surface2Value', 'gridDefinitionTemplate', 'numberPoints',
    'gridUnits', 'resolution', 'winds', 'scanMode', 'nx', 'ny',
    'basicAngle', 'lo1', 'la1', 'lo2', 'la2', 'dx', 'dy',
)


@dataclass
class MessageSections:
    """1メッセージ分のセクション（欠落セクションはNone）"""
    section0: bytes
    section1: Optional[bytes] = None
    section2: Optional[bytes] = None
    section3: Optional[bytes] = None
    section4: Optional[bytes] = None
    section5: Optional[bytes] = None
    section6: Optional[bytes] = None
    section7: Optional[bytes] = None
    unknown: List[Tuple[int, bytes]] = field(default_factory=list)

    def get(self, number: int) -> Optional[bytes]:
        return getattr(self, f"section{int(number)}", None)

    def set(self, number: int, section: bytes) -> None:
        setattr(self, f"section{int(number)}", section)

    def present(self) -> List[Tuple[int, bytes]]:
        """存在するセクションを番号順に返す（未知番号は末尾）"""
        result = []
        for number in range(SectionNumber.INDICATOR, SectionNumber.END):
            section = self.get(number)
            if section is not None:
                result.append((number, section))
        result.extend(self.unknown)
        return result


@dataclass
class Grib2Message:
    """デコード結果（1メッセージ）"""
    header: Dict[str, Any]
    data: Optional[List[Optional[float]]] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "header": self.header,
            "data": self.data,
        }
