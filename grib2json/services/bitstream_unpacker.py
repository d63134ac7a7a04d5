# -*- coding: utf-8 -*-
"""
単純圧縮（GRIB2テンプレート5.0/7.0）データの展開
"""
from decimal import Decimal, ROUND_HALF_UP
from typing import List, Optional
import logging
import math

import numpy as np

from ..exceptions import Grib2FormatError


logger = logging.getLogger(__name__)

ROUND_DIGITS = Decimal('0.0001')
MAX_BITS_PER_VALUE = 63


def round_half_up(value: float) -> Optional[float]:
    """
    小数点以下4桁に丸める（0.5は0から遠い方へ）

    2進値をそのまま10進展開して丸めるので、JavaScriptの toFixed(4) と一致する。
    """
    if not math.isfinite(value):
        return None
    rounded = float(Decimal(value).quantize(ROUND_DIGITS, rounding=ROUND_HALF_UP))
    # -0.0 → 0.0
    return rounded + 0.0


def bitmap_mask(bitmap: bytes, number_points: int) -> np.ndarray:
    """ビットマップ → bool配列（不足分は欠測扱い）"""
    bits = np.unpackbits(np.frombuffer(bytes(bitmap), dtype=np.uint8))[:number_points]
    mask = np.zeros(number_points, dtype=bool)
    mask[:len(bits)] = bits.astype(bool)
    return mask


def read_codewords(packed: bytes, bits_per_value: int, count: int) -> np.ndarray:
    """ビット列から bits_per_value ビットずつ count 個の符号なし整数を読み取る"""
    if count == 0 or bits_per_value == 0:
        return np.zeros(count, dtype=np.int64)
    if bits_per_value > MAX_BITS_PER_VALUE:
        raise Grib2FormatError(f"Unsupported bits per value: {bits_per_value}")

    needed = bits_per_value * count
    bits = np.unpackbits(np.frombuffer(bytes(packed), dtype=np.uint8))
    if len(bits) < needed:
        logger.error(f"データ不足: 必要={needed}bit, 実際={len(bits)}bit")
        raise Grib2FormatError(
            f"Packed data too short: need {needed} bits, have {len(bits)}")

    # 先頭ビットが最上位
    words = bits[:needed].reshape(count, bits_per_value).astype(np.int64)
    weights = np.left_shift(np.int64(1), np.arange(bits_per_value - 1, -1, -1, dtype=np.int64))
    return words @ weights


def unpack_simple_packing(packed: bytes, bits_per_value: int, number_points: int,
                          reference_value: float, binary_scale_factor: int,
                          decimal_scale_factor: int,
                          bitmap: Optional[bytes] = None) -> List[Optional[float]]:
    """
    単純圧縮データを物理値に展開

    Y = (R + X * 2^E) / 10^D

    Args:
        packed: セクション7のデータ部
        bits_per_value: 1格子点値当たりのビット数
        number_points: 格子点数
        reference_value: 参照値 R
        binary_scale_factor: 二進尺度因子 E
        decimal_scale_factor: 十進尺度因子 D
        bitmap: ビットマップ（0の格子点は欠測。ビット列の読み取り位置は進めない）

    Returns:
        格子点値リスト（欠測はNone）
    """
    if bitmap is not None:
        mask = bitmap_mask(bitmap, number_points)
    else:
        mask = np.ones(number_points, dtype=bool)

    present = int(mask.sum())
    raw = read_codewords(packed, bits_per_value, present)

    c1 = 2.0 ** binary_scale_factor
    c2 = 10.0 ** decimal_scale_factor
    physical = (reference_value + raw.astype(np.float64) * c1) / c2

    values: List[Optional[float]] = [None] * number_points
    for index, value in zip(np.flatnonzero(mask), physical.tolist()):
        values[index] = round_half_up(value)

    return values
