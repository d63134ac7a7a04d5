# -*- coding: utf-8 -*-
"""
GRIB2スカラー値変換（Big-Endian）
"""
import struct


def bytes_to_unsigned_int(span: bytes) -> int:
    """Big-Endian符号なし整数読み取り"""
    j = len(span)

    # struct.unpackを使用した高速Big-Endian変換
    if j == 1:
        return struct.unpack('>B', span)[0]
    elif j == 2:
        return struct.unpack('>H', span)[0]
    elif j == 4:
        return struct.unpack('>I', span)[0]
    elif j == 8:
        return struct.unpack('>Q', span)[0]

    # フォールバック: 任意長（7バイト長など）
    result = 0
    for byte_val in span:
        result = result * 256 + byte_val
    return result


def bytes_to_signed_int_9215(span: bytes) -> int:
    """
    符号付き整数読み取り（WMO規則92.1.5）

    先頭ビットが1なら負数。2の補数ではなく符号・絶対値表現。
    """
    if not span:
        return 0
    if span[0] & 0x80:
        magnitude = bytes([span[0] & 0x7F]) + bytes(span[1:])
        return -bytes_to_unsigned_int(magnitude)
    return bytes_to_unsigned_int(bytes(span))


def bytes_to_float32(span: bytes) -> float:
    """IEEE-754 単精度浮動小数点（Big-Endian）"""
    return struct.unpack('>f', bytes(span))[0]


def bytes_to_str(span: bytes) -> str:
    """マーカー文字列（"GRIB", "7777"）の読み取り"""
    return bytes(span).decode('ascii', errors='replace')
