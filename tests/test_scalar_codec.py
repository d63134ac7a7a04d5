# -*- coding: utf-8 -*-
"""
スカラー値変換のテスト
"""
import struct

from grib2json.services.scalar_codec import (
    bytes_to_unsigned_int, bytes_to_signed_int_9215, bytes_to_float32, bytes_to_str
)


def test_unsigned_int_struct_sizes():
    assert bytes_to_unsigned_int(b'\xff') == 255
    assert bytes_to_unsigned_int(b'\x01\x00') == 256
    assert bytes_to_unsigned_int(b'\x00\x01\x00\x00') == 65536
    assert bytes_to_unsigned_int(struct.pack('>Q', 2 ** 40 + 5)) == 2 ** 40 + 5


def test_unsigned_int_odd_lengths():
    # 7バイト長（メッセージ全長など）
    assert bytes_to_unsigned_int(b'\x00\x00\x00\x00\x00\x01\x02') == 258
    assert bytes_to_unsigned_int(b'\x01\x00\x00') == 65536
    assert bytes_to_unsigned_int(b'') == 0


def test_signed_int_9215_sign_magnitude():
    assert bytes_to_signed_int_9215(bytes([0x80, 0x01])) == -1
    assert bytes_to_signed_int_9215(bytes([0x00, 0x01])) == 1
    # 2の補数ではない
    assert bytes_to_signed_int_9215(bytes([0xFF, 0xFF])) == -32767
    assert bytes_to_signed_int_9215(bytes([0x80, 0x00])) == 0


def test_signed_int_9215_does_not_mutate_input():
    span = bytearray([0x80, 0x05])
    assert bytes_to_signed_int_9215(span) == -5
    assert span == bytearray([0x80, 0x05])


def test_float32():
    assert bytes_to_float32(struct.pack('>f', 1.5)) == 1.5
    assert bytes_to_float32(struct.pack('>f', -273.25)) == -273.25


def test_marker_string():
    assert bytes_to_str(b'GRIB') == 'GRIB'
    assert bytes_to_str(b'7777') == '7777'
