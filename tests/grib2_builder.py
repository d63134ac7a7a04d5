# -*- coding: utf-8 -*-
"""
テスト用GRIB2メッセージ組み立て
"""
import struct


def pack_9215(value: int, size: int) -> bytes:
    """符号・絶対値表現（WMO規則92.1.5）"""
    raw = abs(value).to_bytes(size, 'big')
    if value < 0:
        raw = bytes([raw[0] | 0x80]) + raw[1:]
    return raw


def pack_values(values, bits_per_value: int) -> bytes:
    """整数列を bits_per_value ビットずつ詰める（末尾は0埋め）"""
    bits = ''.join(format(v, f'0{bits_per_value}b') for v in values)
    bits += '0' * (-len(bits) % 8)
    return bytes(int(bits[i:i + 8], 2) for i in range(0, len(bits), 8))


def section0(discipline=0, edition=2, total_length=0, magic=b'GRIB'):
    return magic + b'\x00\x00' + bytes([discipline, edition]) + struct.pack('>Q', total_length)


def section1(center=7, subcenter=0, master=2, local=1, significance=1,
             year=2024, month=0, day=15, hour=12, minute=0, second=0,
             status=0, product_type=1):
    return struct.pack('>IBHHBBBHBBBBBBB', 21, 1, center, subcenter, master, local,
                       significance, year, month, day, hour, minute, second,
                       status, product_type)


def section2(payload=b''):
    return struct.pack('>IB', 5 + len(payload), 2) + payload


def section3(template=0, number_points=2, nx=2, ny=1, shape=6,
             la1=45000000, lo1=10000000, la2=44750000, lo2=10250000,
             dx=250000, dy=250000, resolution=48, scan_mode=0):
    body = bytearray(72)
    struct.pack_into('>IBBIBBH', body, 0, 72, 3, 0, number_points, 0, 0, template)
    body[14] = shape
    struct.pack_into('>II', body, 30, nx, ny)
    body[46:50] = pack_9215(la1, 4)
    struct.pack_into('>I', body, 50, lo1)
    body[54] = resolution
    body[55:59] = pack_9215(la2, 4)
    struct.pack_into('>IIIB', body, 59, lo2, dx, dy, scan_mode)
    return bytes(body)


def section4(template=0, category=0, number=0, gen_process_type=96,
             forecast_time=6, surface1_type=103, surface1_value=2,
             surface2_type=255, surface2_value=0):
    body = bytearray(34)
    struct.pack_into('>IBHHBBBBB', body, 0, 34, 4, 0, template, category, number,
                     2, gen_process_type, 0)
    body[17] = 1
    struct.pack_into('>IB', body, 18, forecast_time, surface1_type)
    struct.pack_into('>I', body, 24, surface1_value)
    body[28] = surface2_type
    struct.pack_into('>I', body, 30, surface2_value)
    return bytes(body)


def section5(template=0, n_points=2, reference_value=0.0, binary_scale=0,
             decimal_scale=0, bits_per_value=8, original_type=0):
    return (struct.pack('>IBIH', 21, 5, n_points, template)
            + struct.pack('>f', reference_value)
            + pack_9215(binary_scale, 2)
            + pack_9215(decimal_scale, 2)
            + bytes([bits_per_value, original_type]))


def section6(indicator=255, bitmap=b''):
    return struct.pack('>IBB', 6 + len(bitmap), 6, indicator) + bitmap


def section7(packed=b''):
    return struct.pack('>IB', 5 + len(packed), 7) + packed


def build_message(sections, discipline=0, magic=b'GRIB'):
    """セクション1〜7を連結し、セクション0・8を付ける"""
    body = b''.join(sections) + b'7777'
    return section0(discipline=discipline, total_length=16 + len(body), magic=magic) + body


def simple_message(values=(5, 200), bits_per_value=8, discipline=0, category=0,
                   number=0, grid_template=0, **section1_kwargs):
    """単純圧縮・ビットマップなしの標準メッセージ"""
    return build_message([
        section1(**section1_kwargs),
        section3(template=grid_template, number_points=len(values), nx=len(values)),
        section4(category=category, number=number),
        section5(n_points=len(values), bits_per_value=bits_per_value),
        section6(),
        section7(pack_values(values, bits_per_value)),
    ], discipline=discipline)
