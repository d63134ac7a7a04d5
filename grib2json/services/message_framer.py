# -*- coding: utf-8 -*-
"""
GRIB2メッセージ・セクション分割
"""
from typing import List
import logging

from ..exceptions import Grib2FormatError
from ..models import MessageSections, SectionNumber
from .scalar_codec import bytes_to_unsigned_int, bytes_to_str


logger = logging.getLogger(__name__)

END_MARKER = "7777"
SECTION0_LENGTH = 16
# セクション0: 第9〜16オクテットがメッセージ全長
MESSAGE_LENGTH_OFFSET = 8
MESSAGE_LENGTH_SIZE = 8
# セクション1〜7: 第1〜4オクテットが長さ、第5オクテットが番号
SECTION_HEADER_LENGTH = 5


def split_messages(grib: bytes) -> List[bytes]:
    """GRIB2バッファをメッセージ単位に分割"""
    messages = []
    position = 0
    total = len(grib)

    while position < total:
        start = position + MESSAGE_LENGTH_OFFSET
        message_length = bytes_to_unsigned_int(grib[start:start + MESSAGE_LENGTH_SIZE])

        if message_length < SECTION0_LENGTH:
            logger.error(f"メッセージ長が不正: offset={position}, length={message_length}")
            raise Grib2FormatError(
                f"Invalid message length {message_length} at offset {position}")
        if position + message_length > total:
            logger.error(f"メッセージが途中で切れています: offset={position}, "
                         f"length={message_length}, 残り={total - position}")
            raise Grib2FormatError(
                f"Truncated message at offset {position}: declared {message_length} bytes, "
                f"{total - position} available")

        messages.append(grib[position:position + message_length])
        position += message_length

    logger.debug(f"メッセージ分割完了: {len(messages)}件")
    return messages


def is_section8(span: bytes) -> bool:
    """セクション8（終端 "7777"）判定"""
    return bytes_to_str(span) == END_MARKER


def split_sections(message: bytes) -> MessageSections:
    """
    メッセージをセクション単位に分割

    セクション0は常に16バイト。以降は "7777"（セクション8）まで
    各セクションの長さ・番号を読んで切り出す。順序は保証されない。
    """
    sections = MessageSections(section0=message[:SECTION0_LENGTH])
    position = SECTION0_LENGTH
    total = len(message)

    while position < total:
        if is_section8(message[position:position + 4]):
            break

        section_length = bytes_to_unsigned_int(message[position:position + 4])
        if section_length < SECTION_HEADER_LENGTH or position + section_length > total:
            logger.error(f"セクション長が不正: offset={position}, length={section_length}")
            raise Grib2FormatError(
                f"Invalid section length {section_length} at offset {position}")

        number = message[position + 4]
        section = message[position:position + section_length]

        if SectionNumber.IDENTIFICATION <= number <= SectionNumber.DATA:
            if sections.get(number) is not None:
                logger.debug(f"セクション{number}が重複: 後のセクションで上書き")
            sections.set(number, section)
        else:
            sections.unknown.append((number, section))

        logger.debug(f"セクション{number}: offset={position}, length={section_length}")
        position += section_length

    return sections
