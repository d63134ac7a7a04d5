# -*- coding: utf-8 -*-
"""
GRIB2 → JSON 変換サービス
"""
from datetime import datetime
from typing import Any, Dict, List, Optional, Union
import json
import logging

import requests

from ..config import ConfigService
from ..exceptions import Grib2DownloadError, Grib2FormatError
from ..models import Grib2Message, HEADER_FIELDS
from .message_framer import split_messages, split_sections
from .section_decoders import decode_section


logger = logging.getLogger(__name__)

UNKNOWN = 'unknown'


def header_value(value: Any) -> Any:
    """ヘッダー値の取り出し（.value を持つ値は中身を使う、欠落は'unknown'）"""
    if value is None:
        return UNKNOWN
    inner = getattr(value, 'value', None)
    if inner:
        return inner
    return value


def build_ref_time(accumulator: Dict[str, Any]) -> str:
    """
    参照時刻（ISO8601, UTC）を生成

    month は0始まりで扱う（@cambecc/grib2json 互換）。
    組み立てられない場合は "Unknown"。
    """
    try:
        ref_time = datetime(
            accumulator['year'],
            accumulator['month'] + 1,
            accumulator['day'],
            accumulator['hour'],
            accumulator['minute'],
            accumulator['seconds'],
        )
        return ref_time.isoformat(timespec='milliseconds') + 'Z'
    except (KeyError, TypeError, ValueError, OverflowError) as e:
        logger.warning(f"refTime生成失敗: {type(e).__name__} {e}")
    return "Unknown"


class Grib2Service:
    """GRIB2データ処理サービス"""

    def __init__(self, config: Optional[ConfigService] = None):
        self.session = requests.Session()
        self.config = config or ConfigService()
        # 設定ファイルからproxy設定を取得
        self._setup_proxy()

    def _setup_proxy(self):
        """設定ファイルからproxy設定をセットアップ"""
        proxy_config = self.config.get_proxy_config()
        http_proxy = proxy_config.get('http')
        https_proxy = proxy_config.get('https') or http_proxy

        if http_proxy:
            proxies = {
                'http': http_proxy,
                'https': https_proxy
            }
            self.session.proxies.update(proxies)
            logger.info(f"Proxy設定: HTTP={http_proxy}, HTTPS={https_proxy}")
        else:
            logger.info("Proxy設定なし（直接接続）")

    def download_file(self, url: str) -> bytes:
        """GRIB2ファイルダウンロード（1回のみ、リトライなし）"""
        grib2_config = self.config.get_grib2_config()
        timeout = grib2_config['download_timeout']
        min_size = grib2_config['min_size']

        logger.info(f"ダウンロード開始: {url}")
        try:
            response = self.session.get(url, timeout=timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            logger.error(f"HTTPエラー: status={status}, url={url}")
            raise Grib2DownloadError(f"status={status}, url={url}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"ダウンロードエラー: {url} - {e}")
            raise Grib2DownloadError(f"{type(e).__name__} {e}") from e

        content = response.content
        if len(content) < min_size:
            logger.error(f"GRIB2が短すぎます: {len(content)} bytes")
            raise Grib2DownloadError(f"aborting: grib too short ({len(content)} bytes)")

        logger.info(f"ダウンロード完了: {url} ({len(content):,} bytes)")
        return content

    def decode_message(self, raw_message: bytes,
                       accumulator: Optional[Dict[str, Any]] = None) -> Grib2Message:
        """1メッセージ分のデコード"""
        if accumulator is None:
            accumulator = {}

        sections = split_sections(raw_message)
        for number, section in sections.present():
            accumulator.update(decode_section(number, section, accumulator))

        return self.build_message(accumulator)

    def build_message(self, accumulator: Dict[str, Any]) -> Grib2Message:
        """蓄積したフィールドから出力レコードを作成"""
        accumulator['refTime'] = build_ref_time(accumulator)
        accumulator['gridUnits'] = "degrees"

        header = {key: header_value(accumulator.get(key)) for key in HEADER_FIELDS}
        return Grib2Message(header=header, data=accumulator.get('data'))

    def parse_grib(self, grib: Union[bytes, bytearray, memoryview]) -> List[Grib2Message]:
        """GRIB2バッファ全体をデコード"""
        grib = bytes(grib)
        grib2_config = self.config.get_grib2_config()
        if len(grib) < grib2_config['min_size']:
            logger.error(f"GRIB2が短すぎます: {len(grib)} bytes")
            raise Grib2FormatError(f"grib too short ({len(grib)} bytes)")

        reset = grib2_config['reset_accumulator']
        accumulator: Dict[str, Any] = {}
        messages = []

        for raw_message in split_messages(grib):
            if reset:
                accumulator = {}
            messages.append(self.decode_message(raw_message, accumulator))

        logger.info(f"GRIB2解析完了: {len(messages)}メッセージ")
        return messages

    def parse_grib_file(self, file_path: str) -> List[Grib2Message]:
        """GRIB2ファイル解析（ファイルパス版）"""
        with open(file_path, 'rb') as f:
            data = f.read()
        return self.parse_grib(data)

    def to_json(self, messages: List[Grib2Message]) -> str:
        """デコード結果をインデント付きJSONに変換"""
        return json.dumps([message.to_dict() for message in messages],
                          indent=self.config.get_output_indent())

    def grib2json(self, source: Union[str, bytes, bytearray, memoryview]) -> str:
        """
        GRIB2 → JSON 変換

        Args:
            source: URL（ダウンロードする）またはダウンロード済みのバイト列

        Returns:
            インデント付きJSON文字列
        """
        if isinstance(source, str):
            grib = self.download_file(source)
        elif isinstance(source, (bytes, bytearray, memoryview)):
            grib = source
        else:
            raise TypeError(f"Unsupported GRIB2 source: {type(source).__name__}")

        return self.to_json(self.parse_grib(grib))

    def grib2json_from_file(self, file_path: str) -> str:
        """GRIB2 → JSON 変換（ファイルパス版）"""
        return self.to_json(self.parse_grib_file(file_path))
