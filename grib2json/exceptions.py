# -*- coding: utf-8 -*-
"""
GRIB2デコード例外定義
"""


class Grib2Error(Exception):
    """GRIB2処理の基底例外"""


class Grib2FormatError(Grib2Error, ValueError):
    """GRIB2として解釈できない入力"""


class UnsupportedTemplateError(Grib2Error):
    """未対応テンプレート番号"""

    def __init__(self, section: int, template):
        self.section = int(section)
        self.template = template
        super().__init__(f"Section {section}: unsupported template {template}")


class Grib2DownloadError(Grib2Error):
    """GRIB2ファイル取得失敗"""
