# -*- coding: utf-8 -*-
"""
GRIB2 → JSON APIコントローラー
"""
from flask import Response, request, jsonify
import logging

from ... import __version__
from ...config import ConfigService
from ...exceptions import Grib2DownloadError, Grib2FormatError, UnsupportedTemplateError
from ...services import Grib2Service


logger = logging.getLogger(__name__)


class Grib2Controller:
    """GRIB2 → JSON APIコントローラー"""

    def __init__(self, config: ConfigService = None):
        self.grib2_service = Grib2Service(config)

    def root(self):
        """ルートエンドポイント"""
        return jsonify({
            "message": "GRIB2 → JSON 変換 API",
            "version": __version__,
            "endpoints": [
                "GET  /",
                "GET  /api/health",
                "POST /api/grib2json"
            ]
        })

    def health_check(self):
        """ヘルスチェックエンドポイント"""
        return jsonify({
            "status": "success",
            "message": "GRIB2 → JSON 変換API稼働中",
            "version": __version__
        })

    def grib2json(self):
        """
        GRIB2 → JSON 変換エンドポイント

        JSON {"url": "..."} ならダウンロードして変換、
        それ以外はリクエストボディをGRIB2バイト列として変換する。
        """
        try:
            if request.is_json:
                data = request.get_json(silent=True) or {}
                url = data.get('url')
                if not url:
                    return jsonify({
                        "status": "error",
                        "message": "urlパラメータが必要です"
                    }), 400
                source = url
            else:
                source = request.get_data()
                if not source:
                    return jsonify({
                        "status": "error",
                        "message": "GRIB2データが必要です"
                    }), 400

            body = self.grib2_service.grib2json(source)
            return Response(body, mimetype='application/json')

        except (Grib2FormatError, UnsupportedTemplateError) as e:
            logger.error(f"GRIB2解析エラー: {e}")
            return jsonify({
                "status": "error",
                "message": str(e)
            }), 400
        except Grib2DownloadError as e:
            logger.error(f"GRIB2取得エラー: {e}")
            return jsonify({
                "status": "error",
                "message": str(e)
            }), 502
        except Exception as e:
            logger.error(f"GRIB2変換エラー: {e}")
            return jsonify({
                "status": "error",
                "message": str(e)
            }), 500
