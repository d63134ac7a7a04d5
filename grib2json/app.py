# -*- coding: utf-8 -*-
"""
GRIB2 → JSON 変換システム API層
"""
from flask import Flask
from flask_cors import CORS
import logging

from .api.routes.grib2_routes import grib2_bp, init_grib2_routes
from .config import ConfigService


def create_app(config: ConfigService = None):
    """Flaskアプリケーション作成ファクトリー"""
    config = config or ConfigService()

    app = Flask(__name__)
    CORS(app)

    # ルート初期化
    init_grib2_routes(config)

    # Blueprint登録
    app.register_blueprint(grib2_bp)

    return app


if __name__ == '__main__':
    config = ConfigService()
    logging_config = config.get_logging_config()
    logging.basicConfig(level=logging_config['level'], format=logging_config['format'])
    logger = logging.getLogger(__name__)

    logger.info("GRIB2 → JSON 変換API起動")
    logger.info("利用可能エンドポイント:")
    logger.info("    GET  /")
    logger.info("    GET  /api/health")
    logger.info("    POST /api/grib2json")

    create_app(config).run(debug=True, host='0.0.0.0', port=5000)
