# -*- coding: utf-8 -*-
"""
GRIB2 → JSON APIルート (Blueprint)
"""
from flask import Blueprint
from ..controllers.grib2_controller import Grib2Controller

# Blueprint作成
grib2_bp = Blueprint('grib2', __name__)

# コントローラーインスタンス（設定は後で渡す）
grib2_controller = None

def init_grib2_routes(config=None):
    """GRIB2ルートを初期化"""
    global grib2_controller
    grib2_controller = Grib2Controller(config)

@grib2_bp.route('/', methods=['GET'])
def root():
    """ルートエンドポイント"""
    return grib2_controller.root()

@grib2_bp.route('/api/health', methods=['GET'])
def health_check():
    """ヘルスチェックエンドポイント"""
    return grib2_controller.health_check()

@grib2_bp.route('/api/grib2json', methods=['POST'])
def grib2json():
    """GRIB2 → JSON 変換エンドポイント"""
    return grib2_controller.grib2json()
