# -*- coding: utf-8 -*-
import pytest

from grib2json.config import ConfigService
from grib2json.services import Grib2Service


@pytest.fixture
def config(tmp_path):
    """デフォルト設定（設定ファイルなし）"""
    return ConfigService(config_path=str(tmp_path / "missing.yaml"))


@pytest.fixture
def grib2_service(config):
    return Grib2Service(config)
