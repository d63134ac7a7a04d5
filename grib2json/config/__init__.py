# -*- coding: utf-8 -*-
"""
設定パッケージ
"""

from .config_service import ConfigService

__all__ = ['ConfigService']
