"""
Configuration

환경별 설정
"""

from errs.config.settings import (
    Config,
    DevelopmentConfig,
    ProductionConfig,
    TestConfig,
    config,
    load_config,
)

__all__ = [
    "Config",
    "DevelopmentConfig",
    "ProductionConfig",
    "TestConfig",
    "config",
    "load_config",
]
