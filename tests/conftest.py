"""
테스트 설정 및 픽스처
"""

import os
import sys

import pytest

# 테스트 환경 설정 - 모든 import 이전에 설정
os.environ["ERRS_ENVIRONMENT"] = "test"

from loguru import logger


@pytest.fixture
def log_records():
    """errs 로그 레코드 수집"""
    records = []
    logger.enable("errs")
    handler_id = logger.add(lambda message: records.append(message.record), level="DEBUG", format="{message}")
    yield records
    logger.remove(handler_id)
    logger.disable("errs")


@pytest.fixture
def reset_logger():
    """테스트 후 loguru 핸들러 초기화"""
    yield logger
    logger.remove()
    logger.add(sys.stderr)
    logger.disable("errs")


@pytest.fixture
def original():
    """태그가 없는 원래 오류"""
    return ValueError("t")
