"""
errs 설정 관리

환경 변수 및 라이브러리 설정을 관리합니다.
"""

import os
from pathlib import Path
from typing import Dict
from dotenv import dotenv_values, find_dotenv

PREFIX = "ERRS_"


def read_environ() -> Dict[str, str]:
    """
    .env 파일과 프로세스 환경 변수에서 ERRS_* 값 읽기

    os.environ은 변경하지 않으며, 같은 키는 프로세스 환경 변수가 우선합니다.
    """
    values: Dict[str, str] = {}
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        for key, value in dotenv_values(dotenv_path).items():
            if key.startswith(PREFIX) and value is not None:
                values[key] = value
    values.update({key: value for key, value in os.environ.items() if key.startswith(PREFIX)})
    return values


# .env 파일 로드
_environ = read_environ()


def _env_bool(name: str, default: str = "false") -> bool:
    return _environ.get(name, default).lower() in ("1", "true", "yes")


class Config:
    """라이브러리 설정"""

    DEBUG: bool = False
    TESTING: bool = False

    # 경로
    LOGS_DIR: Path = Path(_environ.get("ERRS_LOGS_DIR", "logs"))

    # 스택 캡처
    MAX_STACK_DEPTH: int = int(_environ.get("ERRS_MAX_STACK_DEPTH", "64"))

    # 로깅
    LOG_LEVEL: str = _environ.get("ERRS_LOG_LEVEL", "INFO").upper()
    LOG_TO_FILE: bool = _env_bool("ERRS_LOG_TO_FILE")

    def ensure_directories(self):
        """로그 디렉토리 생성"""
        self.LOGS_DIR.mkdir(parents=True, exist_ok=True)


class DevelopmentConfig(Config):
    """개발 환경 설정"""
    DEBUG = True
    TESTING = False


class ProductionConfig(Config):
    """프로덕션 환경 설정"""
    DEBUG = False
    TESTING = False


class TestConfig(Config):
    """테스트 환경 설정"""
    DEBUG = True
    TESTING = True
    LOG_TO_FILE = False


def load_config(env: str = None) -> Config:
    """환경 이름에 맞는 설정 인스턴스 반환"""
    env = (env or read_environ().get("ERRS_ENVIRONMENT", "development")).lower()
    if env == "production":
        return ProductionConfig()
    if env == "test":
        return TestConfig()
    return DevelopmentConfig()


# 환경별 설정 선택
config = load_config()
