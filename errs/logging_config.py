"""
로깅 설정 및 유틸리티
"""

import sys
from loguru import logger
from errs.config import config

CONSOLE_FORMAT = (
    "<green>{time:YYYY-MM-DD HH:mm:ss}</green> | <level>{level: <8}</level> | "
    "<cyan>{name}</cyan>:<cyan>{function}</cyan>:<cyan>{line}</cyan> - <level>{message}</level>"
)
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def setup_logger(module_name: str = "errs", enable: bool = True):
    """
    로거 설정

    Args:
        module_name: 모듈 이름 (로그 파일명에 사용)
        enable: errs 패키지 로그 출력 활성화 여부

    Returns:
        설정된 loguru 로거
    """
    # 기본 핸들러 제거
    logger.remove()

    # 콘솔 출력
    logger.add(
        sys.stderr,
        format=CONSOLE_FORMAT,
        level="DEBUG" if config.DEBUG else config.LOG_LEVEL,
        colorize=True,
    )

    if config.LOG_TO_FILE:
        config.ensure_directories()

        # 파일 출력 (DEBUG 이상)
        logger.add(
            config.LOGS_DIR / f"{module_name}.log",
            format=FILE_FORMAT,
            level="DEBUG",
            rotation="10 MB",
            retention="30 days",
            compression="zip",
        )

        # 에러 로그 (ERROR 이상)
        logger.add(
            config.LOGS_DIR / f"{module_name}_error.log",
            format=FILE_FORMAT,
            level="ERROR",
            rotation="10 MB",
            retention="90 days",
            compression="zip",
        )

    if enable:
        logger.enable("errs")
    else:
        logger.disable("errs")

    return logger
