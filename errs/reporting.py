"""
Error Reporting

태그가 붙은 오류의 로깅 및 집계
"""

from collections import Counter
from typing import Dict, Iterable, Optional, Union

from loguru import logger

from errs.config import config
from errs.errors import format_error, tags, unwrap
from errs.group import CombinedError


def log_error(
    err: Optional[BaseException],
    level: Union[str, int] = "ERROR",
    detailed: Optional[bool] = None,
) -> Optional[str]:
    """
    오류 로깅 헬퍼 함수

    Args:
        err: 로깅할 오류 (None이면 아무것도 하지 않음)
        level: 로그 레벨
        detailed: 스택 트레이스 포함 여부 (기본값: config.DEBUG)

    Returns:
        로깅한 메시지
    """
    if err is None:
        return None
    if detailed is None:
        detailed = config.DEBUG

    text = format_error(err, detailed=detailed)
    logger.opt(depth=1).bind(error_tags=[str(tag) for tag in tags(err)]).log(level, "{}", text)
    return text


def tag_counts(errors: Iterable[Optional[BaseException]]) -> Dict[str, int]:
    """
    태그별 오류 수 반환 (CombinedError에 포함된 오류도 집계)

    한 오류의 체인에 같은 태그가 여러 번 나와도 한 번만 셉니다.
    """
    counts: Counter = Counter()
    for err in errors:
        counts.update({str(tag) for tag in tags(err)})
        inner = unwrap(err)
        if isinstance(inner, CombinedError):
            counts.update(tag_counts(inner.errors))
    return dict(counts)
