"""
errs

태그 분류와 스택 트레이스를 지원하는 오류 래핑 라이브러리
"""

from loguru import logger

# 라이브러리 로그는 애플리케이션이 활성화할 때까지 출력하지 않음
logger.disable("errs")

from errs.errors import (  # noqa: E402
    AnnotatedError,
    Renderable,
    Tag,
    cause,
    classify,
    errorf,
    format_error,
    tagged,
    tags,
    unwrap,
    wrap,
    wrapf,
)
from errs.group import CombinedError, Group, combine  # noqa: E402
from errs.stack import Frame, Frames, capture, format_stack, render_stack  # noqa: E402

__version__ = "0.1.0"

__all__ = [
    # 오류 래핑
    "AnnotatedError",
    "Renderable",
    "Tag",
    "wrap",
    "wrapf",
    "errorf",
    "tagged",
    # 조회
    "cause",
    "unwrap",
    "tags",
    "classify",
    # 출력
    "format_error",
    # 그룹
    "CombinedError",
    "Group",
    "combine",
    # 스택
    "Frame",
    "Frames",
    "capture",
    "render_stack",
    "format_stack",
]
