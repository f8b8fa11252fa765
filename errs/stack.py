"""
Stack Capture

호출 스택 캡처 및 출력
"""

import io
import sys
import traceback
from types import CodeType
from typing import NamedTuple, Optional, Tuple

from loguru import logger

from errs.config import config

PACKAGE = "errs"


class Frame(NamedTuple):
    """캡처된 스택 프레임"""
    module: str
    code: CodeType
    lineno: int

    @property
    def function(self) -> str:
        """모듈 경로를 포함한 함수 이름 (출력 시점에 계산)"""
        qualname = getattr(self.code, "co_qualname", self.code.co_name)
        if self.module:
            return f"{self.module}.{qualname}"
        return qualname


Frames = Tuple[Frame, ...]


def _is_internal(module: str) -> bool:
    return module == PACKAGE or module.startswith(PACKAGE + ".")


def capture(limit: Optional[int] = None) -> Frames:
    """
    현재 스레드의 호출 스택 캡처

    errs 패키지 내부 프레임은 건너뛰므로 첫 프레임은 생성자를 호출한 코드입니다.
    limit을 넘는 프레임은 잘립니다.

    Args:
        limit: 최대 프레임 수 (기본값: config.MAX_STACK_DEPTH)

    Returns:
        안쪽(오류 발생 지점)부터 바깥쪽 순서의 프레임 튜플
    """
    if limit is None:
        limit = config.MAX_STACK_DEPTH
    if limit <= 0:
        return ()

    frames = []
    skipping = True
    for frame, lineno in traceback.walk_stack(sys._getframe(1)):
        module = frame.f_globals.get("__name__", "")
        if skipping and _is_internal(module):
            continue
        skipping = False

        if len(frames) == limit:
            logger.debug("Stack capture truncated at {} frames", limit)
            break
        # 프레임 객체 대신 코드 객체만 보관 (지역 변수 참조 방지)
        frames.append(Frame(module, frame.f_code, lineno))

    return tuple(frames)


def render_stack(frames: Frames, writer) -> None:
    """프레임 목록을 writer에 "\\n\\t<function>:<line>" 형식으로 기록"""
    for frame in frames:
        writer.write(f"\n\t{frame.function}:{frame.lineno}")


def format_stack(frames: Frames) -> str:
    buf = io.StringIO()
    render_stack(frames, buf)
    return buf.getvalue()
