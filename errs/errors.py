"""
Tagged Errors

태그 분류와 스택 트레이스를 가진 오류 래핑
"""

from collections.abc import Mapping
from typing import List, Optional, Union

from errs.stack import Frames, capture, format_stack

NIL = "<nil>"


def _safe_str(err: BaseException) -> str:
    try:
        return str(err)
    except Exception:
        return f"<unprintable {type(err).__name__}>"


def _new_leaf(format: str, args: tuple) -> Exception:
    # 인자가 없으면 format을 그대로 사용 (logging과 동일)
    if not args:
        return Exception(format)
    values = args
    if len(args) == 1 and isinstance(args[0], Mapping) and args[0]:
        values = args[0]
    try:
        return Exception(format % values)
    except (TypeError, ValueError, KeyError):
        return Exception(f"{format} {args!r}")


class Tag(str):
    """
    오류 분류 태그

    문자열 값으로 비교하므로 서로 다른 곳에서 만든 같은 이름의 태그는 동일합니다.
    빈 태그는 분류가 없는 상태를 의미합니다.
    예외가 아니므로 raise할 수 없으며, 오류는 wrap/wrapf로 만듭니다.
    """

    __slots__ = ()

    def __new__(cls, text: str = ""):
        if not isinstance(text, str):
            raise TypeError(f"tag text must be str, not {type(text).__name__}")
        return super().__new__(cls, text)

    def __repr__(self) -> str:
        return f"Tag({str.__repr__(self)})"

    def is_empty(self) -> bool:
        return len(self) == 0

    def wrap(self, err: Optional[BaseException]) -> Optional[BaseException]:
        """
        오류를 이 태그로 래핑

        err가 None이면 None을 반환합니다. err의 태그가 이미 이 태그와 같으면
        err를 그대로 반환합니다.
        """
        return _wrap(self, err)

    def wrapf(self, format: str, *args) -> BaseException:
        """포맷 문자열로 새 오류를 만들어 이 태그로 래핑"""
        return _wrap(self, _new_leaf(format, args))

    errorf = wrapf

    def has(self, err: Optional[BaseException]) -> bool:
        """오류 체인에 이 태그가 포함되어 있는지 확인"""
        return classify(err, self)


class Renderable:
    """간략/상세 출력 모드 지원 ("+" 포맷 지정자는 상세 출력)"""

    def detailed(self) -> str:
        raise NotImplementedError

    def __format__(self, format_spec: str) -> str:
        if format_spec == "+":
            return self.detailed()
        return format(str(self), format_spec)


class AnnotatedError(Renderable, Exception):
    """
    태그와 원인 오류, 캡처된 스택을 가진 오류 노드

    같은 체인의 노드들은 하나의 프레임 튜플을 공유합니다. 생성 후 변경되지 않습니다.
    """

    def __init__(self, tag: Union[Tag, str], cause: BaseException, frames: Frames):
        if cause is None:
            raise ValueError("AnnotatedError requires a cause")
        super().__init__(tag, cause, frames)
        self._tag = tag if isinstance(tag, Tag) else Tag(tag)
        self._cause = cause
        self._frames = frames
        self.__cause__ = cause

    @property
    def tag(self) -> Tag:
        return self._tag

    @property
    def cause(self) -> BaseException:
        return self._cause

    @property
    def frames(self) -> Frames:
        return self._frames

    @property
    def name(self) -> Optional[str]:
        """태그 이름 (태그가 없으면 None)"""
        return str(self._tag) if self._tag else None

    def is_(self, tag: Union[Tag, str]) -> bool:
        """이 노드의 태그가 주어진 태그와 같은지 확인"""
        return bool(tag) and self._tag == tag

    def __str__(self) -> str:
        text = _safe_str(self._cause)
        if not self._tag:
            return text
        if not text:
            return str(self._tag)
        return f"{self._tag}: {text}"

    def __repr__(self) -> str:
        return f"AnnotatedError(tag={self._tag!r}, cause={self._cause!r})"

    def detailed(self) -> str:
        # 체인 전체가 같은 프레임을 공유하므로 스택은 한 번만 출력
        return str(self) + format_stack(self._frames)


def _wrap(tag: Tag, err: Optional[BaseException]) -> Optional[BaseException]:
    if err is None:
        return None
    if not isinstance(err, BaseException):
        raise TypeError(f"can only wrap exceptions, not {type(err).__name__}")

    if isinstance(err, AnnotatedError):
        if not tag or err.tag == tag:
            return err
        return AnnotatedError(tag, err, err.frames)

    return AnnotatedError(tag, err, capture())


UNTAGGED = Tag("")


def wrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """
    분류 없이 스택 트레이스만 연결

    err가 None이면 None을 반환합니다.
    """
    return _wrap(UNTAGGED, err)


def wrapf(format: str, *args) -> BaseException:
    """
    format % args 메시지로 오류를 만들고 스택 트레이스를 연결

    인자가 없으면 format을 그대로 사용하고, 인자가 format과 맞지 않으면
    format 뒤에 인자의 repr을 붙여 메시지를 만듭니다 (예외를 던지지 않음).
    """
    return _wrap(UNTAGGED, _new_leaf(format, args))


errorf = wrapf


def tagged(tag: Union[Tag, str], err: Optional[BaseException]) -> Optional[BaseException]:
    """Tag(tag).wrap(err) 단축 함수"""
    return _wrap(tag if isinstance(tag, Tag) else Tag(tag), err)


def cause(err: Optional[BaseException]) -> Optional[BaseException]:
    """한 단계 아래의 원인 오류 반환"""
    if err is None:
        return None
    if isinstance(err, AnnotatedError):
        return err.cause
    return err.__cause__


def unwrap(err: Optional[BaseException]) -> Optional[BaseException]:
    """모든 AnnotatedError 노드를 건너뛰고 원래 오류 반환"""
    while isinstance(err, AnnotatedError):
        err = err.cause
    return err


def tags(err: Optional[BaseException]) -> List[Tag]:
    """
    오류 체인의 모든 태그 반환

    가장 바깥(마지막으로 래핑한) 태그부터 순서대로 반환하며 빈 태그는 제외합니다.
    """
    result = []
    while isinstance(err, AnnotatedError):
        if err.tag:
            result.append(err.tag)
        err = err.cause
    return result


def classify(err: Optional[BaseException], tag: Union[Tag, str]) -> bool:
    """오류 체인에 tag가 포함되어 있는지 확인"""
    if not tag:
        return False
    while isinstance(err, AnnotatedError):
        if err.is_(tag):
            return True
        err = err.cause
    return False


def format_error(err: Optional[BaseException], detailed: bool = False) -> str:
    """
    오류를 문자열로 출력

    Args:
        err: 출력할 오류 (None이면 "<nil>")
        detailed: 스택 트레이스 포함 여부

    Returns:
        출력 문자열
    """
    if err is None:
        return NIL
    if detailed and isinstance(err, Renderable):
        return err.detailed()
    return _safe_str(err)
