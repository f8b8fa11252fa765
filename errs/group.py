"""
Error Group

여러 오류를 하나의 오류로 합치기
"""

from typing import Iterator, List, Optional, Tuple

from errs.errors import Renderable, format_error


class CombinedError(Renderable, Exception):
    """두 개 이상의 오류를 합친 오류 (태그 래핑 대상일 뿐 자체 태그는 없음)"""

    def __init__(self, *errors: BaseException):
        if len(errors) < 2:
            raise ValueError("CombinedError requires at least two errors")
        super().__init__(*errors)
        self._errors = errors

    @property
    def errors(self) -> Tuple[BaseException, ...]:
        return self._errors

    def __str__(self) -> str:
        return "; ".join(format_error(err) for err in self._errors)

    def __repr__(self) -> str:
        return f"CombinedError({', '.join(repr(err) for err in self._errors)})"

    def detailed(self) -> str:
        lines = ["group:"]
        for err in self._errors:
            # 각 오류의 스택은 표시 줄 아래에 들여쓰기
            text = format_error(err, detailed=True).replace("\n", "\n    ")
            lines.append(f"--- {text}")
        return "\n".join(lines)


class Group:
    """
    오류 수집기

    None은 무시하고 추가 순서를 유지합니다. 내부 잠금이 없으므로 여러 스레드에서
    add를 호출할 때는 호출자가 직렬화해야 합니다.
    """

    def __init__(self, *errors: Optional[BaseException]):
        self._errors: List[BaseException] = []
        self.add(*errors)

    def add(self, *errors: Optional[BaseException]):
        """오류 추가 (None은 무시)"""
        for err in errors:
            if err is None:
                continue
            if not isinstance(err, BaseException):
                raise TypeError(f"can only add exceptions, not {type(err).__name__}")
            self._errors.append(err)

    def err(self) -> Optional[BaseException]:
        """
        수집한 오류를 하나의 오류로 반환

        Returns:
            비어 있으면 None, 하나면 그 오류 자체, 둘 이상이면 CombinedError
        """
        if not self._errors:
            return None
        if len(self._errors) == 1:
            return self._errors[0]
        return CombinedError(*self._errors)

    def __len__(self) -> int:
        return len(self._errors)

    def __iter__(self) -> Iterator[BaseException]:
        return iter(self._errors)


def combine(*errors: Optional[BaseException]) -> Optional[BaseException]:
    """Group(*errors).err() 단축 함수"""
    return Group(*errors).err()
