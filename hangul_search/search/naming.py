"""바인드 파라미터 접두사 생성."""

from __future__ import annotations

import itertools
import uuid

from hangul_search.config import settings


class ParamNamer:
    """쿼리 하나를 조립하는 동안 쓰는 순번 기반 접두사 생성기.

    같은 쿼리 안에서 여러 필드를 OR로 묶을 때 접두사가 겹치지 않게 한다.
    쿼리마다 새로 만들고 스레드 간에 공유하지 않는다.

    >>> namer = ParamNamer()
    >>> namer.next_prefix(), namer.next_prefix()
    ('kw0', 'kw1')
    """

    def __init__(self, base: str | None = None):
        self.base = base or settings.param_prefix_base
        self._counter = itertools.count()

    def next_prefix(self) -> str:
        return f"{self.base}{next(self._counter)}"


def random_prefix() -> str:
    """세션 없이 호출될 때 쓰는 UUID 기반 접두사 (식별자로 쓸 수 있게 문자로 시작)."""
    return f"kw{uuid.uuid4().hex}"
