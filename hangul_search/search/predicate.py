"""필드 하나에 대한 3중 OR 한글 검색 조건 조립.

필드/검색어 쌍마다 세 가지 조건을 만든다.

1. 공백을 제거한 필드값에 공백 제거 검색어가 포함되는지 (LIKE)
2. 필드값에 입력 그대로의 검색어가 포함되는지 (LIKE)
3. 필드값이 낱자모 확장 패턴과 매칭되는지 (REGEXP)

세 조건 중 하나라도 참이면 해당 필드는 매칭된 것으로 본다.
조건마다 고유한 파라미터 이름을 붙여 같은 쿼리 안에서 여러 필드를 OR로 묶어도
바인딩이 충돌하지 않게 한다.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from dataclasses import dataclass

from sqlalchemy import TextClause, false, or_, text
from sqlalchemy.sql.elements import ColumnElement

from hangul_search.config import settings
from hangul_search.schemas.common import MatchKind
from hangul_search.search.naming import ParamNamer, random_prefix
from hangul_search.search.normalizer import (
    NormalizedKeyword,
    collapse_whitespace,
    normalize,
)

logger = logging.getLogger(__name__)

# 파라미터 이름 접미사. 어느 것도 다른 것의 접미사가 아니어야 접두사가 다르면 이름이 겹치지 않는다.
_PARAM_SUFFIXES = {
    MatchKind.COLLAPSED: "collapsed",
    MatchKind.LITERAL: "literal",
    MatchKind.PATTERN: "pattern",
}


@dataclass(frozen=True)
class ConditionTemplates:
    """저장소별 조건 문법. {field}와 {param} 자리표시자를 쓴다."""

    collapsed: str
    literal: str
    pattern: str

    @classmethod
    def from_settings(cls) -> ConditionTemplates:
        return cls(
            collapsed=settings.collapsed_template,
            literal=settings.literal_template,
            pattern=settings.pattern_template,
        )

    def for_kind(self, kind: MatchKind) -> str:
        if kind == MatchKind.COLLAPSED:
            return self.collapsed
        if kind == MatchKind.LITERAL:
            return self.literal
        return self.pattern


@dataclass(frozen=True)
class SearchCondition:
    kind: MatchKind
    fragment: str
    param_name: str
    param_value: str

    def to_clause(self) -> TextClause:
        return text(self.fragment).bindparams(**{self.param_name: self.param_value})


@dataclass(frozen=True)
class FieldPredicate:
    field_expression: str
    keyword: NormalizedKeyword
    conditions: tuple[SearchCondition, ...]

    @property
    def param_names(self) -> list[str]:
        return [cond.param_name for cond in self.conditions]

    @property
    def params(self) -> dict[str, str]:
        return {cond.param_name: cond.param_value for cond in self.conditions}

    def to_clause(self) -> ColumnElement[bool]:
        """세 조건을 OR로 묶은 SQLAlchemy 절 (조건 순서 유지)."""
        return or_(*(cond.to_clause() for cond in self.conditions))

    def matches(self, value: str | None) -> bool:
        """세 가지 규칙을 파이썬에서 직접 평가한다.

        DB를 거치지 않고 메모리에 올린 목록을 거를 때 쓴다. SQL과 다른 점:
        공백 무시 비교는 REPLACE(' ')보다 넓게 모든 공백을 제거하고,
        두 부분 일치 비교는 casefold로 대소문자를 무시한다 (LIKE는 ASCII만 무시).
        패턴 비교는 REGEXP 함수와 같이 대소문자를 구분한다.
        """
        if value is None:
            return False
        folded = value.casefold()
        return (
            self.keyword.collapsed.casefold() in collapse_whitespace(folded)
            or self.keyword.original.casefold() in folded
            or re.search(self.keyword.fallback_pattern, value) is not None
        )


_WORD_CHAR = re.compile(r"\w")


def bind_safe_prefix(prefix: str) -> str:
    """접두사를 바인드 파라미터 이름에 쓸 수 있는 문자만으로 바꾼다.

    '_'는 '__'로, 그 밖의 비단어 문자는 '_<16진수>_'로 바꾼다.
    서로 다른 접두사는 변환 후에도 서로 다르다.

    >>> bind_safe_prefix("book.title"), bind_safe_prefix("author_eng")
    ('book_2e_title', 'author__eng')
    """
    tokens: list[str] = []
    for char in prefix:
        if char == "_":
            tokens.append("__")
        elif _WORD_CHAR.fullmatch(char):
            tokens.append(char)
        else:
            tokens.append(f"_{ord(char):x}_")
    return "".join(tokens)


def _resolve_prefix(param_prefix: str | None, namer: ParamNamer | None) -> str:
    if param_prefix:
        return bind_safe_prefix(param_prefix)
    if namer is not None:
        return namer.next_prefix()
    return random_prefix()


def build_field_predicate(
    field_expression: str,
    keyword: str,
    param_prefix: str | None = None,
    *,
    namer: ParamNamer | None = None,
    templates: ConditionTemplates | None = None,
) -> FieldPredicate:
    """필드 표현식과 검색어로 3중 OR 조건을 만든다.

    Args:
        field_expression: 컬럼명 또는 계산식 (검증하지 않고 그대로 사용)
        keyword: 사용자가 입력한 검색어
        param_prefix: 쿼리 안에서 고유한 파라미터 접두사. 없으면 namer 또는 UUID로 생성
        namer: 쿼리 단위 접두사 생성기
        templates: 조건 문법. 없으면 설정값 사용

    Returns:
        항상 조건 3개(공백 무시, 원문, 패턴 순)를 가진 FieldPredicate
    """
    normalized = normalize(keyword)
    prefix = _resolve_prefix(param_prefix, namer)
    templates = templates or ConditionTemplates.from_settings()

    values = {
        MatchKind.COLLAPSED: normalized.collapsed_wildcarded,
        MatchKind.LITERAL: normalized.wildcarded,
        MatchKind.PATTERN: normalized.fallback_pattern,
    }

    conditions: list[SearchCondition] = []
    for kind, suffix in _PARAM_SUFFIXES.items():
        param_name = f"{prefix}_{suffix}"
        conditions.append(SearchCondition(
            kind=kind,
            fragment=templates.for_kind(kind).format(field=field_expression, param=param_name),
            param_name=param_name,
            param_value=values[kind],
        ))

    logger.debug(
        "한글 검색 조건 생성: field=%s keyword=%r pattern=%r prefix=%s",
        field_expression, keyword, normalized.fallback_pattern, prefix,
    )
    return FieldPredicate(
        field_expression=field_expression,
        keyword=normalized,
        conditions=tuple(conditions),
    )


def combine_field_predicates(predicates: Iterable[FieldPredicate]) -> ColumnElement[bool]:
    """여러 필드의 조건을 하나의 OR 절로 합친다. 비어 있으면 항상 거짓."""
    return or_(false(), *(pred.to_clause() for pred in predicates))
