"""검색어 전처리: 원문, 공백 제거본, LIKE 와일드카드, 보조 패턴."""

from __future__ import annotations

from dataclasses import dataclass

from hangul_search.search.pattern import translate

# 붙여넣은 제목에 섞여 들어오는 폭 없는 문자
_ZERO_WIDTH = frozenset("\u200b\u200c\u200d\ufeff")

# LIKE 이스케이프 문자 (조건 템플릿의 ESCAPE 절과 맞춰야 한다)
LIKE_ESCAPE = "\\"
_LIKE_SPECIAL = frozenset("%_" + LIKE_ESCAPE)


@dataclass(frozen=True)
class NormalizedKeyword:
    original: str
    collapsed: str
    wildcarded: str
    collapsed_wildcarded: str
    fallback_pattern: str


def collapse_whitespace(text: str) -> str:
    """공백을 모두 제거한다 (앞뒤뿐 아니라 중간 공백까지).

    >>> collapse_whitespace(" 해 리\\t포터 ")
    '해리포터'
    """
    return "".join(
        ch for ch in text if not ch.isspace() and ch not in _ZERO_WIDTH
    )


def escape_like(text: str) -> str:
    """사용자가 입력한 %, _ 가 와일드카드로 동작하지 않도록 이스케이프한다."""
    return "".join(
        LIKE_ESCAPE + ch if ch in _LIKE_SPECIAL else ch for ch in text
    )


def wildcard(text: str) -> str:
    return f"%{escape_like(text)}%"


def normalize(keyword: str) -> NormalizedKeyword:
    """검색어 하나에서 하위 단계가 쓰는 변형들을 만든다.

    빈 검색어도 그대로 받는다. 이때 fallback_pattern은 빈 문자열이며
    모든 값과 매칭되는 패턴으로 취급한다 (빈 검색어 = 전체 행).
    """
    collapsed = collapse_whitespace(keyword)
    return NormalizedKeyword(
        original=keyword,
        collapsed=collapsed,
        wildcarded=wildcard(keyword),
        collapsed_wildcarded=wildcard(collapsed),
        fallback_pattern=translate(collapsed),
    )
