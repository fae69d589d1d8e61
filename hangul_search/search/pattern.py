"""검색어의 낱자모를 문자 클래스로 확장한 보조 정규식 패턴 생성."""

from __future__ import annotations

from hangul_search.search.jamo_table import lookup, render_class

# 정규식에서 구조적 의미를 갖는 문자
_REGEX_SPECIAL = frozenset("\\.^$|?*+()[]{}")


def escape_char(char: str) -> str:
    if char in _REGEX_SPECIAL:
        return "\\" + char
    return char


def translate(text: str) -> str:
    """낱자모는 음절 범위 문자 클래스로, 나머지는 리터럴로 옮긴다.

    예: '꿈ㅇ' -> '꿈[아-잏]'

    완성형 음절, 영문, 숫자는 그대로 두고 정규식 메타문자만 이스케이프한다.
    패턴을 컴파일하지는 않는다 (실행은 DB 쪽 REGEXP 몫).
    """
    tokens: list[str] = []
    for char in text:
        entry = lookup(char)
        if entry is not None:
            tokens.append(render_class(entry))
        else:
            tokens.append(escape_char(char))
    return "".join(tokens)
