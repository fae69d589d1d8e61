"""한글 자모 → 완성형 음절 범위 테이블.

낱자모(초성 19자, 중성 21자)를 그 자모로 시작하거나 그 자모를 포함한다고 볼 수 있는
완성형 음절 코드포인트 구간으로 매핑한다.

범위 값은 기존 검색 동작을 그대로 유지한 레거시 테이블이다. 일부 항목은 서로 겹치거나
완전히 같다 (예: ㅇ과 ㅏ는 모두 아-잏, ㅑ는 야-잫으로 ㅈ 블록까지 넘어간다).
검색 결과가 이 동작에 맞춰져 있으므로 값을 임의로 재계산하지 않는다.
단, 시작이 끝보다 뒤였던 ㅒ, ㅗ 두 항목은 같은 모음 블록의 음절로 끝값을 고쳤다
(뒤집힌 범위는 정규식 컴파일 자체가 실패한다).
"""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType

from hangul_search.schemas.common import JamoKind

# 한글 완성형 유니코드 범위
HANGUL_BASE = 0xAC00  # '가'
HANGUL_END = 0xD7A3  # '힣'


@dataclass(frozen=True)
class JamoRange:
    jamo: str
    kind: JamoKind
    range_start: int
    range_end: int

    @property
    def start_char(self) -> str:
        return chr(self.range_start)

    @property
    def end_char(self) -> str:
        return chr(self.range_end)

    def __contains__(self, char: str) -> bool:
        return len(char) == 1 and self.range_start <= ord(char) <= self.range_end


def _table(kind: JamoKind, rows: list[tuple[str, str, str]]) -> MappingProxyType:
    return MappingProxyType({
        jamo: JamoRange(jamo, kind, ord(start), ord(end))
        for jamo, start, end in rows
    })


# 초성 19자
CONSONANT_RANGES = _table(JamoKind.CONSONANT, [
    ("ㄱ", "가", "깋"),
    ("ㄲ", "까", "낗"),
    ("ㄴ", "나", "닣"),
    ("ㄷ", "다", "딯"),
    ("ㄸ", "따", "띻"),
    ("ㄹ", "라", "맇"),
    ("ㅁ", "마", "밓"),
    ("ㅂ", "바", "빟"),
    ("ㅃ", "빠", "삫"),
    ("ㅅ", "사", "싷"),
    ("ㅆ", "싸", "앃"),
    ("ㅇ", "아", "잏"),
    ("ㅈ", "자", "짛"),
    ("ㅉ", "짜", "찧"),
    ("ㅊ", "차", "칳"),
    ("ㅋ", "카", "킿"),
    ("ㅌ", "타", "팋"),
    ("ㅍ", "파", "핗"),
    ("ㅎ", "하", "힣"),
])

# 중성 21자
VOWEL_RANGES = _table(JamoKind.VOWEL, [
    ("ㅏ", "아", "잏"),
    ("ㅐ", "애", "앻"),
    ("ㅑ", "야", "잫"),
    ("ㅒ", "얘", "얠"),  # 레거시 값 얗(ㅑ 블록 끝)은 시작보다 앞이라 교정
    ("ㅓ", "어", "엗"),
    ("ㅔ", "에", "엣"),
    ("ㅕ", "여", "옇"),
    ("ㅖ", "예", "옏"),
    ("ㅗ", "오", "옿"),  # 레거시 값 옣(ㅖ 블록 끝)은 시작보다 앞이라 교정
    ("ㅘ", "와", "왇"),
    ("ㅙ", "왜", "왯"),
    ("ㅚ", "외", "욓"),
    ("ㅛ", "요", "욯"),
    ("ㅜ", "우", "웇"),
    ("ㅝ", "워", "웧"),
    ("ㅞ", "웨", "웯"),
    ("ㅟ", "위", "윗"),
    ("ㅠ", "유", "윻"),
    ("ㅡ", "으", "읗"),
    ("ㅢ", "의", "읻"),
    ("ㅣ", "이", "잏"),
])

# 조회 순서대로 (초성 우선)
JAMO_RANGES: tuple[JamoRange, ...] = (
    *CONSONANT_RANGES.values(),
    *VOWEL_RANGES.values(),
)


def lookup(jamo: str) -> JamoRange | None:
    """낱자모 한 글자의 음절 범위를 반환한다. 자모가 아니면 None.

    초성 테이블을 먼저 조회한다.

    >>> lookup("ㄱ").start_char, lookup("ㄱ").end_char
    ('가', '깋')
    >>> lookup("가") is None
    True
    """
    entry = CONSONANT_RANGES.get(jamo)
    if entry is None:
        entry = VOWEL_RANGES.get(jamo)
    return entry


def render_class(entry: JamoRange) -> str:
    """범위를 정규식 문자 클래스로 만든다. 예: '[아-잏]'"""
    return f"[{entry.start_char}-{entry.end_char}]"
