from __future__ import annotations

from enum import Enum


class JamoKind(str, Enum):
    CONSONANT = "CONSONANT"
    VOWEL = "VOWEL"


class MatchKind(str, Enum):
    COLLAPSED = "COLLAPSED"  # 공백 무시 부분 일치
    LITERAL = "LITERAL"  # 입력 그대로 부분 일치
    PATTERN = "PATTERN"  # 자모 확장 정규식
