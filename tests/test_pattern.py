"""보조 패턴 변환 테스트: 낱자모 확장, 리터럴 통과, 메타문자 이스케이프."""

from __future__ import annotations

import re

import pytest

from hangul_search.search.pattern import translate


def test_composed_syllable_then_bare_consonant():
    assert translate("꿈ㅇ") == "꿈[아-잏]"


def test_bare_vowel_and_consonant_sequence():
    assert translate("ㄱㅏ") == "[가-깋][아-잏]"
    assert translate("ㅎㄹ") == "[하-힣][라-맇]"


@pytest.mark.parametrize("text", ["해리포터", "어린 왕자", "abc123", "", "100%", "data_science", "C-3PO"])
def test_non_jamo_text_passes_through(text):
    assert translate(text) == text


@pytest.mark.parametrize(
    "text, expected",
    [
        ("a.b", r"a\.b"),
        ("c++", r"c\+\+"),
        ("[ㄱ]", r"\[[가-깋]\]"),
        ("(주)", r"\(주\)"),
        ("^$|?*{}", r"\^\$\|\?\*\{\}"),
        ("a\\b", r"a\\b"),
    ],
)
def test_regex_metacharacters_are_escaped(text, expected):
    assert translate(text) == expected


@pytest.mark.parametrize("text", ["a.b*c", "(x)", "1+1=2", "[태그]", "^$|?{}\\", "%_"])
def test_escaped_pattern_matches_only_itself(text):
    assert re.fullmatch(translate(text), text)


def test_dot_is_not_a_wildcard():
    assert re.search(translate("a.b"), "axb") is None


def test_jamo_class_matches_syllables_in_range():
    pattern = translate("꿈ㅇ")
    assert re.search(pattern, "꿈을 꾸는 아이")
    assert re.search(pattern, "꿈꾸는 아이") is None
