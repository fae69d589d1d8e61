"""검색어 전처리 테스트: 공백 제거, 와일드카드, 빈 검색어, 멱등성."""

from __future__ import annotations

import re

import pytest

from hangul_search.search.normalizer import escape_like, normalize

KEYWORDS = [
    "",
    "   ",
    "꿈ㅇ",
    "해 리포터",
    " 어린\t왕자\n",
    "100% 순수",
    "data_science",
    "ㄱㄴㄷ",
    "전각\u3000공백",
    "폭없는\u200b문자",
]


@pytest.mark.parametrize("keyword", KEYWORDS)
def test_normalize_is_idempotent(keyword):
    once = normalize(keyword)
    assert normalize(once.original) == once


@pytest.mark.parametrize("keyword", KEYWORDS)
def test_collapsed_has_no_whitespace(keyword):
    collapsed = normalize(keyword).collapsed
    assert not any(ch.isspace() for ch in collapsed)
    assert "\u200b" not in collapsed


def test_composed_syllable_with_bare_consonant():
    kw = normalize("꿈ㅇ")
    assert kw.collapsed == "꿈ㅇ"
    assert kw.fallback_pattern == "꿈[아-잏]"


def test_internal_space_is_removed_only_from_collapsed():
    kw = normalize("해 리포터")
    assert kw.collapsed == "해리포터"
    assert kw.original == "해 리포터"
    assert kw.wildcarded == "%해 리포터%"
    assert kw.collapsed_wildcarded == "%해리포터%"
    assert kw.fallback_pattern == "해리포터"


def test_pattern_is_built_from_collapsed_keyword():
    assert normalize("꿈 ㅇ").fallback_pattern == "꿈[아-잏]"


def test_empty_keyword_matches_every_value():
    kw = normalize("")
    assert kw.original == ""
    assert kw.collapsed == ""
    assert kw.wildcarded == "%%"
    assert kw.fallback_pattern == ""
    for value in ["", "해리포터", "abc", " "]:
        assert re.search(kw.fallback_pattern, value) is not None


def test_like_wildcards_typed_by_user_are_escaped():
    assert escape_like("100%") == "100\\%"
    assert escape_like("a_b") == "a\\_b"
    assert escape_like("a\\b") == "a\\\\b"
    assert normalize("100% 순수").wildcarded == "%100\\% 순수%"
