"""설정 테스트: 조건 템플릿 검증."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from hangul_search.config import Settings
from hangul_search.search.predicate import ConditionTemplates, build_field_predicate


def test_template_without_placeholders_is_rejected():
    with pytest.raises(ValidationError, match="자리표시자"):
        Settings(pattern_template="title REGEXP :p")


def test_templates_can_be_overridden_from_environment(monkeypatch):
    monkeypatch.setenv("PATTERN_TEMPLATE", "{field} ~ :{param}")
    custom = Settings()
    templates = ConditionTemplates(
        collapsed=custom.collapsed_template,
        literal=custom.literal_template,
        pattern=custom.pattern_template,
    )
    pred = build_field_predicate("name", "ㄱ", "n", templates=templates)
    assert pred.conditions[2].fragment == "name ~ :n_pattern"
