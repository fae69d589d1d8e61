from hangul_search.search.jamo_table import (
    CONSONANT_RANGES,
    JAMO_RANGES,
    VOWEL_RANGES,
    JamoRange,
    lookup,
    render_class,
)
from hangul_search.search.naming import ParamNamer
from hangul_search.search.normalizer import NormalizedKeyword, normalize
from hangul_search.search.pattern import translate
from hangul_search.search.predicate import (
    ConditionTemplates,
    FieldPredicate,
    SearchCondition,
    bind_safe_prefix,
    build_field_predicate,
    combine_field_predicates,
)

__all__ = [
    "CONSONANT_RANGES",
    "VOWEL_RANGES",
    "JAMO_RANGES",
    "JamoRange",
    "lookup",
    "render_class",
    "NormalizedKeyword",
    "normalize",
    "translate",
    "ParamNamer",
    "ConditionTemplates",
    "SearchCondition",
    "bind_safe_prefix",
    "FieldPredicate",
    "build_field_predicate",
    "combine_field_predicates",
]
