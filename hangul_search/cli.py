"""검색어가 어떤 조건으로 컴파일되는지 확인하는 진단용 CLI.

    python run.py "꿈ㅇ" --field book.title --field author.name
"""

from __future__ import annotations

import argparse
import logging

from hangul_search.config import settings
from hangul_search.search.naming import ParamNamer
from hangul_search.search.predicate import build_field_predicate

logger = logging.getLogger(__name__)


def configure_logging(level: str | None = None) -> None:
    logging.basicConfig(
        level=(level or settings.log_level).upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="한글 검색어 조건 미리보기")
    parser.add_argument("keyword", help="검색어")
    parser.add_argument(
        "--field", action="append", dest="fields",
        help="검색 대상 필드 표현식 (여러 번 지정 가능, 기본값: title)",
    )
    parser.add_argument("--log-level", default=None)
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    configure_logging(args.log_level)

    namer = ParamNamer()
    fields = args.fields or ["title"]
    logger.info("검색어 컴파일: keyword=%r fields=%s", args.keyword, fields)

    for field in fields:
        predicate = build_field_predicate(field, args.keyword, namer=namer)
        kw = predicate.keyword
        print(f"[{field}]")
        print(f"  original  : {kw.original!r}")
        print(f"  collapsed : {kw.collapsed!r}")
        print(f"  pattern   : {kw.fallback_pattern!r}")
        for cond in predicate.conditions:
            print(f"  OR {cond.fragment}  -- {cond.param_name}={cond.param_value!r}")
    return 0
