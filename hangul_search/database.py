from __future__ import annotations

import re

from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncEngine


def _regexp(pattern: str | None, value: str | None) -> bool | None:
    # SQLite는 `value REGEXP pattern`을 regexp(pattern, value)로 호출한다
    if pattern is None or value is None:
        return None
    return re.search(pattern, value) is not None


def install_search_functions(dbapi_conn) -> None:
    """SQLite 연결에 REGEXP 함수를 등록한다 (SQLite 기본 빌드에는 구현이 없다)."""
    dbapi_conn.create_function("regexp", 2, _regexp, deterministic=True)


def attach_search_functions(target_engine: AsyncEngine) -> None:
    """엔진이 새 연결을 열 때마다 검색용 함수를 등록하도록 리스너를 건다."""
    if target_engine.dialect.name != "sqlite":
        return

    @event.listens_for(target_engine.sync_engine, "connect")
    def _on_connect(dbapi_conn, _connection_record):
        install_search_functions(dbapi_conn)
