"""테스트 공통 설정: REGEXP가 등록된 인메모리 SQLite 세션과 도서 샘플 데이터."""

from __future__ import annotations

import pytest
from sqlalchemy import Column, Integer, MetaData, String, Table, insert
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from hangul_search.database import attach_search_functions

metadata = MetaData()

books = Table(
    "books",
    metadata,
    Column("id", Integer, primary_key=True),
    Column("title", String(200), nullable=False),
    Column("author", String(100), nullable=False),
)

SAMPLE_BOOKS = [
    {"title": "꿈을 꾸는 아이", "author": "김민수"},
    {"title": "해리포터와 마법사의 돌", "author": "조앤 롤링"},
    {"title": "어린 왕자", "author": "생텍쥐페리"},
    {"title": "100% 순수", "author": "이지은"},
    {"title": "data_science 입문", "author": "박정호"},
    {"title": "오리 사냥", "author": "최유진"},
]


@pytest.fixture
async def session():
    """각 테스트마다 독립적인 인메모리 DB 세션 제공."""
    engine = create_async_engine("sqlite+aiosqlite://", echo=False)
    attach_search_functions(engine)

    async with engine.begin() as conn:
        await conn.run_sync(metadata.create_all)
        await conn.execute(insert(books), SAMPLE_BOOKS)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as sess:
        yield sess

    await engine.dispose()
