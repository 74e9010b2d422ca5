"""
Tests for the schema bootstrap script.

System role: Verification that every table is created and dropped
"""

from sqlalchemy import inspect
from sqlalchemy.pool import StaticPool

from tourbook.boundary.db import create_tables
from tourbook.boundary.db.connection import build_async_engine

EXPECTED_TABLES = {
    "categories",
    "subcategories",
    "cities",
    "experiences",
    "blog_categories",
    "blog_posts",
    "blog_guide_sections",
    "blog_guide_items",
    "faqs",
    "homepage_settings",
    "homepage_stats",
    "testimonials",
    "internal_links_sections",
    "internal_links",
    "slug_redirects",
    "cart_items",
}


async def _table_names(engine) -> set[str]:
    async with engine.connect() as conn:
        return set(await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names()))


async def test_create_then_drop_all_tables(monkeypatch) -> None:
    engine = build_async_engine(
        "sqlite+aiosqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    monkeypatch.setattr(create_tables, "get_async_engine", lambda: engine)

    try:
        await create_tables.create_all_tables()
        await create_tables.create_all_tables()
        created = await _table_names(engine)

        await create_tables.drop_all_tables()
        dropped = await _table_names(engine)
    finally:
        await engine.dispose()

    assert EXPECTED_TABLES <= created
    assert dropped == set()
