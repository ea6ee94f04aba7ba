"""Tests for font and decorator API endpoints."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from fancyfonts.api.deps import catalog_dependency
from fancyfonts.db.database import get_session
from fancyfonts.main import app
from fancyfonts.models.catalog import Catalog
from fancyfonts.models.db import Base


@pytest.fixture
async def async_engine():
    """Create an in-memory SQLite engine for testing."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def client(async_engine, sample_catalog: Catalog):
    """Provide an async test client with overridden session and catalog."""
    async_session = async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_get_session():
        async with async_session() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_session] = override_get_session
    app.dependency_overrides[catalog_dependency] = lambda: sample_catalog

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client

    app.dependency_overrides.clear()


class TestListFonts:
    async def test_lists_all_in_catalog_order(self, client: AsyncClient) -> None:
        response = await client.get("/fonts", params={"text": "ab"})

        assert response.status_code == 200
        data = response.json()
        assert [f["id"] for f in data["fonts"]] == ["flip", "block", "bold-serif", "plain"]
        assert data["total"] == 4
        assert data["shown"] == 4
        assert data["has_more"] is False
        assert data["summary"] == "Showing 4 / 4 fonts"

    async def test_renders_output(self, client: AsyncClient) -> None:
        response = await client.get("/fonts", params={"text": "ab", "font_id": "flip"})

        card = response.json()["fonts"][0]
        assert card["output"] == "ɐq"
        assert card["styles"] == ["fun", "upside down"]
        assert card["is_block_font"] is False

    async def test_block_font_output(self, client: AsyncClient) -> None:
        response = await client.get("/fonts", params={"text": "AB", "font_id": "block"})

        card = response.json()["fonts"][0]
        assert card["is_block_font"] is True
        assert card["output"] == "# ##\n# .#"

    async def test_default_preview_text(self, client: AsyncClient) -> None:
        response = await client.get("/fonts", params={"font_id": "plain"})

        card = response.json()["fonts"][0]
        assert card["output"] == "Preview Text"
        assert card["name"] == "plain"

    async def test_pagination(self, client: AsyncClient) -> None:
        response = await client.get("/fonts", params={"page_size": 3})

        data = response.json()
        assert data["shown"] == 3
        assert data["has_more"] is True

        response = await client.get("/fonts", params={"page_size": 3, "limit": 6})
        data = response.json()
        assert data["shown"] == 4
        assert data["has_more"] is False

    async def test_query_and_style(self, client: AsyncClient) -> None:
        response = await client.get("/fonts", params={"query": "SERIF"})
        assert [f["id"] for f in response.json()["fonts"]] == ["bold-serif"]

        response = await client.get("/fonts", params={"style": "ascii art"})
        assert [f["id"] for f in response.json()["fonts"]] == ["block"]

    async def test_decorator_param(self, client: AsyncClient) -> None:
        response = await client.get(
            "/fonts", params={"text": "ab", "font_id": "flip", "decorator_id": "stars"}
        )

        data = response.json()
        assert data["fonts"][0]["output"] == "★ ɐq ★"
        assert data["decorator_id"] == "stars"

    async def test_unknown_decorator_falls_back(self, client: AsyncClient) -> None:
        response = await client.get(
            "/fonts", params={"text": "ab", "font_id": "flip", "decorator_id": "gone"}
        )

        data = response.json()
        assert data["fonts"][0]["output"] == "ɐq"
        assert data["decorator_id"] == "none"

    async def test_saved_decorator_used(self, client: AsyncClient) -> None:
        await client.put("/preferences/user-1/decorator", json={"decorator_id": "stars"})

        response = await client.get(
            "/fonts", params={"text": "ab", "font_id": "flip", "user_id": "user-1"}
        )

        assert response.json()["fonts"][0]["output"] == "★ ɐq ★"

    async def test_fav_only(self, client: AsyncClient) -> None:
        await client.post("/preferences/user-1/favorites/bold-serif")

        response = await client.get("/fonts", params={"fav_only": True, "user_id": "user-1"})

        fonts = response.json()["fonts"]
        assert [f["id"] for f in fonts] == ["bold-serif"]
        assert fonts[0]["is_favorite"] is True

    async def test_invalid_page_size(self, client: AsyncClient) -> None:
        response = await client.get("/fonts", params={"page_size": 0})
        assert response.status_code == 422


class TestStylesAndDetail:
    async def test_styles(self, client: AsyncClient) -> None:
        response = await client.get("/fonts/styles")

        assert response.status_code == 200
        assert response.json()["styles"] == ["ascii art", "bold", "fun", "serif", "upside down"]

    async def test_font_detail(self, client: AsyncClient) -> None:
        response = await client.get("/fonts/block")

        assert response.status_code == 200
        data = response.json()
        assert data["display_name"] == "Block"
        assert data["characters"] == {"A": "#\n#", "B": "##\n.#"}
        assert data["is_block_font"] is True

    async def test_font_not_found(self, client: AsyncClient) -> None:
        response = await client.get("/fonts/missing")

        assert response.status_code == 404
        data = response.json()
        assert data["outcome"] == "known_failure"
        assert data["failure"]["kind"] == "not_found"


class TestRenderFont:
    async def test_render(self, client: AsyncClient) -> None:
        response = await client.post(
            "/fonts/block/render", json={"text": "A\nB", "decorator_id": "stars"}
        )

        assert response.status_code == 200
        data = response.json()
        assert data["output"] == "★ #\n#\n\n##\n.# ★"
        assert data["decorator_id"] == "stars"

    async def test_render_uses_saved_decorator(self, client: AsyncClient) -> None:
        await client.put("/preferences/user-1/decorator", json={"decorator_id": "stars"})

        response = await client.post(
            "/fonts/flip/render", json={"text": "a", "user_id": "user-1"}
        )

        assert response.json()["output"] == "★ ɐ ★"

    async def test_blank_decorator_value(self, client: AsyncClient) -> None:
        response = await client.post(
            "/fonts/flip/render", json={"text": "a", "decorator_id": "blank"}
        )

        assert response.json()["output"] == "ɐ"

    async def test_render_unknown_font(self, client: AsyncClient) -> None:
        response = await client.post("/fonts/missing/render", json={"text": "a"})

        assert response.status_code == 404
        body = response.json()
        assert set(body) == {"outcome", "failure"}
        assert body["outcome"] == "known_failure"
        assert body["failure"]["kind"] == "not_found"


class TestDecorators:
    async def test_list(self, client: AsyncClient) -> None:
        response = await client.get("/decorators")

        assert response.status_code == 200
        assert [d["id"] for d in response.json()["decorators"]] == ["none", "stars", "blank"]


class TestCatalogUnavailable:
    async def test_missing_tables_return_503(
        self, client: AsyncClient, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Font routes answer 503 when the data tables cannot be loaded."""

        def unavailable() -> Catalog:
            raise FileNotFoundError("Fonts table not found")

        app.dependency_overrides.pop(catalog_dependency)
        monkeypatch.setattr("fancyfonts.api.deps.get_catalog", unavailable)

        response = await client.get("/fonts/styles")

        assert response.status_code == 503
        assert response.json()["failure"]["kind"] == "service_unavailable"
