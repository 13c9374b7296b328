"""Unit tests for catalog data sources."""

import json

import pytest

from shop_catalog.catalog_source import InMemoryCatalogSource, JsonFileCatalogSource
from shop_catalog.exceptions import CatalogSourceError


class TestInMemoryCatalogSource:
    """Tests for InMemoryCatalogSource."""

    @pytest.mark.asyncio
    async def test_empty_by_default(self):
        assert await InMemoryCatalogSource().fetch_all() == ()

    @pytest.mark.asyncio
    async def test_snapshot_is_detached_from_input_list(self, make_item):
        items = [make_item("a"), make_item("b")]
        source = InMemoryCatalogSource(items)
        items.append(make_item("c"))

        snapshot = await source.fetch_all()
        assert [i.item_id for i in snapshot] == ["a", "b"]

    @pytest.mark.asyncio
    async def test_replace_items(self, make_item):
        source = InMemoryCatalogSource([make_item("a")])
        before = await source.fetch_all()

        source.replace_items([make_item("b")])

        assert [i.item_id for i in before] == ["a"]
        assert [i.item_id for i in await source.fetch_all()] == ["b"]


class TestJsonFileCatalogSource:
    """Tests for JsonFileCatalogSource."""

    @pytest.mark.asyncio
    async def test_loads_sample_catalog(self, project_root):
        source = JsonFileCatalogSource(project_root / "data" / "sample_catalog.json")

        items = await source.fetch_all()

        assert len(items) == 9
        first = items[0]
        assert first.item_id == "prod-001"
        assert first.tags == frozenset({"running", "men"})
        assert first.is_on_sale is True
        assert sum(1 for i in items if not i.is_active) == 1

    @pytest.mark.asyncio
    async def test_missing_file(self, tmp_path):
        with pytest.raises(CatalogSourceError):
            await JsonFileCatalogSource(tmp_path / "nope.json").fetch_all()

    @pytest.mark.asyncio
    async def test_invalid_json(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text("[{")

        with pytest.raises(CatalogSourceError):
            await JsonFileCatalogSource(path).fetch_all()

    @pytest.mark.asyncio
    async def test_invalid_item(self, tmp_path):
        path = tmp_path / "catalog.json"
        path.write_text(json.dumps([{"item_id": "p1", "name": "No price"}]))

        with pytest.raises(CatalogSourceError) as exc_info:
            await JsonFileCatalogSource(path).fetch_all()

        assert "price" in exc_info.value.detail
