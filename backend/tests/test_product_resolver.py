import asyncio
from typing import Dict, Optional

import pytest

from smart_pantry.schemas.product import BarcodeProductData, ResolutionStatus
from smart_pantry.services.product_cache import LocalProductCache
from smart_pantry.services.product_resolver import ProductResolver, enrich_product, resolve_product

from conftest import FakeDirectory


class FakeCache:
    """Dict-backed cache recording lookups and writes."""

    def __init__(self, products: Optional[Dict[str, BarcodeProductData]] = None, writable: bool = True):
        self.products = dict(products or {})
        self.writable = writable
        self.lookups = []
        self.writes = []

    async def lookup(self, barcode):
        self.lookups.append(barcode)
        return self.products.get(barcode)

    def write_back(self, product):
        self.writes.append(product)
        if not self.writable:
            return False
        self.products[product.barcode] = product
        return True


class ExplodingDirectory:
    async def lookup(self, barcode):
        raise RuntimeError("directory unavailable")


APPLE = BarcodeProductData(barcode="123456789012", name="Apple", category="Fruits")


def resolve(resolver, barcode):
    return asyncio.run(resolver.resolve(barcode))


def test_cached_barcode_skips_external_lookup():
    cached = BarcodeProductData(barcode="4006381333931", name="Stabilo Pen", category="Other")
    cache = FakeCache({"4006381333931": cached})
    directory = FakeDirectory()

    result = resolve(ProductResolver(cache, directory), "4006381333931")

    assert result.found is True
    assert result.status == ResolutionStatus.RESOLVED
    assert result.source == "local"
    assert result.product.name == "Stabilo Pen"
    assert directory.calls == []
    assert cache.writes == []


def test_external_hit_is_enriched_and_written_back():
    cache = FakeCache()
    directory = FakeDirectory({"123456789012": APPLE})

    result = resolve(ProductResolver(cache, directory), "123456789012")

    assert result.found is True
    assert result.source == "external"
    assert result.cached is True
    assert result.product.name == "Apple"
    assert result.product.category == "Produce"
    assert result.product.default_expiry_days == 7
    assert result.product.source_origin == "external"
    assert len(cache.writes) == 1
    assert cache.writes[0].category == "Produce"


def test_second_resolution_is_served_from_cache():
    cache = FakeCache()
    directory = FakeDirectory({"123456789012": APPLE})
    resolver = ProductResolver(cache, directory)

    first = resolve(resolver, "123456789012")
    second = resolve(resolver, "123456789012")

    assert first.source == "external"
    assert second.source == "local"
    assert second.product.name == first.product.name
    assert second.product.category == first.product.category
    assert directory.calls == ["123456789012"]


def test_unknown_barcode_is_not_found_and_not_written():
    cache = FakeCache()
    directory = FakeDirectory()

    result = resolve(ProductResolver(cache, directory), "000000000000")

    assert result.found is False
    assert result.status == ResolutionStatus.NOT_FOUND
    assert result.product is None
    assert result.message == "No product found for barcode: 000000000000"
    assert cache.writes == []


def test_directory_failure_reads_as_not_found():
    cache = FakeCache()

    result = resolve(ProductResolver(cache, ExplodingDirectory()), "5000112637922")

    assert result.found is False
    assert result.status == ResolutionStatus.NOT_FOUND
    assert cache.writes == []


def test_write_back_failure_still_returns_product():
    cache = FakeCache(writable=False)
    directory = FakeDirectory({"123456789012": APPLE})

    result = resolve(ProductResolver(cache, directory), "123456789012")

    assert result.found is True
    assert result.source == "external"
    assert result.cached is False
    assert result.product.name == "Apple"


def test_barcode_whitespace_is_stripped():
    cache = FakeCache()
    directory = FakeDirectory({"123456789012": APPLE})

    result = resolve(ProductResolver(cache, directory), "  123456789012 \n")

    assert result.found is True
    assert result.barcode == "123456789012"
    assert cache.lookups == ["123456789012"]


def test_enrich_keeps_explicit_shelf_life():
    product = BarcodeProductData(barcode="12345678", name="Aged Cheese", category="Cheeses", default_expiry_days=60)
    enriched = enrich_product(product)
    assert enriched.category == "Dairy"
    assert enriched.default_expiry_days == 60


@pytest.mark.parametrize("category", [None, "Mystery items"])
def test_enrich_defaults_unmapped_products_to_other(category):
    product = BarcodeProductData(barcode="12345678", name="Thing", category=category)
    enriched = enrich_product(product)
    assert enriched.category == "Other"
    assert enriched.default_expiry_days == 30


def test_resolve_product_with_database_cache(db):
    directory = FakeDirectory({"123456789012": APPLE})

    first = asyncio.run(resolve_product(db, "123456789012", client=directory))
    second = asyncio.run(resolve_product(db, "123456789012", client=directory))

    assert first.source == "external"
    assert first.cached is True
    assert second.source == "local"
    assert second.product.category == "Produce"
    assert len(directory.calls) == 1

    row = LocalProductCache(db).get("123456789012")
    assert row.name == "Apple"
    assert row.source_origin == "external"


def test_cache_write_back_upserts(db):
    cache = LocalProductCache(db)
    assert cache.write_back(BarcodeProductData(barcode="12345670", name="Old name", category="Other"))
    assert cache.write_back(BarcodeProductData(barcode="12345670", name="New name", category="Dairy"))

    cached = asyncio.run(cache.lookup("12345670"))
    assert cached.name == "New name"
    assert cached.category == "Dairy"
