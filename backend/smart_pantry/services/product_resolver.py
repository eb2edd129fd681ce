"""
Product Resolver

Resolves a barcode to a product with a two-tier lookup:

    local cache -> Open Food Facts -> category/expiry enrichment
                -> write-back into the cache -> result

The flow is linear (no retries, no back-edges) and ends in one of three
terminal states: resolved from the cache, resolved from Open Food Facts,
or not found. Lower-level failures never reach the caller: network errors
read as not found, cache write failures only clear the `cached` flag.
"""

import logging
from typing import Optional, Protocol

from sqlalchemy.orm import Session

from smart_pantry.core.constants import SOURCE_LOCAL, SOURCE_EXTERNAL
from smart_pantry.integrations.openfoodfacts import OpenFoodFactsClient
from smart_pantry.schemas.product import BarcodeProductData, ResolutionResult
from smart_pantry.services.category_heuristics import map_category, estimate_expiry_days
from smart_pantry.services.product_cache import LocalProductCache

logger = logging.getLogger(__name__)


class ProductSource(Protocol):
    """Anything that can turn a barcode into a product, or None."""

    async def lookup(self, barcode: str) -> Optional[BarcodeProductData]:
        ...


class WritableProductSource(ProductSource, Protocol):
    """A product source that also accepts resolved products."""

    def write_back(self, product: BarcodeProductData) -> bool:
        ...


def enrich_product(product: BarcodeProductData) -> BarcodeProductData:
    """
    Normalise the raw category text to the taxonomy and fill in the
    default shelf life when the source did not provide one.
    """
    category = map_category(product.category)
    expiry_days = product.default_expiry_days or estimate_expiry_days(category)
    return product.model_copy(update={
        "category": category,
        "default_expiry_days": expiry_days,
    })


class ProductResolver:
    """
    Composes the local cache and the external directory.

    Both collaborators are passed in, so tests can use in-memory fakes.
    """

    def __init__(self, local: WritableProductSource, external: ProductSource):
        self.local = local
        self.external = external

    async def resolve(self, barcode: str) -> ResolutionResult:
        barcode = barcode.strip()

        cached = await self.local.lookup(barcode)
        if cached is not None:
            logger.info(f"[Resolver] {barcode} found in local cache")
            return ResolutionResult.resolved(cached, SOURCE_LOCAL)

        try:
            found = await self.external.lookup(barcode)
        except Exception as e:
            logger.warning(f"[Resolver] External lookup for {barcode} failed: {e}")
            found = None

        if found is None:
            logger.info(f"[Resolver] {barcode} not found")
            return ResolutionResult.not_found(barcode)

        product = enrich_product(found.model_copy(update={
            "barcode": barcode,
            "source_origin": SOURCE_EXTERNAL,
        }))
        written = self.local.write_back(product)
        if not written:
            logger.warning(f"[Resolver] {barcode} resolved but not cached")

        logger.info(f"[Resolver] {barcode} resolved via external directory ({product.category})")
        return ResolutionResult.resolved(product, SOURCE_EXTERNAL, cached=written)


async def resolve_product(
    db: Session,
    barcode: str,
    client: Optional[ProductSource] = None,
) -> ResolutionResult:
    """
    Resolve a barcode against the database-backed cache and Open Food Facts.

    Args:
        db: Database session for the local cache
        barcode: Barcode string as typed or scanned
        client: External directory (defaults to OpenFoodFactsClient())

    Returns:
        ResolutionResult (found or not found, never raises for lookups)
    """
    resolver = ProductResolver(
        local=LocalProductCache(db),
        external=client or OpenFoodFactsClient(),
    )
    return await resolver.resolve(barcode)
