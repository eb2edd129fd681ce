"""
Products API Endpoints

Barcode resolution (local cache, then Open Food Facts), manual product
registration and the product overview used by the scanner screen.
"""

import logging

from fastapi import APIRouter, Depends, HTTPException, Path, status
from sqlalchemy.orm import Session

from smart_pantry.api.v1.deps import get_current_user, get_product_directory
from smart_pantry.core.constants import BARCODE_PATTERN
from smart_pantry.db.session import get_db
from smart_pantry.models.user import User
from smart_pantry.schemas.product import (
    BarcodeProductCreate,
    BarcodeProductResponse,
    ProductOverviewResponse,
    ResolutionResult,
)
from smart_pantry.services.product_resolver import ProductSource, resolve_product
from smart_pantry.services.product_service import ProductService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/products", tags=["Products"])

BarcodePath = Path(..., pattern=BARCODE_PATTERN, description="EAN/UPC barcode (8-13 digits)")


@router.get(
    "/resolve/{barcode}",
    response_model=ResolutionResult,
    summary="Resolve Product by Barcode",
    description="""
    Resolve a barcode using the local product cache first, then Open Food Facts.

    Products found externally get a mapped category and an estimated shelf life
    and are written back to the cache. An unknown barcode is a normal result
    (found=false), not an error.
    """
)
async def resolve_barcode(
    barcode: str = BarcodePath,
    db: Session = Depends(get_db),
    directory: ProductSource = Depends(get_product_directory),
    current_user: User = Depends(get_current_user),
):
    return await resolve_product(db, barcode, client=directory)


@router.get("/{barcode}", response_model=BarcodeProductResponse)
def get_product(
    barcode: str = BarcodePath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get a cached product (no external lookup)."""
    product = ProductService.get_product(db, barcode)
    if not product:
        raise HTTPException(status_code=404, detail="Product not found")
    return product


@router.post("", response_model=BarcodeProductResponse, status_code=status.HTTP_201_CREATED)
def create_product(
    data: BarcodeProductCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Register a product by hand."""
    if ProductService.get_product(db, data.barcode):
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=f"Product with barcode {data.barcode} already exists"
        )

    product = ProductService.create_product(db, data)
    db.commit()
    db.refresh(product)
    logger.info(f"[Products] {product.barcode} registered manually as {product.category}")
    return product


@router.get("/{barcode}/overview", response_model=ProductOverviewResponse)
def get_product_overview(
    barcode: str = BarcodePath,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Cached product with its current weight and the caller's expiry date."""
    overview = ProductService.get_overview(db, current_user.id, barcode)
    if overview is None:
        raise HTTPException(status_code=404, detail="Product not found")
    return ProductOverviewResponse(**overview)
