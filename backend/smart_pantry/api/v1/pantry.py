"""
Pantry API Endpoints
CRUD operations for pantry items.
"""

from fastapi import APIRouter, Depends, HTTPException, status, Query
from sqlalchemy.orm import Session
from typing import Optional
from uuid import UUID

from smart_pantry.api.v1.deps import get_current_user
from smart_pantry.db.session import get_db
from smart_pantry.models.user import User
from smart_pantry.services.pantry_service import PantryService
from smart_pantry.schemas.pantry import (
    PantryItemCreate,
    PantryItemUpdate,
    PantryItemResponse,
    PantryItemListResponse,
    PantryStatsResponse,
    ConsumeItemRequest,
)


router = APIRouter(prefix="/pantry", tags=["Pantry"])


def _item_not_found() -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail="Item not found"
    )


@router.get("", response_model=PantryItemListResponse)
def get_pantry_items(
    search: Optional[str] = Query(None, description="Search by name"),
    category: Optional[str] = Query(None, description="Filter by category"),
    expiring: bool = Query(False, description="Show only expiring soon"),
    expired: bool = Query(False, description="Show only expired"),
    consumed: bool = Query(False, description="Show consumed items"),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get the caller's pantry items with optional filters."""
    items = PantryService.get_items(
        db, current_user.id,
        search=search,
        category=category,
        expiring=expiring,
        expired=expired,
        consumed=consumed,
    )
    stats_data = PantryService.get_stats(db, current_user.id)

    return PantryItemListResponse(
        items=items,
        total=len(items),
        stats=PantryStatsResponse(**stats_data),
    )


@router.post("", response_model=PantryItemResponse, status_code=status.HTTP_201_CREATED)
def create_pantry_item(
    data: PantryItemCreate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Create a pantry item. The expiry date defaults from the scanned product."""
    item = PantryService.create_item(db, current_user.id, data)
    db.commit()
    db.refresh(item)
    return item


@router.get("/stats", response_model=PantryStatsResponse)
def get_pantry_stats(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Get pantry statistics (totals, expiring, expired, per category)."""
    return PantryService.get_stats(db, current_user.id)


@router.get("/{item_id}", response_model=PantryItemResponse)
def get_pantry_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    item = PantryService.get_item_by_id(db, item_id, current_user.id)
    if not item:
        raise _item_not_found()
    return item


@router.put("/{item_id}", response_model=PantryItemResponse)
def update_pantry_item(
    item_id: UUID,
    data: PantryItemUpdate,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    item = PantryService.update_item(db, item_id, current_user.id, data)
    if not item:
        raise _item_not_found()
    db.commit()
    db.refresh(item)
    return item


@router.delete("/{item_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_pantry_item(
    item_id: UUID,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    if not PantryService.delete_item(db, item_id, current_user.id):
        raise _item_not_found()
    db.commit()


@router.post("/{item_id}/consume", response_model=PantryItemResponse)
def consume_pantry_item(
    item_id: UUID,
    data: ConsumeItemRequest = ConsumeItemRequest(),
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user),
):
    """Consume a pantry item (total or partial)."""
    item = PantryService.consume_item(db, item_id, current_user.id, data.quantity)
    if not item:
        raise _item_not_found()
    db.commit()
    db.refresh(item)
    return item
