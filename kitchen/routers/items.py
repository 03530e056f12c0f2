# kitchen/routers/items.py

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from kitchen.database import get_db
from kitchen.schemas.inventory import ItemCreate, ItemCreated, ItemResponse
from kitchen.services import inventory as inventory_service

router = APIRouter(tags=["Items"])


@router.get("/items/{location_id}", response_model=list[ItemResponse])
def list_items(
    location_id: int,
    db: Session = Depends(get_db),
):
    items = inventory_service.list_items_by_location(db, location_id)
    return [ItemResponse.from_item(item) for item in items]


@router.post("/item", response_model=ItemCreated)
def create_item(
    item_data: ItemCreate,
    db: Session = Depends(get_db),
):
    item = inventory_service.create_item(db, item_data)
    return {"message": "Item added successfully", "itemId": item.id}
