# kitchen/services/inventory.py

import logging

from sqlalchemy.orm import Session, joinedload, selectinload

from kitchen.core.errors import ValidationError
from kitchen.database import transaction
from kitchen.models.items import Item
from kitchen.models.locations import Location
from kitchen.models.products import Product
from kitchen.schemas.inventory import ItemCreate
from kitchen.services.tags import resolve_tags

logger = logging.getLogger("kitchen")


def list_locations(db: Session) -> list[Location]:
    return db.query(Location).order_by(Location.id).all()


def list_items_by_location(db: Session, location_id: int) -> list[Item]:
    # Inner join: items whose product is gone are left out
    return (
        db.query(Item)
        .join(Product, Item.product_id == Product.id)
        .options(joinedload(Item.product).selectinload(Product.tags))
        .filter(Item.location_id == location_id)
        .order_by(Item.expiration_date.is_(None), Item.expiration_date, Item.id)
        .all()
    )


def create_item(db: Session, data: ItemCreate) -> Item:
    if data.quantity < 0:
        raise ValidationError("Quantity cannot be negative")

    with transaction(db, "Unable to add item"):
        product = db.query(Product).filter(Product.id == data.product_id).first()
        if not product:
            raise ValidationError("Product not found")

        location = db.query(Location).filter(Location.id == data.location_id).first()
        if not location:
            raise ValidationError("Location not found")

        # Tags given with an item describe its product
        for tag in resolve_tags(db, data.tags):
            if tag not in product.tags:
                product.tags.append(tag)

        item = Item(
            product_id=product.id,
            location_id=location.id,
            quantity=data.quantity,
            expiration_date=data.expiration_date,
            frozen_date=data.frozen_date,
        )
        db.add(item)
        db.flush()

    logger.info(f"Added item {item.id} ({product.name} x{item.quantity}) to {location.name}")
    return item
