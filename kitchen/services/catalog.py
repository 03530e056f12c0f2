# kitchen/services/catalog.py

import logging
import re

from sqlalchemy.orm import Session, selectinload

from kitchen.core.errors import NotFound, ValidationError
from kitchen.database import transaction
from kitchen.models.products import Product
from kitchen.schemas.product import ProductPayload
from kitchen.services.tags import resolve_tags

logger = logging.getLogger("kitchen")

EAN13_PATTERN = re.compile(r"[0-9]{13}")
PRODUCT_CODE_PATTERN = re.compile(r"[A-Z0-9]+")


def _blank_to_none(value: str | None) -> str | None:
    if value is None or not value.strip():
        return None
    return value.strip()


def is_valid_ean13(value: str) -> bool:
    return bool(EAN13_PATTERN.fullmatch(value))


def validate_product(data: ProductPayload) -> tuple[str, str | None, str | None]:
    """
    Check a product payload before anything is written.

    Returns (name, ean13, product_code) with blank identifiers turned into None.
    Exactly one identifier must be present. Product codes are not uppercased
    for the caller, a lowercase code is rejected.
    """
    name = _blank_to_none(data.product_name)
    if name is None:
        raise ValidationError("Product name is required")

    ean13 = _blank_to_none(data.ean13)
    product_code = _blank_to_none(data.product_code)

    if ean13 and product_code:
        raise ValidationError("Provide either ean13 or product_code, not both")
    if not ean13 and not product_code:
        raise ValidationError("Either ean13 or product_code is required")

    if ean13 and not is_valid_ean13(ean13):
        raise ValidationError("ean13 must be exactly 13 digits")
    if product_code and not PRODUCT_CODE_PATTERN.fullmatch(product_code):
        raise ValidationError("product_code must be uppercase letters and digits only")

    return name, ean13, product_code


def list_products(db: Session) -> list[Product]:
    return (
        db.query(Product)
        .options(selectinload(Product.tags))
        .order_by(Product.id)
        .all()
    )


def get_product(db: Session, product_id: int) -> Product:
    product = (
        db.query(Product)
        .options(selectinload(Product.tags))
        .filter(Product.id == product_id)
        .first()
    )

    if not product:
        raise NotFound("Product not found")

    return product


def create_product(db: Session, data: ProductPayload) -> Product:
    name, ean13, product_code = validate_product(data)

    with transaction(db, "Unable to create product"):
        product = Product(
            name=name,
            ean13=ean13,
            product_code=product_code,
            image_url=_blank_to_none(data.image_url),
        )
        db.add(product)
        db.flush()

        product.tags.extend(resolve_tags(db, data.tags))

    logger.info(f"Created product {product.id} ({product.name}) with tags {product.tag_names}")
    return product


def update_product(db: Session, product_id: int, data: ProductPayload) -> Product:
    name, ean13, product_code = validate_product(data)

    with transaction(db, "Unable to update product"):
        product = db.query(Product).filter(Product.id == product_id).first()
        if not product:
            raise NotFound("Product not found")

        product.name = name
        product.ean13 = ean13
        product.product_code = product_code
        product.image_url = _blank_to_none(data.image_url)

        # Full replacement of the tag associations
        product.tags = resolve_tags(db, data.tags)

    logger.info(f"Updated product {product.id} ({product.name}) with tags {product.tag_names}")
    return product
