# kitchen/schemas/inventory.py

from datetime import date

from pydantic import BaseModel, field_validator


class ItemCreate(BaseModel):
    product_id: int
    location_id: int
    quantity: int = 1
    expiration_date: date | None = None
    frozen_date: date | None = None
    tags: str | list[str] | None = None

    @field_validator("expiration_date", "frozen_date", mode="before")
    @classmethod
    def blank_date_is_none(cls, value):
        # Form clients send "" for an empty date input
        if isinstance(value, str) and not value.strip():
            return None
        return value


class ItemCreated(BaseModel):
    message: str
    itemId: int


class ItemResponse(BaseModel):
    id: int
    product_id: int
    location_id: int
    quantity: int
    expiration_date: date | None
    frozen_date: date | None
    product_name: str
    image_url: str | None
    ean13: str | None
    product_code: str | None
    tags: list[str]

    @classmethod
    def from_item(cls, item) -> "ItemResponse":
        product = item.product
        return cls(
            id=item.id,
            product_id=item.product_id,
            location_id=item.location_id,
            quantity=item.quantity,
            expiration_date=item.expiration_date,
            frozen_date=item.frozen_date,
            product_name=product.name,
            image_url=product.image_url,
            ean13=product.ean13,
            product_code=product.product_code,
            tags=product.tag_names,
        )
