# kitchen/schemas/product.py

from pydantic import AliasChoices, BaseModel, Field


class ProductPayload(BaseModel):
    # Used for both create and full-replacement update
    product_name: str | None = None
    ean13: str | None = None
    product_code: str | None = None
    image_url: str | None = None
    tags: str | list[str] | None = None


class ProductCreated(BaseModel):
    productId: int


class ProductResponse(BaseModel):
    id: int
    name: str
    ean13: str | None
    product_code: str | None
    image_url: str | None
    tags: list[str] = Field(
        default_factory=list,
        validation_alias=AliasChoices("tag_names", "tags"),
    )

    class Config:
        from_attributes = True
