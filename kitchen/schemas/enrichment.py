# kitchen/schemas/enrichment.py

from pydantic import BaseModel


class ProductSuggestion(BaseModel):
    name: str
    image_url: str
    tags: list[str]
