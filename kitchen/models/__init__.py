from kitchen.models.locations import Location
from kitchen.models.tags import Tag, product_tags
from kitchen.models.products import Product
from kitchen.models.items import Item

__all__ = ["Location", "Tag", "product_tags", "Product", "Item"]
