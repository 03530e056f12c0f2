# kitchen/models/products.py

from sqlalchemy import CheckConstraint, Column, Integer, String
from sqlalchemy.orm import relationship

from kitchen.database import Base
from kitchen.models.tags import product_tags


class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    ean13 = Column(String(13), nullable=True, index=True)
    product_code = Column(String, nullable=True, index=True)
    name = Column(String, nullable=False)
    image_url = Column(String, nullable=True)

    tags = relationship(
        "Tag",
        secondary=product_tags,
        back_populates="products",
        order_by="Tag.id",
    )
    items = relationship("Item", back_populates="product")

    __table_args__ = (
        CheckConstraint(
            "(ean13 IS NULL) <> (product_code IS NULL)",
            name="ck_product_single_identifier",
        ),
    )

    @property
    def tag_names(self) -> list[str]:
        return [tag.name for tag in self.tags]
