# kitchen/models/items.py

from sqlalchemy import CheckConstraint, Column, Date, ForeignKey, Index, Integer
from sqlalchemy.orm import relationship

from kitchen.database import Base


class Item(Base):
    __tablename__ = "items"

    id = Column(Integer, primary_key=True, index=True)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False, index=True)
    location_id = Column(Integer, ForeignKey("locations.id"), nullable=False, index=True)
    quantity = Column(Integer, nullable=False, default=1)
    expiration_date = Column(Date, nullable=True)
    frozen_date = Column(Date, nullable=True)

    product = relationship("Product", back_populates="items")
    location = relationship("Location", back_populates="items")

    __table_args__ = (
        Index("ix_items_location_expiration", "location_id", "expiration_date"),
        CheckConstraint("quantity >= 0", name="ck_item_quantity_non_negative"),
    )
