# kitchen/models/locations.py

from sqlalchemy import Column, Integer, String
from sqlalchemy.orm import relationship

from kitchen.database import Base


class Location(Base):
    __tablename__ = "locations"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, unique=True, nullable=False)

    items = relationship("Item", back_populates="location")
