# models/product.py
from sqlalchemy import Column, Integer, String, Float, Boolean
from core.db import Base

class Product(Base):
    __tablename__ = "products"

    id = Column(Integer, primary_key=True, index=True)
    restaurant_id = Column(String, nullable=False, index=True)
    name = Column(String, nullable=False)
    category = Column(String)  # Tacos, Burritos, Bebidas...
    price = Column(Float, nullable=False)
    available = Column(Boolean, default=True)

    def to_dict(self):
        return {"id": self.id, "name": self.name, "price": self.price, "category": self.category}
