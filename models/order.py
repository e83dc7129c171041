from sqlalchemy import Column, Integer, Float, String, DateTime, ForeignKey
from sqlalchemy.orm import relationship
from datetime import datetime
from core.db import Base
from core.order_status import OrderStatus, DeliveryMethod

class Order(Base):
    __tablename__ = "orders"
    
    id = Column(Integer, primary_key=True, index=True)
    restaurant_id = Column(String, nullable=False, index=True)
    status = Column(String, default=OrderStatus.PENDING.value, nullable=False, index=True)
    delivery_method = Column(String, default=DeliveryMethod.DINE_IN.value, nullable=False)
    customer_name = Column(String, nullable=False)
    customer_phone = Column(String, nullable=False)
    customer_email = Column(String, nullable=True)
    table_number = Column(String, nullable=True)  # dine-in only
    delivery_address = Column(String, nullable=True)  # delivery only
    total = Column(Float, nullable=False, default=0.0)
    created_at = Column(DateTime, default=datetime.utcnow)
    
    # Relationships
    items = relationship("OrderItem", back_populates="order", cascade="all, delete-orphan", order_by="OrderItem.id")

    def recompute_total(self):
        self.total = sum(item.unit_price * item.quantity for item in self.items)
        return self.total

    def to_dict(self):
        """Detached snapshot handed to the views."""
        return {
            "id": self.id,
            "restaurant_id": self.restaurant_id,
            "status": OrderStatus.parse(self.status),
            "delivery_method": DeliveryMethod.parse(self.delivery_method),
            "customer": {
                "name": self.customer_name,
                "phone": self.customer_phone,
                "email": self.customer_email,
            },
            "table_number": self.table_number,
            "delivery_address": self.delivery_address,
            "products": [item.to_dict() for item in self.items],
            "total": self.total,
            "created_at": self.created_at,
        }


class OrderItem(Base):
    __tablename__ = "order_items"
    
    id = Column(Integer, primary_key=True, index=True)
    order_id = Column(Integer, ForeignKey("orders.id"), nullable=False)
    product_id = Column(Integer, ForeignKey("products.id"), nullable=False)
    name = Column(String, nullable=False)
    unit_price = Column(Float, nullable=False)
    quantity = Column(Integer, nullable=False)
    
    # Relationships
    order = relationship("Order", back_populates="items")
    product = relationship("Product")

    def to_dict(self):
        return {
            "product_id": self.product_id,
            "name": self.name,
            "price": self.unit_price,
            "quantity": self.quantity,
        }
