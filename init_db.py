from datetime import datetime, timedelta

from core.db import Base, engine, SessionLocal
from core.config import DEFAULT_RESTAURANT_ID
from core.order_status import OrderStatus, DeliveryMethod
from models.admin_user import AdminUser
from models.product import Product
from models.order import Order, OrderItem
from models.audit_log import AuditLog
from core.user_service import create_default_admin

def seed_products(db):
    existing = db.query(Product).first()
    if existing:
        print("Products already seeded.")
        return
    sample_products = [
        Product(restaurant_id=DEFAULT_RESTAURANT_ID, name="Taco al Pastor", category="Tacos", price=12000.0),
        Product(restaurant_id=DEFAULT_RESTAURANT_ID, name="Taco de Birria", category="Tacos", price=14000.0),
        Product(restaurant_id=DEFAULT_RESTAURANT_ID, name="Burrito Supremo", category="Burritos", price=25000.0),
        Product(restaurant_id=DEFAULT_RESTAURANT_ID, name="Quesadilla", category="Antojitos", price=16000.0),
        Product(restaurant_id=DEFAULT_RESTAURANT_ID, name="Nachos con Queso", category="Antojitos", price=18000.0),
        Product(restaurant_id=DEFAULT_RESTAURANT_ID, name="Agua de Jamaica", category="Bebidas", price=6000.0),
        Product(restaurant_id=DEFAULT_RESTAURANT_ID, name="Michelada", category="Bebidas", price=15000.0),
    ]
    db.add_all(sample_products)
    db.commit()
    print("Sample products seeded.")

def seed_orders(db):
    if db.query(Order).first():
        print("Orders already seeded.")
        return
    products = {p.name: p for p in db.query(Product).all()}
    now = datetime.utcnow()
    samples = [
        (OrderStatus.PENDING, DeliveryMethod.DINE_IN, "Laura Gómez", "3001234567", {"table_number": "4"},
         [("Taco al Pastor", 3), ("Agua de Jamaica", 2)], 5),
        (OrderStatus.PREPARING, DeliveryMethod.DELIVERY, "Carlos Ruiz", "3109876543",
         {"delivery_address": "Calle 45 #12-30", "customer_email": "carlos@example.com"},
         [("Burrito Supremo", 2)], 25),
        (OrderStatus.READY, DeliveryMethod.PICKUP, "Ana Torres", "3205551234", {},
         [("Quesadilla", 1), ("Michelada", 1)], 40),
        (OrderStatus.DELIVERED, DeliveryMethod.DINE_IN, "Pedro López", "3157778899", {"table_number": "9"},
         [("Nachos con Queso", 1), ("Taco de Birria", 2)], 130),
    ]
    for status, method, name, phone, extra, lines, minutes_ago in samples:
        order = Order(
            restaurant_id=DEFAULT_RESTAURANT_ID,
            status=status.value,
            delivery_method=method.value,
            customer_name=name,
            customer_phone=phone,
            created_at=now - timedelta(minutes=minutes_ago),
            **extra
        )
        for product_name, quantity in lines:
            product = products[product_name]
            order.items.append(OrderItem(product_id=product.id, name=product.name,
                                         unit_price=product.price, quantity=quantity))
        order.recompute_total()
        db.add(order)
    db.commit()
    print("Sample orders seeded.")

def init_db():
    print("Rebuilding database (drop/create)...")
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    print("All tables created:")
    for table in Base.metadata.sorted_tables:
        print(f"   - {table.name}")
    
    db = SessionLocal()
    try:
        create_default_admin(db)
        seed_products(db)
        seed_orders(db)
    finally:
        db.close()
    print("\nDatabase initialization complete!")

if __name__ == "__main__":
    init_db()
