"""Demo data for local development."""

from protean.utils.globals import current_domain

from oms.domain import logger
from oms.product.creation import AddProduct
from oms.user.registration import RegisterUser
from oms.user.user import User

DEMO_USERS = [
    {"name": "Juan Pérez", "email": "juan@example.com"},
    {"name": "María García", "email": "maria@example.com"},
    {"name": "Carlos López", "email": "carlos@example.com"},
]

DEMO_PRODUCTS = [
    {"name": "Laptop Dell XPS 13", "price": 1200.00, "stock": 15},
    {"name": "iPhone 15 Pro", "price": 999.00, "stock": 25},
    {"name": "Sony WH-1000XM5", "price": 399.00, "stock": 30},
    {"name": "Samsung Galaxy Tab S9", "price": 649.00, "stock": 20},
    {"name": "Apple Watch Series 9", "price": 429.00, "stock": 40},
    {"name": "Logitech MX Master 3S", "price": 99.00, "stock": 50},
    {"name": "LG UltraFine 4K Monitor", "price": 699.00, "stock": 10},
    {"name": "Mechanical Keyboard RGB", "price": 159.00, "stock": 35},
]


def seed_demo_data() -> bool:
    """Load demo users and products unless users already exist.

    Must run inside a domain context. Returns True when data was written.
    """
    if current_domain.repository_for(User).find_all():
        logger.info("Database already seeded")
        return False

    for user in DEMO_USERS:
        current_domain.process(RegisterUser(**user), asynchronous=False)
    for product in DEMO_PRODUCTS:
        current_domain.process(AddProduct(**product), asynchronous=False)

    logger.info("Database seeded", users=len(DEMO_USERS), products=len(DEMO_PRODUCTS))
    return True
