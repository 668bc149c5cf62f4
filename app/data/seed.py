# app/data/seed.py
from decimal import Decimal

from app.data.database import SessionLocal
from app.data.models.product import ProductModel
from app.data.models.user import UserModel
from app.repos.product_repo import ProductRepo
from app.repos.user_repo import UserRepo
from app.utils.logging import get_logger
from app.utils.settings import ADMIN_NAME

logger = get_logger(__name__)

_IMG = "https://images.unsplash.com/photo-{}?ixlib=rb-4.0.3&auto=format&fit=crop&w=400&q=80"

PRODUCTS = [
    {
        "name": "Wireless Earbuds",
        "price": "129.99",
        "category": "electronics",
        "image": _IMG.format("1572569511254-d8f925fe2cbb"),
        "description": "Premium wireless earbuds with noise cancellation and long battery life.",
        "stock": 15,
        "rating": "4.5",
    },
    {
        "name": "Fitness Smartwatch",
        "price": "199.99",
        "category": "electronics",
        "image": _IMG.format("1579586337278-3befd40fd17a"),
        "description": "Track your fitness goals with heart rate monitoring and GPS.",
        "stock": 8,
        "rating": "4.3",
    },
    {
        "name": "Ergonomic Office Chair",
        "price": "249.99",
        "category": "furniture",
        "image": _IMG.format("1505797149328-8bbd4d77bacb"),
        "description": "Comfortable ergonomic chair for home office and long working hours.",
        "stock": 5,
        "rating": "4.7",
    },
    {
        "name": "Minimalist Desk Lamp",
        "price": "59.99",
        "category": "home",
        "image": _IMG.format("1507473885765-e6ed057f782c"),
        "description": "Adjustable desk lamp with eye-caring light and modern design.",
        "stock": 20,
        "rating": "4.2",
    },
    {
        "name": "Premium Coffee Maker",
        "price": "149.99",
        "category": "kitchen",
        "image": _IMG.format("1571091655789-405127f7894f"),
        "description": "Programmable coffee maker that brews the perfect cup every time.",
        "stock": 12,
        "rating": "4.8",
    },
    {
        "name": "Bluetooth Speaker",
        "price": "89.99",
        "category": "electronics",
        "image": _IMG.format("1608043152269-423dbba4e7e1"),
        "description": "Portable Bluetooth speaker with 360 degree sound and waterproof design.",
        "stock": 10,
        "rating": "4.1",
    },
    {
        "name": "Indoor Plant Set",
        "price": "49.99",
        "category": "home",
        "image": _IMG.format("1485955900006-10f4d324d411"),
        "description": "Set of 3 easy-care indoor plants in decorative pots.",
        "stock": 7,
        "rating": "4.4",
    },
    {
        "name": "Digital Drawing Tablet",
        "price": "179.99",
        "category": "electronics",
        "image": _IMG.format("1574875139452-e687c9ab24e1"),
        "description": "Graphics tablet with pressure sensitivity for digital artists.",
        "stock": 4,
        "rating": "4.6",
    },
]


def seed(db=None) -> int:
    """Laduje demo produkty, tylko gdy katalog jest pusty."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        repo = ProductRepo(db)
        # not forcing: only seed if empty
        if repo.count():
            return 0

        for data in PRODUCTS:
            repo.create_product(
                ProductModel(
                    **{
                        **data,
                        "price": Decimal(data["price"]),
                        "rating": Decimal(data["rating"]),
                    }
                )
            )

        logger.info(f"Zaladowano {len(PRODUCTS)} produktow demo")
        return len(PRODUCTS)
    finally:
        if own_session:
            db.close()


def seed_admin(db=None, name: str = ADMIN_NAME) -> UserModel:
    """Zapewnia istnienie pierwszego admina (idempotentne)."""
    own_session = db is None
    db = db or SessionLocal()
    try:
        repo = UserRepo(db)
        existing = repo.get_user_by_name(name)
        if existing:
            return existing

        admin = repo.create_user(UserModel(name=name, role="admin"))
        logger.info(f"Utworzono admina {admin.id} ({admin.name})")
        return admin
    finally:
        if own_session:
            db.close()
