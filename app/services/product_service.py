# app/services/product_service.py
from decimal import Decimal
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.domain.errors import NotFoundError
from app.domain.schemas import ProductCreate, ProductUpdate
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)

SORT_OPTIONS = ("featured", "price_asc", "price_desc", "rating")


class ProductService:
    """
    Katalog produktow.
    query (list, get, categories) dla wszystkich, commands tylko dla admina
    (autoryzacja na poziomie routera).
    """

    def __init__(self, db: Session):
        self.repo = ProductRepo(db)

    #query
    def list_products(
        self,
        category: str | None = None,
        search: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        sort: str = "featured",
    ) -> list[ProductModel]:
        if sort not in SORT_OPTIONS:
            raise ValueError(f"Invalid sort option: {sort}")
        if min_price is not None and max_price is not None and min_price > max_price:
            raise ValueError("min_price cannot be greater than max_price")

        #"all" z frontendu oznacza brak filtra
        if category == "all":
            category = None

        return self.repo.list_products(
            category=category,
            search=search or None,
            min_price=min_price,
            max_price=max_price,
            sort=sort,
        )

    def list_categories(self) -> list[str]:
        return self.repo.list_categories()

    def get_product(self, product_id: int) -> ProductModel:
        product = self.repo.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")
        return product

    #commands
    def create_product(self, payload: ProductCreate) -> ProductModel:
        product = self.repo.create_product(ProductModel(**payload.model_dump()))
        logger.info(f"Utworzono produkt {product.id} ({product.name})")
        return product

    def update_product(self, product_id: int, payload: ProductUpdate) -> ProductModel:
        product = self.get_product(product_id)
        changes = payload.model_dump(exclude_unset=True)

        for field in ("name", "category", "price", "stock"):
            if field in changes and changes[field] is None:
                raise ValueError(f"Field '{field}' cannot be null")

        updated = self.repo.update_product(product, changes)
        logger.info(f"Zaktualizowano produkt {product_id}, pola: {sorted(changes)}")
        return updated

    def delete_product(self, product_id: int) -> None:
        if not self.repo.delete_product(product_id):
            raise NotFoundError("Product not found")
        logger.info(f"Usunieto produkt {product_id}")
