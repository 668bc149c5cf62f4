# app/repos/product_repo.py
from decimal import Decimal
from sqlalchemy import select, delete, or_
from sqlalchemy.orm import Session

from app.data.models.product import ProductModel
from app.data.models.cart_item import CartItemModel

_SORTS = {
    "featured": (ProductModel.id.asc(),),
    "price_asc": (ProductModel.price.asc(), ProductModel.id.asc()),
    "price_desc": (ProductModel.price.desc(), ProductModel.id.asc()),
    "rating": (ProductModel.rating.desc(), ProductModel.id.asc()),
}


class ProductRepo:
    def __init__(self, db: Session):
        self.db = db

    def list_products(
        self,
        category: str | None = None,
        search: str | None = None,
        min_price: Decimal | None = None,
        max_price: Decimal | None = None,
        sort: str = "featured",
    ) -> list[ProductModel]:
        stmt = select(ProductModel)

        if category:
            stmt = stmt.where(ProductModel.category == category)
        if search:
            # % i _ w tekscie uzytkownika to zwykle znaki, nie wildcardy
            stmt = stmt.where(
                or_(
                    ProductModel.name.icontains(search, autoescape=True),
                    ProductModel.description.icontains(search, autoescape=True),
                )
            )
        if min_price is not None:
            stmt = stmt.where(ProductModel.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(ProductModel.price <= max_price)

        stmt = stmt.order_by(*_SORTS[sort])
        return list(self.db.execute(stmt).scalars().all())

    def list_categories(self) -> list[str]:
        stmt = select(ProductModel.category).distinct().order_by(ProductModel.category)
        return list(self.db.execute(stmt).scalars().all())

    def count(self) -> int:
        return self.db.query(ProductModel).count()

    def get_product(self, product_id: int) -> ProductModel | None:
        return self.db.get(ProductModel, product_id)

    def create_product(self, product: ProductModel) -> ProductModel:
        self.db.add(product)
        self.db.commit()
        self.db.refresh(product)
        return product

    def update_product(self, product: ProductModel, changes: dict) -> ProductModel:
        for field, value in changes.items():
            setattr(product, field, value)
        self.db.commit()
        self.db.refresh(product)
        return product

    def delete_product(self, product_id: int) -> bool:
        product = self.get_product(product_id)
        if not product:
            return False
        # sqlite nie wymusza FK, wiec czyscimy koszyki recznie
        self.db.execute(delete(CartItemModel).where(CartItemModel.product_id == product_id))
        self.db.delete(product)
        self.db.commit()
        return True

    def decrement_stock(self, product: ProductModel, quantity: int) -> ProductModel:
        product.stock = max(0, product.stock - quantity)
        self.db.commit()
        return product
