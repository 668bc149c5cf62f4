from decimal import Decimal
from typing import Dict, Any
from sqlalchemy.orm import Session
from app.data.models.cart_item import CartItemModel
from app.domain.errors import NotFoundError
from app.repos.cart_repo import CartRepo
from app.repos.product_repo import ProductRepo
from app.utils.logging import get_logger

logger = get_logger(__name__)


def line_total(item: CartItemModel) -> Decimal:
    return Decimal(item.product.price) * item.quantity


def cart_total(items: list[CartItemModel]) -> Decimal:
    return sum((line_total(i) for i in items), Decimal("0.00"))


class CartService:
    """
    Prosta implementacja cqrs i proste use case dla domeny cart
    commands (add, update, remove, clear) modyfikuja stan
    query (get) tylko odczyt

    Koszyk to po prostu wiersze (user, produkt, ilosc), bez rezerwacji
    stanu magazynowego - ilosc jest tylko przycinana do stock.
    """

    def __init__(self, db: Session):
        self.repo = CartRepo(db)
        self.products = ProductRepo(db)

    #query - odczyt
    def get_cart(self, user_id: int) -> Dict[str, Any]:
        items = self.repo.get_cart_items(user_id)

        #dict przyksztalcany w jsona, ceny zawsze aktualne z katalogu
        return {
            "user_id": user_id,
            "items": [
                {
                    "id": i.id,
                    "product_id": i.product_id,
                    "quantity": i.quantity,
                    "product": i.product,
                    "line_total": line_total(i),
                }
                for i in items
            ],
            "total": cart_total(items),
        }

    #commands
    def add_item(self, user_id: int, product_id: int, quantity: int) -> CartItemModel:
        # Walidacje
        if quantity <= 0:
            raise ValueError("Quantity must be greater than 0")

        product = self.products.get_product(product_id)
        if not product:
            raise NotFoundError("Product not found")

        if product.stock <= 0:
            raise ValueError("Product is out of stock")

        existing = self.repo.find_cart_item(user_id, product_id)

        if existing:
            new_quantity = min(existing.quantity + quantity, product.stock)
            logger.info(
                f"Produkt {product_id} juz jest w koszyku usera {user_id}, zwiekszam ilosc "
                f"z {existing.quantity} do {new_quantity}"
            )
            existing.quantity = new_quantity
            return self.repo.save_cart_item(existing)

        logger.info(f"Dodaje nowy produkt {product_id} do koszyka usera {user_id}")
        return self.repo.save_cart_item(
            CartItemModel(
                user_id=user_id,
                product_id=product_id,
                quantity=min(quantity, product.stock),
            )
        )

    def update_quantity(self, user_id: int, item_id: int, quantity: int) -> CartItemModel | None:
        """
        Nadpisuje ilosc. quantity <= 0 usuwa wiersz i zwraca None.
        """
        item = self._owned_item(user_id, item_id)

        if quantity <= 0:
            logger.info(f"Ilosc {quantity} dla pozycji {item_id} - usuwam z koszyka")
            self.repo.delete_cart_item(item)
            return None

        item.quantity = quantity
        logger.info(f"Pozycja {item_id} w koszyku usera {user_id}: ilosc {quantity}")
        return self.repo.save_cart_item(item)

    def remove_item(self, user_id: int, item_id: int) -> bool:
        item = self.repo.get_cart_item(item_id)

        if not item:
            return False

        if item.user_id != user_id:
            raise PermissionError("Access to cart item denied")

        self.repo.delete_cart_item(item)
        logger.info(f"Usunieto pozycje {item_id} z koszyka usera {user_id}")
        return True

    def clear_cart(self, user_id: int) -> int:
        removed = self.repo.clear_cart(user_id)
        logger.info(f"Wyczyszczono koszyk usera {user_id} ({removed} pozycji)")
        return removed

    def _owned_item(self, user_id: int, item_id: int) -> CartItemModel:
        item = self.repo.get_cart_item(item_id)

        if not item:
            raise NotFoundError("Cart item not found")

        if item.user_id != user_id:
            raise PermissionError("Access to cart item denied")

        return item
