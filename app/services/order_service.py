# app/services/order_service.py
from sqlalchemy.orm import Session

from app.data.models.order import OrderModel
from app.data.models.order_item import OrderItemModel
from app.data.models.user import UserModel
from app.domain.errors import NotFoundError
from app.domain.order_status import OrderStatus
from app.repos.cart_repo import CartRepo
from app.repos.order_repo import OrderRepo
from app.repos.product_repo import ProductRepo
from app.services.cart_service import cart_total
from app.services.notification_service import NotificationService
from app.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """
    Serwis odpowiedzialny za domenę zamówień.
    Separacja od CartService, korzysta tylko z repo koszyka i katalogu.
    """

    def __init__(self, db: Session, notification_service: NotificationService | None = None):
        self.repo = OrderRepo(db)
        self.carts = CartRepo(db)
        self.products = ProductRepo(db)
        self.notification_service = notification_service or NotificationService()

    def place_order(self, user_id: int) -> OrderModel:
        """
        Use Case: Tworzenie zamówienia z koszyka.

        1. Pobiera koszyk (pusty -> błąd walidacji)
        2. Oblicza total z aktualnych cen produktów
        3. Tworzy zamówienie + pozycje z zamrożoną ceną
        4. Zmniejsza stany magazynowe (nie poniżej 0)
        5. Czyści koszyk
        6. Wysyła powiadomienie (async)

        Kroki nie są atomowe - błąd w połowie nie cofa wcześniejszych.
        """
        items = self.carts.get_cart_items(user_id)

        if not items:
            raise ValueError("Cart is empty")

        total = cart_total(items)

        order = self.repo.create_order(
            OrderModel(
                user_id=user_id,
                status=OrderStatus.PROCESSING.value,
                total=total,
                items=[
                    OrderItemModel(
                        product_id=item.product_id,
                        quantity=item.quantity,
                        price=item.product.price,
                    )
                    for item in items
                ],
            )
        )

        for item in items:
            before = item.product.stock
            self.products.decrement_stock(item.product, item.quantity)
            logger.info(
                f"Stan produktu {item.product_id}: {before} -> {item.product.stock}"
            )

        self.carts.clear_cart(user_id)

        logger.info(f"Order {order.id} created for user {user_id}, total {total}")

        self.notification_service.send_order_notification(user_id, order.id)

        return order

    def list_orders(self, user: UserModel) -> list[OrderModel]:
        if user.role == "admin":
            return self.repo.list_orders()
        return self.repo.list_orders(user_id=user.id)

    def get_order(self, order_id: int, user: UserModel) -> OrderModel:
        """
        Use Case: Pobranie zamówienia z pozycjami (Query).
        """
        order = self.repo.get_order(order_id)

        if not order:
            raise NotFoundError("Order not found")

        if user.role != "admin" and order.user_id != user.id:
            raise PermissionError("Access to order denied")

        return order

    def update_status(self, order_id: int, status: OrderStatus) -> OrderModel:
        """
        Use Case: Zmiana statusu przez admina.
        Przejścia nie są walidowane - dowolny status z enuma jest dozwolony.
        """
        order = self.repo.get_order(order_id)

        if not order:
            raise NotFoundError("Order not found")

        previous = OrderStatus(order.status)
        if previous.is_terminal and previous != status:
            logger.warning(
                f"Order {order_id} opuszcza stan terminalny {previous.value} -> {status.value}"
            )

        updated = self.repo.update_order_status(order_id, status.value)

        logger.info(f"Order {order_id} status {previous.value} -> {status.value}")

        self.notification_service.send_status_notification(
            updated.user_id, order_id, status.value
        )

        return updated
