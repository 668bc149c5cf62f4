# app/domain/order_status.py
from enum import Enum


class OrderStatus(str, Enum):
    """
    Cykl zycia zamowienia: PROCESSING -> SHIPPED -> DELIVERED,
    CANCELLED osiagalny z kazdego nieterminalnego stanu.
    """

    PROCESSING = "PROCESSING"
    SHIPPED = "SHIPPED"
    DELIVERED = "DELIVERED"
    CANCELLED = "CANCELLED"

    @property
    def is_terminal(self) -> bool:
        return self in (OrderStatus.DELIVERED, OrderStatus.CANCELLED)
