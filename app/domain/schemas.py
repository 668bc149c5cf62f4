# app/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List, Literal
from decimal import Decimal
from datetime import datetime

from app.domain.order_status import OrderStatus

# gorna granica INTEGER w bazie
MAX_INT = 2**31 - 1


# =====================================================
# USERS
# =====================================================
class UserCreate(BaseModel):
    """Schema dla rejestracji użytkownika."""

    name: str = Field(..., min_length=1, max_length=100, description="Nazwa użytkownika")
    role: Literal["customer", "admin"] = Field("customer", description="Rola: customer lub admin")


class UserRead(BaseModel):
    """Schema dla użytkownika (response)."""

    id: int
    name: str
    role: str

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# PRODUCTS
# =====================================================
class ProductCreate(BaseModel):
    """Schema dla tworzenia produktu (admin)."""

    name: str = Field(..., min_length=1, max_length=200)
    description: str | None = None
    image: str | None = None
    category: str = Field(..., min_length=1, max_length=50)
    price: Decimal = Field(..., ge=0, max_digits=10, decimal_places=2)
    stock: int = Field(0, ge=0, le=MAX_INT, description="Stan magazynowy (>= 0)")
    rating: Decimal | None = Field(None, ge=0, le=5, max_digits=2, decimal_places=1)


class ProductUpdate(BaseModel):
    """Częściowa aktualizacja produktu - tylko przesłane pola."""

    name: str | None = Field(None, min_length=1, max_length=200)
    description: str | None = None
    image: str | None = None
    category: str | None = Field(None, min_length=1, max_length=50)
    price: Decimal | None = Field(None, ge=0, max_digits=10, decimal_places=2)
    stock: int | None = Field(None, ge=0, le=MAX_INT)
    rating: Decimal | None = Field(None, ge=0, le=5, max_digits=2, decimal_places=1)


class ProductOut(BaseModel):
    id: int
    name: str
    description: str | None = None
    image: str | None = None
    category: str
    price: Decimal
    stock: int
    rating: Decimal | None = None

    model_config = ConfigDict(from_attributes=True)


# =====================================================
# CART
# =====================================================
class CartItemIn(BaseModel):
    """Schema dla dodawania produktu do koszyka."""

    product_id: int = Field(..., gt=0, le=MAX_INT, description="ID produktu (musi być > 0)")
    quantity: int = Field(1, gt=0, le=MAX_INT, description="Ilość produktu (musi być > 0)")


class CartItemUpdate(BaseModel):
    """Nowa ilość; <= 0 usuwa pozycję."""

    quantity: int = Field(..., ge=-MAX_INT, le=MAX_INT)


class CartItemOut(BaseModel):
    """Wiersz koszyka (response)."""

    id: int
    user_id: int
    product_id: int
    quantity: int

    model_config = ConfigDict(from_attributes=True)


class CartLineOut(BaseModel):
    id: int
    product_id: int
    quantity: int
    product: ProductOut
    line_total: Decimal


class CartOut(BaseModel):
    """Schema dla koszyka (response)."""

    user_id: int
    items: List[CartLineOut]
    total: Decimal


# =====================================================
# ORDERS
# =====================================================
class OrderItemOut(BaseModel):
    id: int
    product_id: int
    quantity: int
    price: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    """Schema dla zamówienia (response)."""

    id: int
    user_id: int
    status: OrderStatus
    total: Decimal
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class OrderDetailOut(OrderOut):
    items: List[OrderItemOut]


class OrderStatusUpdate(BaseModel):
    status: OrderStatus
