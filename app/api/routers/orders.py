# app/api/routers/orders.py
from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from app.api.deps import get_current_user, require_admin
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import NotFoundError
from app.domain.schemas import OrderOut, OrderDetailOut, OrderStatusUpdate
from app.services.order_service import OrderService

router = APIRouter(prefix="/api/orders", tags=["orders"])


def get_service(db: Session):
    return OrderService(db)


@router.get("", response_model=list[OrderOut])
def list_orders(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Admin widzi wszystkie zamówienia, pozostali tylko swoje.
    """
    return get_service(db).list_orders(user)


@router.post("", response_model=OrderDetailOut, status_code=201)
def create_order(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Tworzy zamówienie z koszyka zalogowanego użytkownika.
    Wysyła powiadomienie asynchronicznie.
    """
    svc = get_service(db)
    try:
        return svc.place_order(user.id)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/{order_id}", response_model=OrderDetailOut)
def get_order(
    order_id: int,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    """
    Pobiera szczegóły zamówienia razem z pozycjami.
    """
    svc = get_service(db)
    try:
        return svc.get_order(order_id, user)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))


@router.api_route(
    "/{order_id}/status",
    methods=["PATCH", "PUT"],
    response_model=OrderOut,
    dependencies=[Depends(require_admin)],
)
def update_order_status(
    order_id: int,
    payload: OrderStatusUpdate,
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.update_status(order_id, payload.status)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
