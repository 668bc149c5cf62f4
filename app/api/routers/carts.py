#app/api/routers/carts.py
from fastapi import APIRouter, Depends, HTTPException, Response
from sqlalchemy.orm import Session

from app.api.deps import get_current_user
from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.errors import NotFoundError
from app.domain.schemas import (
    CartItemIn,
    CartItemUpdate,
    CartItemOut,
    CartOut,
)
from app.services.cart_service import CartService

router = APIRouter(prefix="/api/cart", tags=["cart"])


def get_service(db: Session):
    return CartService(db)


@router.get("", response_model=CartOut)
def get_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    return get_service(db).get_cart(user.id)


@router.post("", response_model=CartItemOut, status_code=201)
def add_item(
    payload: CartItemIn,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        return svc.add_item(
            user_id=user.id,
            product_id=payload.product_id,
            quantity=payload.quantity,
        )
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.put("/{item_id}", response_model=CartItemOut)
def update_item(
    item_id: int,
    payload: CartItemUpdate,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        item = svc.update_quantity(user.id, item_id, payload.quantity)
    except NotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))

    #ilosc <= 0 usunela wiersz
    if item is None:
        return Response(status_code=204)
    return item


@router.delete("/{item_id}", status_code=204)
def remove_item(
    item_id: int,
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    svc = get_service(db)
    try:
        removed = svc.remove_item(user.id, item_id)
    except PermissionError as e:
        raise HTTPException(status_code=403, detail=str(e))

    if not removed:
        raise HTTPException(status_code=404, detail="Cart item not found")
    return Response(status_code=204)


@router.delete("", status_code=204)
def clear_cart(
    user: UserModel = Depends(get_current_user),
    db: Session = Depends(get_db),
):
    get_service(db).clear_cart(user.id)
    return Response(status_code=204)
