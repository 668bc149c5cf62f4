# app/api/deps.py
from fastapi import Depends, Header, HTTPException
from sqlalchemy.orm import Session

from app.data.database import get_db
from app.data.models.user import UserModel
from app.domain.schemas import MAX_INT
from app.services.user_service import UserService


def get_current_user(
    x_user_id: int | None = Header(None, ge=1, le=MAX_INT),
    db: Session = Depends(get_db),
) -> UserModel:
    """
    Tożsamość wywołującego z nagłówka X-User-Id.
    Sesje/hasła są poza zakresem serwisu - tylko lookup usera.
    """
    if x_user_id is None:
        raise HTTPException(status_code=401, detail="You must be logged in")

    user = UserService(db).authenticate(x_user_id)
    if not user:
        raise HTTPException(status_code=401, detail="You must be logged in")

    return user


def require_admin(user: UserModel = Depends(get_current_user)) -> UserModel:
    if user.role != "admin":
        raise HTTPException(status_code=403, detail="Unauthorized")
    return user


def get_optional_user(
    x_user_id: int | None = Header(None, ge=1, le=MAX_INT),
    db: Session = Depends(get_db),
) -> UserModel | None:
    """Jak get_current_user, ale brak nagłówka oznacza anonima."""
    if x_user_id is None:
        return None
    return get_current_user(x_user_id=x_user_id, db=db)
