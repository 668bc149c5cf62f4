from sqlalchemy.orm import Session
from app.data.models.user import UserModel
from app.domain.errors import NotFoundError
from app.repos.user_repo import UserRepo
from app.domain.schemas import UserCreate, UserRead
from app.utils.logging import get_logger

logger = get_logger(__name__)


class UserService:
    def __init__(self, db: Session):
        self.repo = UserRepo(db)

    def create_user(self, payload: UserCreate, granted_by: UserModel | None = None) -> UserRead:
        #role admin moze nadac tylko inny admin
        if payload.role == "admin" and (granted_by is None or granted_by.role != "admin"):
            raise PermissionError("Only an admin can grant the admin role")

        if self.repo.get_user_by_name(payload.name):
            raise ValueError("Username already exists")

        user = UserModel(name=payload.name, role=payload.role)
        created = self.repo.create_user(user)
        logger.info(f"Zarejestrowano usera {created.id} ({created.role})")
        return UserRead.model_validate(created)

    def get_user(self, user_id: int) -> UserRead:
        user = self.repo.get_user(user_id)
        if not user:
            raise NotFoundError("User not found")
        return UserRead.model_validate(user)

    def authenticate(self, user_id: int) -> UserModel | None:
        return self.repo.get_user(user_id)
