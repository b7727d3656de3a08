"""User management (admin only). The default admin account is protected."""

from typing import Annotated

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session

from app.api.v1.auth import require_admin
from app.core.config import get_settings
from app.core.database import get_db
from app.schemas.auth import CurrentUser
from app.schemas.user import UserCreate, UserItem, UserUpdate
from app.services import users as user_service

router = APIRouter()


@router.get("", response_model=list[UserItem])
def list_users(
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> list[UserItem]:
    return [UserItem.model_validate(u) for u in user_service.list_users(db)]


@router.post("", response_model=UserItem, status_code=status.HTTP_201_CREATED)
def create_user(
    body: UserCreate,
    _admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserItem:
    return UserItem.model_validate(user_service.create_user(db, body))


@router.put("/{user_id}", response_model=UserItem)
def update_user(
    user_id: int,
    body: UserUpdate,
    admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> UserItem:
    user = user_service.update_user(
        db, admin, user_id, body, get_settings().DEFAULT_ADMIN_USERNAME
    )
    return UserItem.model_validate(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_user(
    user_id: int,
    admin: Annotated[CurrentUser, Depends(require_admin)],
    db: Annotated[Session, Depends(get_db)],
) -> Response:
    user_service.delete_user(db, admin, user_id, get_settings().DEFAULT_ADMIN_USERNAME)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
