"""User API endpoints.

Endpoints are thin: UserService parses ids and raises typed errors, which
the application-level exception handler renders.
"""

from typing import List

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.user import UserCreate, UserResponse, UserUpdate
from ..services import UserService

router = APIRouter(prefix="/v1/users", tags=["users"])


@router.get("", response_model=List[UserResponse])
def list_users(db: Session = Depends(get_db)):
    """List every user, soft-deleted ones included."""
    return UserService(db).list_entities()


@router.get("/{user_id}", response_model=UserResponse)
def get_user(user_id: str, db: Session = Depends(get_db)):
    return UserService(db).get(user_id)


@router.post("", response_model=UserResponse, status_code=201)
def create_user(data: UserCreate, db: Session = Depends(get_db)):
    """Create a user. Duplicate username or email yields 409."""
    return UserService(db).create(data)


@router.put("/{user_id}", response_model=UserResponse)
def update_user(user_id: str, data: UserUpdate, db: Session = Depends(get_db)):
    return UserService(db).update(user_id, data)


@router.delete("/{user_id}", status_code=204)
def delete_user(user_id: str, db: Session = Depends(get_db)):
    """Soft-delete a user. Owned folders and documents are left in place."""
    UserService(db).delete(user_id)
