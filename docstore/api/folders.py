"""Folder API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.folder import FolderCreate, FolderResponse, FolderUpdate
from ..services import FolderService

router = APIRouter(prefix="/v1/folders", tags=["folders"])


@router.get("", response_model=List[FolderResponse])
def list_folders(
    user_id: Optional[str] = Query(None, description="Only folders owned by this user"),
    parent_id: Optional[str] = Query(None, description='Only children of this folder; "null" for root folders'),
    db: Session = Depends(get_db),
):
    return FolderService(db).list_entities({"user_id": user_id, "parent_id": parent_id})


@router.get("/{folder_id}", response_model=FolderResponse)
def get_folder(folder_id: str, db: Session = Depends(get_db)):
    return FolderService(db).get(folder_id)


@router.post("", response_model=FolderResponse, status_code=201)
def create_folder(data: FolderCreate, db: Session = Depends(get_db)):
    """Create a folder. The owner and the parent (if any) must exist."""
    return FolderService(db).create(data)


@router.put("/{folder_id}", response_model=FolderResponse)
def update_folder(folder_id: str, data: FolderUpdate, db: Session = Depends(get_db)):
    """Rename or re-parent a folder. The owner never changes."""
    return FolderService(db).update(folder_id, data)


@router.delete("/{folder_id}", status_code=204)
def delete_folder(folder_id: str, db: Session = Depends(get_db)):
    """Delete an empty folder. Fails while subfolders or documents remain."""
    FolderService(db).delete(folder_id)
