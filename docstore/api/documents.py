"""Document API endpoints."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from ..database import get_db
from ..schemas.document import DocumentCreate, DocumentResponse, DocumentUpdate
from ..services import DocumentService

router = APIRouter(prefix="/v1/documents", tags=["documents"])


@router.get("", response_model=List[DocumentResponse])
def list_documents(
    user_id: Optional[str] = Query(None, description="Only documents owned by this user"),
    folder_id: Optional[str] = Query(None, description='Only documents in this folder; "null" for unfiled'),
    db: Session = Depends(get_db),
):
    return DocumentService(db).list_entities({"user_id": user_id, "folder_id": folder_id})


@router.get("/{document_id}", response_model=DocumentResponse)
def get_document(document_id: str, db: Session = Depends(get_db)):
    return DocumentService(db).get(document_id)


@router.post("", response_model=DocumentResponse, status_code=201)
def create_document(data: DocumentCreate, db: Session = Depends(get_db)):
    """Create a document. A folder, if given, must belong to the same user."""
    return DocumentService(db).create(data)


@router.put("/{document_id}", response_model=DocumentResponse)
def update_document(document_id: str, data: DocumentUpdate, db: Session = Depends(get_db)):
    return DocumentService(db).update(document_id, data)


@router.delete("/{document_id}", status_code=204)
def delete_document(document_id: str, db: Session = Depends(get_db)):
    DocumentService(db).delete(document_id)
