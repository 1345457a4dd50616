from datetime import datetime
from typing import Optional

from medrecords.schemas.base import ChildCreate, ChildResponse, RecordCreate
from medrecords.schemas.enums import DocumentType


class DocumentBase(RecordCreate):
    document_name: str
    document_type: DocumentType = DocumentType.GENERAL
    file_url: Optional[str] = None
    ocr_text: Optional[str] = None


class DocumentCreate(DocumentBase, ChildCreate):
    pass


class DocumentResponse(DocumentBase, ChildResponse):
    uploaded_at: Optional[datetime] = None
