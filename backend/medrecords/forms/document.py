"""
Document upload form.

Image files go through OCR before the row is created; the recognized text
lands in the editable ``ocr_text`` field. Recognition failures are logged and
never block the upload. PDFs and word-processor files skip OCR entirely.
"""

import logging
from pathlib import Path
from typing import Callable, Optional, Union

from pydantic import BaseModel

from medrecords.exceptions import RecognitionError, ValidationError
from medrecords.forms.base import ChildRecordForm
from medrecords.schemas import DocumentCreate
from medrecords.schemas.enums import DocumentType
from medrecords.services.document_service import SelectedFile
from medrecords.services.ocr_service import OcrService

logger = logging.getLogger(__name__)


class DocumentUploadForm(ChildRecordForm):
    schema = DocumentCreate
    title = "Upload Document"
    excluded_fields = frozenset({"patient_id", "file_url"})
    document_types = list(DocumentType)

    def __init__(
        self,
        repository,
        patient_id: str,
        ocr: OcrService,
        on_progress: Optional[Callable[[int], None]] = None,
        **kwargs,
    ):
        self.ocr = ocr
        self.on_progress = on_progress
        self.selected_file: Optional[SelectedFile] = None
        self.ocr_progress = 0
        self.ocr_error: Optional[str] = None
        self._ocr_done = False
        super().__init__(repository, patient_id, **kwargs)

    def defaults(self) -> dict[str, str]:
        return {"document_type": DocumentType.GENERAL.value}

    @property
    def preview_url(self) -> Optional[str]:
        return self.selected_file.preview_url if self.selected_file else None

    def select_file(self, path: Union[str, Path], content_type: Optional[str] = None) -> SelectedFile:
        self.selected_file = SelectedFile.from_path(path, content_type)
        self.values["document_name"] = self.selected_file.name
        self.ocr_progress = 0
        self.ocr_error = None
        self._ocr_done = False
        return self.selected_file

    def _report_progress(self, percent: int) -> None:
        self.ocr_progress = percent
        if self.on_progress is not None:
            self.on_progress(percent)

    async def run_ocr(self) -> Optional[str]:
        """Extract text from the selected image into ``ocr_text``. No-op for other files."""
        if self.selected_file is None or not self.selected_file.is_image:
            return None
        try:
            content = await self.selected_file.read()
            text = await self.ocr.recognize(content, progress=self._report_progress)
        except (RecognitionError, OSError) as e:
            logger.error("OCR Error for %s: %s", self.selected_file.name, e)
            self.ocr_error = str(e)
            return None
        finally:
            self._ocr_done = True
        if text:
            self.values["ocr_text"] = text
        return text

    def payload(self) -> dict:
        data = super().payload()
        data["file_url"] = self.preview_url
        return data

    def validate(self) -> BaseModel:
        if self.selected_file is None:
            raise ValidationError({"file": "Select a file to upload"})
        return super().validate()

    async def before_create(self, record: BaseModel) -> BaseModel:
        if self.selected_file.is_image and not self._ocr_done:
            await self.run_ocr()
            record = record.model_copy(update={"ocr_text": self.values.get("ocr_text") or None})
        return record
