import mimetypes
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Union

import aiofiles

from medrecords.exceptions import ValidationError

WORD_TYPES = {
    "application/msword",
    "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
}
ACCEPTED_TYPES = {"application/pdf"} | WORD_TYPES

_EXTENSION_TYPES = {
    "pdf": "application/pdf",
    "doc": "application/msword",
    "docx": "application/vnd.openxmlformats-officedocument.wordprocessingml.document",
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "bmp": "image/bmp",
    "tif": "image/tiff",
    "tiff": "image/tiff",
    "webp": "image/webp",
}


def guess_type(filename: str) -> str:
    ext = filename.rsplit(".", 1)[-1].lower() if "." in filename else ""
    if ext in _EXTENSION_TYPES:
        return _EXTENSION_TYPES[ext]
    guessed, _ = mimetypes.guess_type(filename)
    return guessed or "application/octet-stream"


def is_accepted(content_type: str) -> bool:
    return content_type.startswith("image/") or content_type in ACCEPTED_TYPES


@dataclass(frozen=True)
class SelectedFile:
    path: Path
    content_type: str

    @classmethod
    def from_path(cls, path: Union[str, Path], content_type: Optional[str] = None) -> "SelectedFile":
        path = Path(path)
        content_type = content_type or guess_type(path.name)
        if not is_accepted(content_type):
            raise ValidationError({"file": f"Unsupported file type: {content_type}"})
        return cls(path=path, content_type=content_type)

    @property
    def name(self) -> str:
        return self.path.name

    @property
    def is_image(self) -> bool:
        return self.content_type.startswith("image/")

    @property
    def preview_url(self) -> Optional[str]:
        """Local URI for image previews; other files get none."""
        if not self.is_image:
            return None
        return self.path.resolve().as_uri()

    async def read(self) -> bytes:
        async with aiofiles.open(self.path, "rb") as f:
            return await f.read()
