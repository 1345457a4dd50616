"""
Text extraction from uploaded images.

Wraps the Tesseract engine through pytesseract. The engine is blocking, so
both image decoding and recognition run in worker threads; progress is
reported on the event loop as integer percentages between 0 and 100.
"""

import asyncio
import io
import logging
from pathlib import Path
from typing import Callable, Optional, Union

import pytesseract
from PIL import Image

from medrecords.exceptions import RecognitionError

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int], None]
ImageSource = Union[bytes, str, Path]


class OcrService:
    def __init__(self, language: str = "eng", tesseract_cmd: Optional[str] = None):
        self.language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    async def recognize(
        self,
        source: ImageSource,
        language: Optional[str] = None,
        progress: Optional[ProgressCallback] = None,
    ) -> str:
        lang = language or self.language
        report = progress or (lambda _: None)

        report(0)
        try:
            image = await asyncio.to_thread(self._open, source)
            report(25)
            text = await asyncio.to_thread(pytesseract.image_to_string, image, lang=lang)
        except (pytesseract.TesseractError, Image.DecompressionBombError, RuntimeError, OSError) as e:
            logger.error("OCR failed (%s): %s", lang, e)
            raise RecognitionError(f"Text recognition failed: {e}") from e
        report(100)

        text = text.strip()
        logger.info("OCR extracted %d characters", len(text))
        return text

    def _open(self, source: ImageSource) -> Image.Image:
        if isinstance(source, bytes):
            image = Image.open(io.BytesIO(source))
        else:
            image = Image.open(source)
        image.load()
        return image
