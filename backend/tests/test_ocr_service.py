import io

import pytest
import pytesseract
from PIL import Image

from conftest import run
from medrecords.exceptions import RecognitionError
from medrecords.services.ocr_service import OcrService


@pytest.fixture
def png_bytes():
    buf = io.BytesIO()
    Image.new("RGB", (40, 20), "white").save(buf, format="PNG")
    return buf.getvalue()


class TestOcrService:
    def test_recognize_reports_progress_and_strips(self, monkeypatch, png_bytes):
        seen = {}

        def fake_image_to_string(image, lang):
            seen["size"] = image.size
            seen["lang"] = lang
            return "  Glucose 98 mg/dL\n\n"

        monkeypatch.setattr(pytesseract, "image_to_string", fake_image_to_string)
        progress = []
        text = run(OcrService().recognize(png_bytes, progress=progress.append))

        assert text == "Glucose 98 mg/dL"
        assert progress == [0, 25, 100]
        assert seen == {"size": (40, 20), "lang": "eng"}

    def test_language_override(self, monkeypatch, tmp_path, png_bytes):
        path = tmp_path / "scan.png"
        path.write_bytes(png_bytes)
        langs = []
        monkeypatch.setattr(
            pytesseract, "image_to_string", lambda image, lang: langs.append(lang) or "",
        )
        service = OcrService(language="deu")
        run(service.recognize(path))
        run(service.recognize(str(path), language="spa"))
        assert langs == ["deu", "spa"]

    def test_engine_failure(self, monkeypatch, png_bytes):
        def broken(image, lang):
            raise pytesseract.TesseractError(1, "Failed loading language")

        monkeypatch.setattr(pytesseract, "image_to_string", broken)
        progress = []
        with pytest.raises(RecognitionError):
            run(OcrService().recognize(png_bytes, progress=progress.append))
        assert 100 not in progress

    def test_unreadable_image(self):
        with pytest.raises(RecognitionError):
            run(OcrService().recognize(b"not an image"))

    def test_tesseract_cmd(self, monkeypatch):
        monkeypatch.setattr(pytesseract.pytesseract, "tesseract_cmd", "tesseract")
        OcrService(tesseract_cmd="/opt/tesseract/bin/tesseract")
        assert pytesseract.pytesseract.tesseract_cmd == "/opt/tesseract/bin/tesseract"

    def test_oversized_image_is_a_recognition_error(self, monkeypatch, png_bytes):
        monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 10)
        with pytest.raises(RecognitionError):
            run(OcrService().recognize(png_bytes))

    def test_engine_timeout(self, monkeypatch, png_bytes):
        def timed_out(image, lang):
            raise RuntimeError("Tesseract process timeout")

        monkeypatch.setattr(pytesseract, "image_to_string", timed_out)
        with pytest.raises(RecognitionError):
            run(OcrService().recognize(png_bytes))
