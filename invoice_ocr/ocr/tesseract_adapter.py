import io

import pytesseract
from PIL import Image

from invoice_ocr.logging.logger import Log
from invoice_ocr.ocr.base import BaseTextRecognizer
from invoice_ocr.ocr.exceptions import ExtractionError
from invoice_ocr.processor.models import RasterImage


class TesseractRecognizer(BaseTextRecognizer):
    """Recognizes text using the Tesseract binary through pytesseract."""

    def __init__(self, language: str = "eng", tesseract_cmd: str = "") -> None:
        self._language = language
        if tesseract_cmd:
            pytesseract.pytesseract.tesseract_cmd = tesseract_cmd

    def recognize_text(self, image: RasterImage) -> str:
        try:
            with Image.open(io.BytesIO(image.data)) as bitmap:
                Log.debug(
                    f"Tesseract recognizing {bitmap.width}x{bitmap.height}px "
                    f"{image.media_type} (lang={self._language})"
                )
                return pytesseract.image_to_string(bitmap, lang=self._language)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"tesseract recognition failed: {exc}") from exc
