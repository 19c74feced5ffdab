from invoice_ocr.logging.logger import Log
from invoice_ocr.ocr.base import BaseTextRecognizer
from invoice_ocr.ocr.exceptions import ExtractionError
from invoice_ocr.processor.models import RasterImage


class TextExtractor:
    """Runs an OCR engine and returns trimmed text.

    Empty output is valid and passed on unchanged.
    """

    def __init__(self, recognizer: BaseTextRecognizer) -> None:
        self._recognizer = recognizer

    def extract(self, image: RasterImage) -> str:
        Log.info(f"OCR started on {len(image.data)} bytes of {image.media_type}")
        try:
            text = self._recognizer.recognize_text(image)
        except ExtractionError:
            raise
        except Exception as exc:
            raise ExtractionError(f"OCR engine error: {exc}") from exc
        raw_text = (text or "").strip()
        Log.info(f"OCR finished: {len(raw_text)} chars recognized")
        return raw_text
