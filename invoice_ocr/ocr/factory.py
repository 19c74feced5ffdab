from invoice_ocr.config.settings import Settings
from invoice_ocr.ocr.extractor import TextExtractor
from invoice_ocr.ocr.tesseract_adapter import TesseractRecognizer


class TextExtractorFactory:
    """Creates the configured text extractor."""

    @classmethod
    def create(cls, settings: Settings) -> TextExtractor:
        recognizer = TesseractRecognizer(
            language=settings.ocr_language,
            tesseract_cmd=settings.tesseract_cmd,
        )
        return TextExtractor(recognizer)
