from abc import ABC, abstractmethod

from invoice_ocr.processor.models import RasterImage


class BaseTextRecognizer(ABC):
    """Contract for all OCR engine adapters."""

    @abstractmethod
    def recognize_text(self, image: RasterImage) -> str:
        """Recognize text in a bitmap.

        Args:
            image: PNG/JPEG/... bitmap from the rasterizer.

        Returns:
            Recognized text, untrimmed. May be empty.

        Raises:
            ExtractionError: if the engine fails for any reason.
        """
