from abc import ABC, abstractmethod

from invoice_ocr.processor.models import RasterImage, SourceDocument


class BasePdfRenderer(ABC):
    """Contract for all PDF page rendering adapters."""

    @abstractmethod
    def render_first_page(self, pdf_bytes: bytes, scale: float) -> RasterImage:
        """Render page 1 of a PDF into a PNG bitmap.

        Args:
            pdf_bytes: Raw PDF file content.
            scale: Multiplier applied to the page's native size (72 dpi).

        Returns:
            RasterImage holding PNG bytes and the rendered pixel size.

        Raises:
            DocumentDecodeError: if the bytes are not a PDF or it has no pages.
        """


class BaseRasterizer(ABC):
    """Contract for turning a SourceDocument into a single bitmap."""

    @abstractmethod
    def rasterize(self, document: SourceDocument) -> RasterImage:
        """Produce exactly one RasterImage for OCR.

        Raises:
            UnsupportedMediaType: if the document is neither PDF nor image.
            DocumentDecodeError: if a PDF cannot be rendered.
        """
