import pymupdf

from invoice_ocr.processor.models import RasterImage
from invoice_ocr.raster.base import BasePdfRenderer
from invoice_ocr.raster.exceptions import DocumentDecodeError


class PyMuPdfRenderer(BasePdfRenderer):
    """Renders the first PDF page to PNG using PyMuPDF."""

    def render_first_page(self, pdf_bytes: bytes, scale: float) -> RasterImage:
        try:
            with pymupdf.open(stream=pdf_bytes, filetype="pdf") as doc:  # type: ignore[no-untyped-call]
                if doc.page_count < 1:
                    raise DocumentDecodeError("PDF has no pages")
                pixmap = doc[0].get_pixmap(matrix=pymupdf.Matrix(scale, scale))
                return RasterImage(
                    data=pixmap.tobytes("png"),
                    media_type="image/png",
                    width=pixmap.width,
                    height=pixmap.height,
                )
        except DocumentDecodeError:
            raise
        except Exception as exc:
            raise DocumentDecodeError(f"pymupdf rendering failed: {exc}") from exc
