import io

import pdfplumber

from invoice_ocr.processor.models import RasterImage
from invoice_ocr.raster.base import BasePdfRenderer
from invoice_ocr.raster.exceptions import DocumentDecodeError

_POINTS_PER_INCH = 72


class PdfPlumberRenderer(BasePdfRenderer):
    """Renders the first PDF page to PNG using pdfplumber (pypdfium2 backend)."""

    def render_first_page(self, pdf_bytes: bytes, scale: float) -> RasterImage:
        try:
            with pdfplumber.open(io.BytesIO(pdf_bytes)) as pdf:
                if not pdf.pages:
                    raise DocumentDecodeError("PDF has no pages")
                page_image = pdf.pages[0].to_image(resolution=_POINTS_PER_INCH * scale)
                image = page_image.original
                buf = io.BytesIO()
                image.save(buf, format="PNG")
            return RasterImage(
                data=buf.getvalue(),
                media_type="image/png",
                width=image.width,
                height=image.height,
            )
        except DocumentDecodeError:
            raise
        except Exception as exc:
            raise DocumentDecodeError(f"pdfplumber rendering failed: {exc}") from exc
