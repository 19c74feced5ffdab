from invoice_ocr.config.settings import Settings
from invoice_ocr.raster.base import BasePdfRenderer, BaseRasterizer
from invoice_ocr.raster.pdfplumber_adapter import PdfPlumberRenderer
from invoice_ocr.raster.pymupdf_adapter import PyMuPdfRenderer
from invoice_ocr.raster.rasterizer import Rasterizer


class RasterizerFactory:
    """Creates a Rasterizer backed by the configured PDF engine."""

    RENDERERS: dict[str, type[BasePdfRenderer]] = {
        "pymupdf": PyMuPdfRenderer,
        "pdfplumber": PdfPlumberRenderer,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRasterizer:
        engine = settings.raster_engine.lower()
        renderer_cls = cls.RENDERERS.get(engine)
        if renderer_cls is None:
            raise ValueError(
                f"Unknown raster engine '{engine}'. Choose from: {list(cls.RENDERERS)}"
            )
        return Rasterizer(renderer_cls(), scale=settings.raster_scale)
