from invoice_ocr.logging.logger import Log
from invoice_ocr.processor.models import RasterImage, SourceDocument
from invoice_ocr.raster.base import BasePdfRenderer, BaseRasterizer
from invoice_ocr.raster.exceptions import UnsupportedMediaType


class Rasterizer(BaseRasterizer):
    """Dispatches on media type: PDFs are rendered, images pass through."""

    def __init__(self, renderer: BasePdfRenderer, scale: float = 2.0) -> None:
        self._renderer = renderer
        self._scale = scale

    def rasterize(self, document: SourceDocument) -> RasterImage:
        if document.is_pdf:
            image = self._renderer.render_first_page(document.content, self._scale)
            Log.info(
                f"Rendered page 1 of {document.filename or 'PDF'} "
                f"at {self._scale}x: {image.width}x{image.height}px"
            )
            return image
        if document.is_image:
            return RasterImage(data=document.content, media_type=document.media_type)
        raise UnsupportedMediaType(f"Unsupported media type '{document.media_type}'")
