from dataclasses import dataclass

PDF_MEDIA_TYPE = "application/pdf"


@dataclass(frozen=True)
class SourceDocument:
    """An uploaded file as handed to the pipeline."""

    content: bytes
    media_type: str
    filename: str = ""

    @property
    def is_pdf(self) -> bool:
        return self.media_type.lower() == PDF_MEDIA_TYPE

    @property
    def is_image(self) -> bool:
        return self.media_type.lower().startswith("image/")


@dataclass(frozen=True)
class RasterImage:
    """Bitmap handed from the rasterizer to the OCR step.

    Width and height are known only when the bitmap was rendered from a PDF.
    """

    data: bytes
    media_type: str
    width: int | None = None
    height: int | None = None


@dataclass(frozen=True)
class PipelineResult:
    """Terminal outcome of one pipeline run."""

    success: bool
    reason: str = ""

    @classmethod
    def ok(cls) -> "PipelineResult":
        return cls(success=True)

    @classmethod
    def failure(cls, reason: str) -> "PipelineResult":
        return cls(success=False, reason=reason)
