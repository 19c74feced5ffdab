from dataclasses import dataclass

from invoice_ocr.processor.models import SourceDocument


@dataclass
class UploadForm:
    """Single-file upload form state kept between submissions."""

    file: SourceDocument | None = None

    def reset(self) -> None:
        self.file = None
