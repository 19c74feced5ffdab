from abc import ABC, abstractmethod
from dataclasses import dataclass

from invoice_ocr.processor.models import RasterImage, SourceDocument
from invoice_ocr.synthesis.models import InvoiceRecord


@dataclass(slots=True)
class PipelineContext:
    document: SourceDocument
    raster_image: RasterImage | None = None
    raw_text: str = ""
    record: InvoiceRecord | None = None


class PipelineStep(ABC):
    @abstractmethod
    def run(self, context: PipelineContext) -> PipelineContext:
        raise NotImplementedError
