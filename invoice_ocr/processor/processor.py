import httpx

from invoice_ocr.config.settings import Settings
from invoice_ocr.logging.logger import Log
from invoice_ocr.ocr.factory import TextExtractorFactory
from invoice_ocr.processor.models import SourceDocument
from invoice_ocr.processor.pipeline import PipelineContext, PipelineStep
from invoice_ocr.processor.steps import (
    ExtractTextStep,
    RasterizeStep,
    SubmitRecordStep,
    SynthesizeRecordStep,
)
from invoice_ocr.raster.factory import RasterizerFactory
from invoice_ocr.storage.form_post_submitter import FormPostSubmitter
from invoice_ocr.synthesis.factory import SynthesizerFactory


class Processor:
    """Runs the document pipeline steps in strict sequence.

    Pipeline: rasterize -> extract text -> synthesize record -> submit.
    The first failing step aborts the run and its exception propagates.
    """

    def __init__(self, steps: list[PipelineStep]) -> None:
        self._steps = steps

    def process(self, document: SourceDocument) -> PipelineContext:
        Log.info(
            f"Processing {document.filename or 'upload'} "
            f"({document.media_type}, {len(document.content)} bytes)"
        )
        context = PipelineContext(document=document)
        for step in self._steps:
            context = step.run(context)
        return context


def build_processor(settings: Settings, http_client: httpx.Client | None = None) -> Processor:
    """Build a Processor with all required adapters.

    The caller owns ``http_client`` and closes it.
    """
    steps: list[PipelineStep] = [
        RasterizeStep(RasterizerFactory.create(settings)),
        ExtractTextStep(TextExtractorFactory.create(settings)),
        SynthesizeRecordStep(SynthesizerFactory.create(settings)),
        SubmitRecordStep(FormPostSubmitter(settings.storage_endpoint_url, client=http_client)),
    ]
    return Processor(steps)
