from invoice_ocr.logging.logger import Log
from invoice_ocr.ocr.extractor import TextExtractor
from invoice_ocr.processor.pipeline import PipelineContext, PipelineStep
from invoice_ocr.raster.base import BaseRasterizer
from invoice_ocr.storage.base import BaseRecordSubmitter
from invoice_ocr.synthesis.base import BaseRecordSynthesizer


class RasterizeStep(PipelineStep):
    def __init__(self, rasterizer: BaseRasterizer) -> None:
        self._rasterizer = rasterizer

    def run(self, context: PipelineContext) -> PipelineContext:
        context.raster_image = self._rasterizer.rasterize(context.document)
        return context


class ExtractTextStep(PipelineStep):
    def __init__(self, text_extractor: TextExtractor) -> None:
        self._text_extractor = text_extractor

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.raster_image is None:
            raise ValueError("PipelineContext.raster_image must be set before text extraction")
        context.raw_text = self._text_extractor.extract(context.raster_image)
        context.raster_image = None
        return context


class SynthesizeRecordStep(PipelineStep):
    def __init__(self, synthesizer: BaseRecordSynthesizer) -> None:
        self._synthesizer = synthesizer

    def run(self, context: PipelineContext) -> PipelineContext:
        try:
            context.record = self._synthesizer.synthesize_record(context.raw_text)
        finally:
            context.raw_text = ""
        return context


class SubmitRecordStep(PipelineStep):
    def __init__(self, submitter: BaseRecordSubmitter) -> None:
        self._submitter = submitter

    def run(self, context: PipelineContext) -> PipelineContext:
        if context.record is None:
            raise ValueError("PipelineContext.record must be set before submission")
        self._submitter.submit_record(context.record)
        Log.info(f"Record for {context.document.filename or 'upload'} stored")
        return context
