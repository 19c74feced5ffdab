from invoice_ocr.processor.exceptions import PipelineError


class ExtractionError(PipelineError):
    """Raised when the OCR engine fails to recognize text."""
