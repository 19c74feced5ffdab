from invoice_ocr.processor.exceptions import PipelineError


class SubmissionError(PipelineError):
    """Raised when the storage endpoint rejects the record or cannot be reached."""
