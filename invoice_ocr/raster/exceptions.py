from invoice_ocr.processor.exceptions import PipelineError


class UnsupportedMediaType(PipelineError):
    """Raised when the uploaded file is neither a PDF nor an image."""

    fallback_message = "Only PDF or image files are supported."


class DocumentDecodeError(PipelineError):
    """Raised when PDF bytes cannot be decoded or contain no pages."""

    fallback_message = "File processing error"
