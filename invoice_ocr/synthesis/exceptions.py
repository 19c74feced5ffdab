from invoice_ocr.processor.exceptions import PipelineError


class SynthesisError(PipelineError):
    """Raised when the completion step fails to produce a record."""


class SynthesisNetworkError(SynthesisError):
    """Raised when the completion provider call fails due to network/infrastructure issues."""


class MalformedRecordError(SynthesisError):
    """Raised when the completion reply cannot be parsed as a JSON object."""
