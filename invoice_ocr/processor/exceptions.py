class PipelineError(Exception):
    """Base exception for every stage of the invoice pipeline.

    ``upstream_message`` holds a message reported by a remote service
    (completion provider, storage endpoint) when one is available; it is
    preferred over ``fallback_message`` when notifying the user.
    """

    fallback_message = "OCR or API error"

    def __init__(self, message: str, *, upstream_message: str | None = None) -> None:
        super().__init__(message)
        self.upstream_message = upstream_message

    @property
    def user_message(self) -> str:
        return self.upstream_message or self.fallback_message


class PipelineBusyError(Exception):
    """Raised when a submission arrives while another run is in progress."""
