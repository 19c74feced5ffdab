"""Single-flight orchestration of the document pipeline.

States: Idle -> Running -> Idle. The busy flag is the only shared state and
is cleared when a run ends, whatever the outcome.
"""

import enum
import threading

import httpx

from invoice_ocr.config.settings import Settings
from invoice_ocr.logging.logger import Log
from invoice_ocr.processor.exceptions import PipelineBusyError, PipelineError
from invoice_ocr.processor.forms import UploadForm
from invoice_ocr.processor.models import PipelineResult, SourceDocument
from invoice_ocr.processor.notifier import LogNotifier, Notifier
from invoice_ocr.processor.processor import Processor, build_processor

FILE_REQUIRED_MESSAGE = "File is required"


class PipelineState(enum.Enum):
    IDLE = "idle"
    RUNNING = "running"


class PipelineOrchestrator:
    """Accepts one upload at a time and maps its outcome to one notification."""

    def __init__(
        self,
        processor: Processor,
        notifier: Notifier,
        success_message: str = "Invoice submitted successfully",
    ) -> None:
        self._processor = processor
        self._notifier = notifier
        self._success_message = success_message
        self._lock = threading.Lock()
        self._state = PipelineState.IDLE

    @property
    def state(self) -> PipelineState:
        return self._state

    @property
    def is_busy(self) -> bool:
        return self._state is PipelineState.RUNNING

    def submit(self, form: UploadForm) -> PipelineResult | None:
        """Validate the form and run the pipeline on its file.

        Returns None when validation fails (the pipeline never starts).

        Raises:
            PipelineBusyError: if another run is still in progress.
        """
        if form.file is None:
            self._notifier.field_error("file", FILE_REQUIRED_MESSAGE)
            return None

        if not self._lock.acquire(blocking=False):
            raise PipelineBusyError("A document is already being processed")
        self._state = PipelineState.RUNNING
        try:
            result = self._run(form.file)
        finally:
            self._state = PipelineState.IDLE
            self._lock.release()

        if result.success:
            form.reset()
        return result

    def _run(self, document: SourceDocument) -> PipelineResult:
        try:
            self._processor.process(document)
        except PipelineError as exc:
            Log.error(f"Pipeline failed for {document.filename or 'upload'}: {exc}")
            return self._fail(exc.user_message)
        except Exception as exc:
            Log.exception(f"Unexpected pipeline error for {document.filename or 'upload'}: {exc}")
            return self._fail(PipelineError.fallback_message)

        self._notifier.success(self._success_message)
        return PipelineResult.ok()

    def _fail(self, reason: str) -> PipelineResult:
        self._notifier.failure(reason)
        return PipelineResult.failure(reason)


def build_orchestrator(
    settings: Settings,
    notifier: Notifier | None = None,
    http_client: httpx.Client | None = None,
) -> PipelineOrchestrator:
    """Build an orchestrator wired to the configured adapters."""
    return PipelineOrchestrator(
        processor=build_processor(settings, http_client=http_client),
        notifier=notifier if notifier is not None else LogNotifier(),
        success_message=settings.success_message,
    )
