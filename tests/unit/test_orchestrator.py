from unittest.mock import MagicMock

import pytest

from invoice_ocr.processor.exceptions import PipelineBusyError
from invoice_ocr.processor.forms import UploadForm
from invoice_ocr.processor.models import PipelineResult, SourceDocument
from invoice_ocr.processor.notifier import Notifier
from invoice_ocr.processor.orchestrator import PipelineOrchestrator, PipelineState
from invoice_ocr.processor.processor import Processor
from invoice_ocr.raster.exceptions import DocumentDecodeError, UnsupportedMediaType
from invoice_ocr.storage.exceptions import SubmissionError
from invoice_ocr.synthesis.exceptions import SynthesisError

_DOCUMENT = SourceDocument(content=b"%PDF-fake", media_type="application/pdf")


def _make_orchestrator() -> tuple[PipelineOrchestrator, MagicMock, MagicMock]:
    processor = MagicMock(spec=Processor)
    notifier = MagicMock(spec=Notifier)
    orchestrator = PipelineOrchestrator(processor, notifier, success_message="Stored")
    return orchestrator, processor, notifier


class TestValidation:
    def test_missing_file_is_a_field_error(self) -> None:
        orchestrator, processor, notifier = _make_orchestrator()

        result = orchestrator.submit(UploadForm())

        assert result is None
        notifier.field_error.assert_called_once_with("file", "File is required")
        notifier.success.assert_not_called()
        notifier.failure.assert_not_called()
        processor.process.assert_not_called()
        assert orchestrator.state is PipelineState.IDLE


class TestSuccess:
    def test_notifies_success_and_resets_form(self) -> None:
        orchestrator, processor, notifier = _make_orchestrator()
        form = UploadForm(file=_DOCUMENT)

        result = orchestrator.submit(form)

        assert result == PipelineResult.ok()
        processor.process.assert_called_once_with(_DOCUMENT)
        notifier.success.assert_called_once_with("Stored")
        notifier.failure.assert_not_called()
        assert form.file is None

    def test_busy_only_while_running(self) -> None:
        orchestrator, processor, _notifier = _make_orchestrator()
        observed: list[bool] = []
        processor.process.side_effect = lambda *_: observed.append(orchestrator.is_busy)

        assert not orchestrator.is_busy
        orchestrator.submit(UploadForm(file=_DOCUMENT))

        assert observed == [True]
        assert not orchestrator.is_busy


class TestFailure:
    @pytest.mark.parametrize(
        ("error", "reason"),
        [
            (UnsupportedMediaType("text/plain"), "Only PDF or image files are supported."),
            (DocumentDecodeError("PDF has no pages"), "File processing error"),
            (SynthesisError("boom"), "OCR or API error"),
            (SubmissionError("HTTP 500"), "OCR or API error"),
        ],
    )
    def test_maps_stage_errors_to_fallback_reason(self, error: Exception, reason: str) -> None:
        orchestrator, processor, notifier = _make_orchestrator()
        processor.process.side_effect = error
        form = UploadForm(file=_DOCUMENT)

        result = orchestrator.submit(form)

        assert result == PipelineResult.failure(reason)
        notifier.failure.assert_called_once_with(reason)
        notifier.success.assert_not_called()
        assert form.file is _DOCUMENT
        assert not orchestrator.is_busy

    def test_prefers_upstream_message(self) -> None:
        orchestrator, processor, notifier = _make_orchestrator()
        processor.process.side_effect = SynthesisError(
            "AI provider API error", upstream_message="Rate limit reached"
        )

        result = orchestrator.submit(UploadForm(file=_DOCUMENT))

        assert result is not None
        assert result.reason == "Rate limit reached"
        notifier.failure.assert_called_once_with("Rate limit reached")

    def test_unexpected_errors_do_not_escape(self) -> None:
        orchestrator, processor, notifier = _make_orchestrator()
        processor.process.side_effect = RuntimeError("bug")

        result = orchestrator.submit(UploadForm(file=_DOCUMENT))

        assert result == PipelineResult.failure("OCR or API error")
        notifier.failure.assert_called_once()
        assert not orchestrator.is_busy

    def test_can_retry_after_failure(self) -> None:
        orchestrator, processor, notifier = _make_orchestrator()
        processor.process.side_effect = [SubmissionError("HTTP 500"), None]
        form = UploadForm(file=_DOCUMENT)

        first = orchestrator.submit(form)
        second = orchestrator.submit(form)

        assert first is not None and not first.success
        assert second is not None and second.success
        assert processor.process.call_count == 2


class TestSingleFlight:
    def test_second_submission_while_running_is_rejected(self) -> None:
        orchestrator, processor, notifier = _make_orchestrator()
        rejected: list[Exception] = []

        def reentrant_submit(*_: object) -> None:
            try:
                orchestrator.submit(UploadForm(file=_DOCUMENT))
            except PipelineBusyError as exc:
                rejected.append(exc)

        processor.process.side_effect = reentrant_submit

        result = orchestrator.submit(UploadForm(file=_DOCUMENT))

        assert len(rejected) == 1
        assert processor.process.call_count == 1
        assert result == PipelineResult.ok()
        notifier.success.assert_called_once()
        assert not orchestrator.is_busy
