import json
from collections.abc import Callable
from unittest.mock import MagicMock

import httpx
import pytest

from invoice_ocr.ocr.base import BaseTextRecognizer
from invoice_ocr.ocr.extractor import TextExtractor
from invoice_ocr.processor.notifier import Notifier
from invoice_ocr.processor.orchestrator import PipelineOrchestrator
from invoice_ocr.processor.processor import Processor
from invoice_ocr.processor.steps import (
    ExtractTextStep,
    RasterizeStep,
    SubmitRecordStep,
    SynthesizeRecordStep,
)
from invoice_ocr.raster.pymupdf_adapter import PyMuPdfRenderer
from invoice_ocr.raster.rasterizer import Rasterizer
from invoice_ocr.storage.form_post_submitter import FormPostSubmitter
from invoice_ocr.synthesis.client_base import BaseCompletionClient
from invoice_ocr.synthesis.synthesizer import RecordSynthesizer

STORAGE_URL = "https://script.example.com/macros/s/abc/exec"

SCENARIO_A_REPLY = "```json\n" + json.dumps({
    "invoice_number": "123",
    "supplier": "",
    "invoice_date": "",
    "due_date": "",
    "total_amount": 500,
    "currency": "USD",
    "description": "",
    "po": "",
    "IGST": "",
    "CGST": "",
    "SGST": "",
}, indent=2) + "\n```"


class PipelineHarness:
    """Real rasterizer, synthesizer and submitter around fake OCR, LLM and endpoint."""

    def __init__(self, storage_status: int) -> None:
        self.recognizer = MagicMock(spec=BaseTextRecognizer)
        self.recognizer.recognize_text.return_value = "Invoice #123 ... Total 500 USD\n"
        self.completion_client = MagicMock(spec=BaseCompletionClient)
        self.completion_client.create_chat_completion.return_value = SCENARIO_A_REPLY
        self.notifier = MagicMock(spec=Notifier)
        self.storage_requests: list[httpx.Request] = []
        self.synthesizer = RecordSynthesizer(client=self.completion_client, model="gpt-4o-mini")

        def storage(request: httpx.Request) -> httpx.Response:
            self.storage_requests.append(request)
            return httpx.Response(storage_status)

        submitter = FormPostSubmitter(
            STORAGE_URL,
            client=httpx.Client(transport=httpx.MockTransport(storage)),
        )
        processor = Processor(
            [
                RasterizeStep(Rasterizer(PyMuPdfRenderer(), scale=2.0)),
                ExtractTextStep(TextExtractor(self.recognizer)),
                SynthesizeRecordStep(self.synthesizer),
                SubmitRecordStep(submitter),
            ]
        )
        self.orchestrator = PipelineOrchestrator(processor, self.notifier, success_message="Stored")


@pytest.fixture()
def make_harness() -> Callable[..., PipelineHarness]:
    def factory(storage_status: int = 200) -> PipelineHarness:
        return PipelineHarness(storage_status)

    return factory
