"""LLM-backed invoice record synthesizer."""

from pathlib import Path

from invoice_ocr.logging.logger import Log
from invoice_ocr.synthesis.base import BaseRecordSynthesizer
from invoice_ocr.synthesis.client_base import BaseCompletionClient
from invoice_ocr.synthesis.exceptions import SynthesisError
from invoice_ocr.synthesis.models import InvoiceRecord
from invoice_ocr.synthesis.prompt_loader import load_json_schema, load_prompt_template
from invoice_ocr.synthesis.validator import parse_record


class RecordSynthesizer(BaseRecordSynthesizer):
    """Prompts a completion provider with OCR text and parses the reply."""

    def __init__(
        self,
        *,
        client: BaseCompletionClient,
        model: str,
        prompt_template_path: Path | None = None,
        json_schema_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._prompt_template = load_prompt_template(prompt_template_path)
        self._json_schema = load_json_schema(json_schema_path)

    def synthesize_record(self, raw_text: str) -> InvoiceRecord:
        prompt = self.build_prompt(raw_text)
        Log.debug(f"Synthesis prompt:\n{prompt}")

        reply = self._call_ai(prompt)
        Log.debug(f"AI raw response:\n{reply}")

        record = parse_record(reply)
        Log.info(f"Synthesized invoice record {record.invoice_number!r}")
        return record

    def build_prompt(self, raw_text: str) -> str:
        return self._prompt_template.format(
            json_schema=self._json_schema,
            raw_text=raw_text,
        )

    def _call_ai(self, prompt: str) -> str:
        try:
            return self._client.create_chat_completion(model=self._model, user_prompt=prompt)
        except SynthesisError:
            raise
        except Exception as exc:
            raise SynthesisError(f"Completion client failed: {exc}") from exc
