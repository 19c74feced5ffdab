"""Example completion client adapter.

Use this module as a reference when implementing new provider adapters.
Implement BaseCompletionClient and register the provider in SynthesizerFactory.
"""

import json
from typing import ClassVar

from invoice_ocr.synthesis.client_base import BaseCompletionClient
from invoice_ocr.synthesis.models import InvoiceRecord


class ExampleClientAdapter(BaseCompletionClient):
    """Example adapter that returns an all-empty invoice wrapped in a json fence.

    No network calls. Useful for local development and tests.
    """

    DEFAULT_RESPONSE: ClassVar[dict[str, object]] = InvoiceRecord().to_dict()

    def create_chat_completion(self, *, model: str, user_prompt: str) -> str:
        _ = model, user_prompt
        return f"```json\n{json.dumps(self.DEFAULT_RESPONSE, indent=2)}\n```"
