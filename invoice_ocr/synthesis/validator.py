"""Parses the completion reply into an InvoiceRecord."""

import json
from typing import Any

from invoice_ocr.synthesis.exceptions import MalformedRecordError
from invoice_ocr.synthesis.models import RECORD_FIELDS, InvoiceRecord

_JSON_FENCE = "```json"
_FENCE = "```"


def strip_code_fence(reply: str) -> str:
    """Remove a leading ```json fence and one trailing ``` fence.

    Replies that do not start with ```json are only trimmed.
    """
    cleaned = reply.strip()
    if not cleaned.startswith(_JSON_FENCE):
        return cleaned
    cleaned = cleaned[len(_JSON_FENCE):].lstrip()
    if cleaned.endswith(_FENCE):
        cleaned = cleaned[: -len(_FENCE)]
    return cleaned.strip()


def parse_record(reply: str) -> InvoiceRecord:
    """Strip the fence, parse JSON strictly, and build the record.

    Raises:
        MalformedRecordError: if the text is not valid JSON or not an object.
    """
    cleaned = strip_code_fence(reply)
    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except json.JSONDecodeError as exc:
        raise MalformedRecordError(f"Invalid JSON response: {exc}") from exc
    return build_record(parsed)


def _reject_constant(name: str) -> None:
    raise MalformedRecordError(f"Invalid JSON response: {name} is not a JSON value")


def build_record(data: Any) -> InvoiceRecord:
    """Build an InvoiceRecord, defaulting missing fields and dropping unknown keys."""
    if not isinstance(data, dict):
        raise MalformedRecordError(
            f"JSON response must be an object, got {type(data).__name__}"
        )
    values = {name: data[name] for name in RECORD_FIELDS if name in data}
    return InvoiceRecord(**values)
