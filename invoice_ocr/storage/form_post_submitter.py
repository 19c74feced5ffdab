import httpx

from invoice_ocr.logging.logger import Log
from invoice_ocr.storage.base import BaseRecordSubmitter
from invoice_ocr.storage.exceptions import SubmissionError
from invoice_ocr.synthesis.models import InvoiceRecord


class FormPostSubmitter(BaseRecordSubmitter):
    """POSTs the record as an urlencoded form, e.g. to a Google Apps Script web app."""

    def __init__(self, endpoint_url: str, *, client: httpx.Client | None = None) -> None:
        if not endpoint_url:
            raise ValueError("storage_endpoint_url is required")
        self._endpoint_url = endpoint_url
        self._client = client if client is not None else httpx.Client(follow_redirects=True)

    def submit_record(self, record: InvoiceRecord) -> None:
        try:
            response = self._client.post(
                self._endpoint_url,
                data=record.to_form_data(),
                headers={"Content-Type": "application/x-www-form-urlencoded"},
            )
        except httpx.HTTPError as exc:
            raise SubmissionError(f"Storage endpoint unreachable: {exc}") from exc

        if response.status_code != httpx.codes.OK:
            raise SubmissionError(
                f"Storage endpoint returned HTTP {response.status_code}",
                upstream_message=_response_message(response),
            )
        Log.info(f"Submitted invoice record {record.invoice_number!r} to storage")

    def close(self) -> None:
        self._client.close()


def _response_message(response: httpx.Response) -> str | None:
    try:
        body = response.json()
    except ValueError:
        return None
    if isinstance(body, dict):
        message = body.get("message")
        if isinstance(message, str) and message:
            return message
    return None
