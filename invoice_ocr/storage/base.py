from abc import ABC, abstractmethod

from invoice_ocr.synthesis.models import InvoiceRecord


class BaseRecordSubmitter(ABC):
    """Contract for all record storage adapters."""

    @abstractmethod
    def submit_record(self, record: InvoiceRecord) -> None:
        """Send one record to the remote store.

        Raises:
            SubmissionError: on a non-success response or transport failure.
        """
