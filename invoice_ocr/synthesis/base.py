from abc import ABC, abstractmethod

from invoice_ocr.synthesis.models import InvoiceRecord


class BaseRecordSynthesizer(ABC):
    """Contract for all record synthesis adapters."""

    @abstractmethod
    def synthesize_record(self, raw_text: str) -> InvoiceRecord:
        """Turn raw OCR text into an InvoiceRecord.

        Args:
            raw_text: Trimmed OCR output. May be empty.

        Returns:
            InvoiceRecord with every schema field present.

        Raises:
            SynthesisError: if the completion call fails.
            MalformedRecordError: if the reply is not a JSON object.
        """
