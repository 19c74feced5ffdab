from invoice_ocr.synthesis.base import BaseRecordSynthesizer
from invoice_ocr.synthesis.factory import SynthesizerFactory
from invoice_ocr.synthesis.models import InvoiceRecord
from invoice_ocr.synthesis.synthesizer import RecordSynthesizer

__all__ = ["BaseRecordSynthesizer", "InvoiceRecord", "RecordSynthesizer", "SynthesizerFactory"]
