import mimetypes
from pathlib import Path

from invoice_ocr.processor.models import SourceDocument

_FALLBACK_MEDIA_TYPE = "application/octet-stream"


def guess_media_type(path: Path) -> str:
    """Media type from the file extension, e.g. ``invoice.pdf`` -> ``application/pdf``."""
    media_type, _encoding = mimetypes.guess_type(path.name)
    return media_type or _FALLBACK_MEDIA_TYPE


class FileLoader:
    """Reads an uploaded file from disk into a SourceDocument."""

    def load(self, path: Path, media_type: str | None = None) -> SourceDocument:
        """Read file bytes and attach a media type.

        Raises:
            FileNotFoundError: if the file does not exist.
        """
        if not path.is_file():
            raise FileNotFoundError(f"File not found: {path}")
        return SourceDocument(
            content=path.read_bytes(),
            media_type=media_type or guess_media_type(path),
            filename=path.name,
        )
