import argparse
import sys
from pathlib import Path
from typing import Sequence

import httpx
import openai

from invoice_ocr.config.settings import Settings
from invoice_ocr.logging.logger import Log
from invoice_ocr.processor.file_loader import FileLoader
from invoice_ocr.processor.forms import UploadForm
from invoice_ocr.processor.notifier import LogNotifier
from invoice_ocr.processor.orchestrator import FILE_REQUIRED_MESSAGE, build_orchestrator

EXIT_OK = 0
EXIT_FAILED = 1
EXIT_INVALID = 2


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="invoice-ocr",
        description="Extract invoice data from an image or PDF and store it.",
    )
    parser.add_argument("file", nargs="?", help="Invoice image or single-page PDF")
    parser.add_argument(
        "--media-type",
        help="Override the media type guessed from the file extension",
    )
    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point: settings -> logging -> validate upload -> orchestrator -> one submission."""
    args = _build_parser().parse_args(argv)
    settings = Settings()
    Log.configure(settings.log_level)
    notifier = LogNotifier()

    if not args.file:
        notifier.field_error("file", FILE_REQUIRED_MESSAGE)
        return EXIT_INVALID
    try:
        form = UploadForm(file=FileLoader().load(Path(args.file), media_type=args.media_type))
    except FileNotFoundError as exc:
        notifier.field_error("file", str(exc))
        return EXIT_INVALID

    http_client = httpx.Client(follow_redirects=True)
    try:
        try:
            orchestrator = build_orchestrator(settings, notifier=notifier, http_client=http_client)
        except (ValueError, openai.OpenAIError) as exc:
            Log.error(f"Invalid configuration: {exc}")
            return EXIT_FAILED
        result = orchestrator.submit(form)
    finally:
        http_client.close()

    if result is None:
        return EXIT_INVALID
    return EXIT_OK if result.success else EXIT_FAILED


if __name__ == "__main__":
    sys.exit(main())
