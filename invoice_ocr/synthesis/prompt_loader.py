from pathlib import Path

from invoice_ocr.synthesis.exceptions import SynthesisError

PROMPT_VERSION = "v1"

_DEFAULT_PROMPT_DIR = Path(__file__).parent / "prompts"


def load_prompt_template(path: Path | None = None) -> str:
    """Load the invoice prompt template from a file.

    Args:
        path: Path to the prompt template file.
              Defaults to the bundled invoice_prompt_<version>.txt.

    Returns:
        The raw template string with ``{json_schema}`` and ``{raw_text}``
        placeholders.

    Raises:
        SynthesisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"invoice_prompt_{PROMPT_VERSION}.txt"
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise SynthesisError(f"Failed to load prompt template: {exc}") from exc


def load_json_schema(path: Path | None = None) -> str:
    """Load the target JSON shape shown to the model.

    Raises:
        SynthesisError: if the file cannot be read.
    """
    if path is None:
        path = _DEFAULT_PROMPT_DIR / f"invoice_schema_{PROMPT_VERSION}.json"
    try:
        return path.read_text(encoding="utf-8").strip()
    except OSError as exc:
        raise SynthesisError(f"Failed to load JSON schema: {exc}") from exc
