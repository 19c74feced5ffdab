"""Tests for prompt template and JSON shape loading."""

import json
from pathlib import Path

import pytest

from invoice_ocr.synthesis.exceptions import SynthesisError
from invoice_ocr.synthesis.models import RECORD_FIELDS
from invoice_ocr.synthesis.prompt_loader import load_json_schema, load_prompt_template


class TestLoadPromptTemplate:
    def test_loads_default_template(self) -> None:
        template = load_prompt_template()
        assert "{json_schema}" in template
        assert "{raw_text}" in template
        assert "only return JSON" in template

    def test_loads_custom_template(self, tmp_path: Path) -> None:
        custom = tmp_path / "custom.txt"
        custom.write_text("Extract {json_schema} from {raw_text}")
        assert load_prompt_template(custom) == "Extract {json_schema} from {raw_text}"

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(SynthesisError, match="Failed to load prompt"):
            load_prompt_template(Path("/nonexistent/file.txt"))


class TestLoadJsonSchema:
    def test_default_schema_lists_fields_in_order(self) -> None:
        schema = json.loads(load_json_schema())
        assert tuple(schema) == RECORD_FIELDS

    def test_missing_file_raises_error(self) -> None:
        with pytest.raises(SynthesisError, match="Failed to load JSON schema"):
            load_json_schema(Path("/nonexistent/schema.json"))
