from typing import ClassVar

from invoice_ocr.config.settings import Settings
from invoice_ocr.synthesis.base import BaseRecordSynthesizer
from invoice_ocr.synthesis.client_base import BaseCompletionClient
from invoice_ocr.synthesis.example_client_adapter import ExampleClientAdapter
from invoice_ocr.synthesis.openai_client_adapter import OpenAIClientAdapter
from invoice_ocr.synthesis.synthesizer import RecordSynthesizer


class SynthesizerFactory:
    """Creates the configured record synthesizer.

    Every OpenAI-style provider reads ``synthesis_<provider>_api_key`` and
    ``synthesis_<provider>_model_name`` from settings. ``None`` as the base
    URL means the SDK default, and ``openai_compatible`` takes its URL from
    settings.
    """

    BASE_URLS: ClassVar[dict[str, str | None]] = {
        "openai": None,
        "openrouter": "https://openrouter.ai/api/v1",
        "groq": "https://api.groq.com/openai/v1",
        "together": "https://api.together.xyz/v1",
        "deepseek": "https://api.deepseek.com/v1",
        "ollama": "http://localhost:11434/v1",
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseRecordSynthesizer:
        """Create a configured synthesizer from application settings."""
        provider = settings.synthesis_provider.lower()
        client: BaseCompletionClient
        if provider == "example":
            client, model = ExampleClientAdapter(), "example"
        else:
            base_url = cls._base_url(provider, settings)
            client = OpenAIClientAdapter(
                api_key=getattr(settings, f"synthesis_{provider}_api_key"),
                base_url=base_url,
            )
            model = getattr(settings, f"synthesis_{provider}_model_name")
        return RecordSynthesizer(
            client=client,
            model=model,
            prompt_template_path=settings.synthesis_prompt_template_path,
            json_schema_path=settings.synthesis_json_schema_path,
        )

    @classmethod
    def _base_url(cls, provider: str, settings: Settings) -> str | None:
        if provider == "openai_compatible":
            url = settings.synthesis_openai_compatible_base_url.strip()
            if not url:
                raise ValueError(
                    "synthesis_openai_compatible_base_url is required for "
                    "synthesis_provider=openai_compatible"
                )
            return url
        if provider not in cls.BASE_URLS:
            choices = ["example", "openai_compatible", *sorted(cls.BASE_URLS)]
            raise ValueError(
                f"Unknown synthesis provider '{provider}'. Choose from: {choices}"
            )
        return cls.BASE_URLS[provider]
