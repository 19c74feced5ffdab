from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Application configuration loaded from environment variables."""

    model_config = SettingsConfigDict(env_file=".env", extra="ignore")

    app_env: str = "dev"
    log_level: str = "INFO"

    raster_engine: str = "pymupdf"
    raster_scale: float = 2.0

    ocr_language: str = "eng"
    tesseract_cmd: str = ""

    synthesis_provider: str = "openai"
    synthesis_prompt_template_path: Path | None = None
    synthesis_json_schema_path: Path | None = None

    synthesis_openai_api_key: str = ""
    synthesis_openai_model_name: str = "gpt-4o-mini"

    synthesis_openai_compatible_base_url: str = ""
    synthesis_openai_compatible_api_key: str = ""
    synthesis_openai_compatible_model_name: str = ""

    synthesis_openrouter_api_key: str = ""
    synthesis_openrouter_model_name: str = "openai/gpt-4o-mini"
    synthesis_groq_api_key: str = ""
    synthesis_groq_model_name: str = ""
    synthesis_together_api_key: str = ""
    synthesis_together_model_name: str = ""
    synthesis_deepseek_api_key: str = ""
    synthesis_deepseek_model_name: str = "deepseek-chat"
    synthesis_ollama_api_key: str = "ollama"
    synthesis_ollama_model_name: str = ""

    storage_endpoint_url: str = ""

    success_message: str = "Invoice submitted successfully"
