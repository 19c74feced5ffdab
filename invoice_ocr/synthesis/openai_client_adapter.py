import httpx
import openai

from invoice_ocr.synthesis.client_base import BaseCompletionClient
from invoice_ocr.synthesis.exceptions import SynthesisError, SynthesisNetworkError


class OpenAIClientAdapter(BaseCompletionClient):
    """Completion client built on the OpenAI-compatible chat API."""

    def __init__(self, *, api_key: str, base_url: str | None = None) -> None:
        self._client = openai.OpenAI(api_key=api_key, base_url=base_url)

    def create_chat_completion(self, *, model: str, user_prompt: str) -> str:
        try:
            response = self._client.chat.completions.create(
                model=model,
                messages=[{"role": "user", "content": user_prompt}],
            )
        except (openai.APIConnectionError, httpx.ConnectError, httpx.TimeoutException) as exc:
            raise SynthesisNetworkError(f"AI provider network error: {exc}") from exc
        except openai.APIStatusError as exc:
            raise SynthesisError(
                f"AI provider API error: {exc}",
                upstream_message=_error_body_message(exc.body),
            ) from exc
        except openai.APIError as exc:
            raise SynthesisError(f"AI provider API error: {exc}") from exc

        if not response.choices:
            raise SynthesisError("AI returned no choices")
        content = response.choices[0].message.content
        if content is None:
            raise SynthesisError("AI returned empty response")
        return content


def _error_body_message(body: object) -> str | None:
    """Pull ``message`` out of an OpenAI-style error body, if present."""
    if not isinstance(body, dict):
        return None
    error = body.get("error", body)
    if isinstance(error, dict):
        message = error.get("message")
        if isinstance(message, str) and message:
            return message
    return None
