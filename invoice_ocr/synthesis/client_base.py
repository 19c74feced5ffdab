from abc import ABC, abstractmethod


class BaseCompletionClient(ABC):
    """Contract for provider-specific text completion clients."""

    @abstractmethod
    def create_chat_completion(self, *, model: str, user_prompt: str) -> str:
        """Send one user message and return the first choice as plain text."""
