from abc import ABC, abstractmethod

from invoice_ocr.logging.logger import Log


class Notifier(ABC):
    """User-visible notification channel. Exactly one call is made per submission."""

    @abstractmethod
    def field_error(self, field: str, message: str) -> None:
        """Report an inline validation error for a form field."""

    @abstractmethod
    def success(self, message: str) -> None:
        """Report a successful run."""

    @abstractmethod
    def failure(self, message: str) -> None:
        """Report a failed run."""


class LogNotifier(Notifier):
    """Notifier that writes through the application log."""

    def field_error(self, field: str, message: str) -> None:
        Log.warning(f"{field}: {message}")

    def success(self, message: str) -> None:
        Log.info(message)

    def failure(self, message: str) -> None:
        Log.error(message)
