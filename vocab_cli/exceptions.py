"""Custom exceptions for the vocabulary flashcard application"""

from pathlib import Path
from typing import Any


class VocabError(Exception):
    """Base exception class for all application errors"""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} (Details: {self.details})"
        return self.message


class StorageError(VocabError):
    """Raised when the vocabulary file cannot be written"""

    def __init__(
        self,
        operation: str,
        path: Path | str,
        original_error: Exception | None = None,
    ):
        super().__init__(
            f"Storage operation '{operation}' failed for {path}",
            {
                "operation": operation,
                "path": str(path),
                "original_error": str(original_error) if original_error else None,
            },
        )
        self.operation = operation
        self.path = Path(path)
        self.original_error = original_error


class UnsupportedLocaleError(VocabError):
    """Raised when a locale outside the supported set is requested"""

    def __init__(self, locale: Any, supported: list[str] | None = None):
        supported = supported or []
        super().__init__(
            f"Unsupported locale '{locale}'"
            + (f" (expected one of: {', '.join(supported)})" if supported else ""),
            {"locale": str(locale), "supported": supported},
        )
        self.locale = locale
        self.supported = supported


class MissingInputError(VocabError):
    """Raised when a command is invoked without its required values"""

    def __init__(self, fields: list[str]):
        super().__init__(
            f"Missing required input: {', '.join(fields)}", {"fields": fields}
        )
        self.fields = fields
