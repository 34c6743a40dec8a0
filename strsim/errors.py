from __future__ import annotations

from typing import Optional


class SimilarityError(RuntimeError):
    """Base error for string similarity failures."""


class UnknownAlgorithmError(SimilarityError, LookupError):
    """Raised when a name or alias matches no catalog entry."""

    def __init__(self, identifier: str, suggestion: Optional[str] = None) -> None:
        self.identifier = identifier
        self.suggestion = suggestion
        message = f"Unknown algorithm: {identifier!r}"
        if suggestion:
            message = f"{message} (did you mean {suggestion!r}?)"
        super().__init__(message)


class InvalidCatalogError(SimilarityError):
    """Raised when the algorithm catalog cannot be constructed."""
