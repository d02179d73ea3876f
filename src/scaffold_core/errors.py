# src/scaffold_core/errors.py

from typing import Iterable, Optional


class CatalogError(Exception):
    """Base class for template catalog errors."""
    pass


class NotFoundError(CatalogError, KeyError):
    """Raised when an identifier, category or title has no matching template."""

    def __init__(self, message: str, available: Optional[Iterable[str]] = None, **kwargs):
        super().__init__(message)
        self.message = message
        self.available = sorted(available) if available is not None else []
        self.identifier = kwargs.pop("identifier", None)
        for key, value in kwargs.items():
            setattr(self, key, value)

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return self.message


class MalformedTemplateError(CatalogError):
    """Raised while loading when a template or manifest entry is invalid."""

    def __init__(self, message: str, identifier: Optional[str] = None, source: Optional[str] = None):
        super().__init__(message)
        self.identifier = identifier
        self.source = source
