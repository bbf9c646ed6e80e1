"""Exceptions raised by the translation assistant."""

from typing import Optional

from .models import SubstringKind


class TranslationAssistantError(Exception):
    """Base exception for the translation assistant."""
    pass


class MismatchError(TranslationAssistantError):
    """Special substrings of a translation can't be matched to the English source."""

    kind: SubstringKind
    default_message = "special substrings don't match"

    def __init__(self, message: Optional[str] = None):
        super().__init__(message or self.default_message)


class MathMismatchError(MismatchError):
    """A formula in the translation has no equal formula in the English string."""
    kind = SubstringKind.MATH
    default_message = "math doesn't match"


class GraphieMismatchError(MismatchError):
    """A graphie in the translation has no equal graphie in the English string."""
    kind = SubstringKind.GRAPHIE
    default_message = "graphies don't match"


class WidgetMismatchError(MismatchError):
    """A widget in the translation has no equal widget in the English string."""
    kind = SubstringKind.WIDGET
    default_message = "widgets don't match"


class ConfigError(TranslationAssistantError):
    """Errors related to loading assistant configuration."""
    def __init__(self, message: str, original_exception: Optional[Exception] = None):
        super().__init__(message)
        self.original_exception = original_exception
