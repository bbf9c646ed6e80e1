"""Translation Assistant.

Suggests translations for strings containing math, graphies and widgets by
reusing the translations of strings with the same shape.
"""

from .assistant import TranslationAssistant
from .models import GroupKey, Template, TemplateFailure
from .placeholders import string_to_group_key
from .template import create_template, populate_template

__version__ = "0.1.0"
__all__ = [
    "TranslationAssistant",
    "GroupKey",
    "Template",
    "TemplateFailure",
    "string_to_group_key",
    "create_template",
    "populate_template",
]
