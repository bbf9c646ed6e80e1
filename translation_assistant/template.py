"""Creation and population of translation templates."""

from types import MappingProxyType
from typing import Dict, Iterator

from loguru import logger

from .errors import MismatchError
from .math_dictionary import apply_math_dictionary, get_math_dictionary
from .math_rewriter import translate_math
from .models import SubstringKind, Template, TemplateFailure, TemplateResult
from .placeholders import (
    LINE_BREAK,
    PLACEHOLDER_PATTERN,
    PLACEHOLDERS,
    find_occurrences,
    replace_with_placeholders,
)
from .position_mapper import get_mapping


def create_template(english_str: str, translated_str: str, lang: str) -> TemplateResult:
    """Create a template from an English string and its translation.

    The translation is split into paragraphs with math, graphies and widgets
    replaced by placeholders.  The mappings record which English substring
    goes into which placeholder.

    Args:
        english_str: English string
        translated_str: Translation of english_str
        lang: Language of translated_str

    Returns:
        Template passed to populate_template, or a TemplateFailure when the
        special substrings of the two strings don't match
    """
    math_dictionary = get_math_dictionary(english_str, translated_str)

    try:
        math_mapping = get_mapping(
            english_str, translated_str, lang, SubstringKind.MATH, math_dictionary)
        graphie_mapping = get_mapping(
            english_str, translated_str, lang, SubstringKind.GRAPHIE)
        widget_mapping = get_mapping(
            english_str, translated_str, lang, SubstringKind.WIDGET)
    except MismatchError as e:
        logger.debug("Cannot create template ({}): {}", e.kind.value, e)
        return TemplateFailure(kind=e.kind, message=str(e))

    return Template(
        lines=tuple(
            replace_with_placeholders(line) for line in translated_str.split(LINE_BREAK)
        ),
        math_mapping=tuple(math_mapping),
        graphie_mapping=tuple(graphie_mapping),
        widget_mapping=tuple(widget_mapping),
        math_dictionary=MappingProxyType(math_dictionary),
    )


def populate_template(template: Template, english_str: str, lang: str) -> str:
    """Return a translation suggestion for `english_str` based on `template`.

    Args:
        template: Template returned by create_template
        english_str: English string to translate, in the template's group
        lang: Language the template was created with

    Returns:
        Suggested translation
    """
    maths = [
        translate_math(apply_math_dictionary(math, template.math_dictionary), lang)
        for math in find_occurrences(english_str, SubstringKind.MATH)
    ]
    substrings = {
        SubstringKind.MATH: maths,
        SubstringKind.GRAPHIE: find_occurrences(english_str, SubstringKind.GRAPHIE),
        SubstringKind.WIDGET: find_occurrences(english_str, SubstringKind.WIDGET),
    }

    # Cursors run across the whole string, they are not reset per line.
    cursors: Dict[SubstringKind, Iterator[int]] = {
        SubstringKind.MATH: iter(template.math_mapping),
        SubstringKind.GRAPHIE: iter(template.graphie_mapping),
        SubstringKind.WIDGET: iter(template.widget_mapping),
    }

    def fill(match):
        kind = PLACEHOLDERS[match.group(0)]
        index = next(cursors[kind], None)
        # More tokens than mapped substrings, e.g. a literal __MATH__ in the translation
        if index is None:
            return match.group(0)
        return substrings[kind][index]

    return LINE_BREAK.join(PLACEHOLDER_PATTERN.sub(fill, line) for line in template.lines)
