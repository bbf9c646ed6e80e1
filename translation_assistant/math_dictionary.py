"""Dictionary of natural language text found inside math."""

from typing import Dict, List, Mapping

from .models import SubstringKind
from .placeholders import (
    TEXT_PATTERN,
    TEXT_PLACEHOLDER,
    extract_texts,
    find_occurrences,
    replace_texts,
)


def _group_by_normalized(maths: List[str]) -> Dict[str, List[str]]:
    groups: Dict[str, List[str]] = {}
    for math in maths:
        groups.setdefault(replace_texts(math), []).append(math)
    return groups


def _distinct_texts(maths: List[str]) -> List[str]:
    # dict keeps insertion order, which the pairing below relies on
    texts: Dict[str, None] = {}
    for math in maths:
        for text in extract_texts(math):
            texts[text] = None
    return list(texts)


def get_math_dictionary(english_str: str, translated_str: str) -> Dict[str, str]:
    """Map English \\text{} contents to their translated counterparts.

    Formulas are matched by their shape with all \\text{} blocks blanked out.
    Within matching formulas the order of \\text{} blocks is assumed to be
    unchanged by the translation.

    Example:
        get_math_dictionary(
            "$\\text{red}$, $\\text{blue} + \\text{yellow}$",
            "$\\text{roja}$, $\\text{azul} + \\text{amarillo}$",
        )
        # {"red": "roja", "blue": "azul", "yellow": "amarillo"}

    Args:
        english_str: English source string
        translated_str: Translation of english_str

    Returns:
        Insertion-ordered dictionary from English to translated text
    """
    english_groups = _group_by_normalized(find_occurrences(english_str, SubstringKind.MATH))
    translated_groups = _group_by_normalized(find_occurrences(translated_str, SubstringKind.MATH))

    dictionary: Dict[str, str] = {}
    for key, english_maths in english_groups.items():
        if TEXT_PLACEHOLDER not in key:
            continue

        # The math differs between the two strings; get_mapping reports it.
        if key not in translated_groups:
            continue

        english_texts = _distinct_texts(english_maths)
        translated_texts = _distinct_texts(translated_groups[key])

        for english_text, translated_text in zip(english_texts, translated_texts):
            dictionary[english_text] = translated_text

    return dictionary


def apply_math_dictionary(math: str, dictionary: Mapping[str, str]) -> str:
    """Replace the English \\text{} blocks of a formula with their translations.

    All blocks are replaced in one pass, so a translation is never looked up
    again as English text.
    """
    def replace(match):
        text = match.group(1)
        if text not in dictionary:
            return match.group(0)
        return f"\\text{{{dictionary[text]}}}"

    return TEXT_PATTERN.sub(replace, math)
