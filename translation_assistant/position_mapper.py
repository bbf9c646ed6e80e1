"""Mapping between the order of special substrings in a translation and its source."""

from typing import List, Mapping, Optional

from .math_dictionary import apply_math_dictionary
from .math_rewriter import translate_math
from .models import SubstringKind
from .placeholders import KIND_SPECS, find_occurrences


def get_mapping(
    english_str: str,
    translated_str: str,
    lang: str,
    kind: SubstringKind,
    math_dictionary: Optional[Mapping[str, str]] = None,
) -> List[int]:
    """Map each occurrence of `kind` in the translation to one in the English string.

    Example:
        get_mapping(
            "simplify $2/4$\\n\\nhint: the denominator is $2$",
            "hintz: da denom $2$ iz $2$\\n\\nsimplifz $2/4$",
            "es",
            SubstringKind.MATH,
        )
        # [1, 1, 0]

    The first two __MATH__ placeholders of the translated template take the
    second formula of the English string, the third takes the first one.
    Repeated occurrences always map to the first equal English occurrence.

    Args:
        english_str: English source string
        translated_str: Translation of english_str
        lang: Language of translated_str
        kind: Kind of special substring to map
        math_dictionary: English to translated \\text{} contents, math only

    Returns:
        One English index per occurrence in translated_str

    Raises:
        MismatchError: The kind-specific subclass, if an occurrence of the
            translation has no equal occurrence in the English string
    """
    spec = KIND_SPECS[kind]
    inputs = find_occurrences(english_str, kind)
    outputs = find_occurrences(translated_str, kind)

    if spec.uses_dictionary and math_dictionary:
        inputs = [apply_math_dictionary(i, math_dictionary) for i in inputs]
    if spec.rewrite_math:
        inputs = [translate_math(i, lang) for i in inputs]

    mapping = []
    for output in outputs:
        if spec.rewrite_math:
            output = translate_math(output, lang)

        try:
            mapping.append(inputs.index(output))
        except ValueError:
            raise spec.mismatch_error(
                f"{kind.value} doesn't match: {output!r} not found in the English string"
            ) from None

    return mapping
