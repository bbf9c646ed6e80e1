"""Per-language rewrites of math, e.g. Portuguese uses `sen` instead of `sin`."""

from typing import Dict, List, Tuple

# Literal substitutions applied, in order, to every formula of a language.
MATH_REWRITES: Dict[str, List[Tuple[str, str]]] = {
    "pt": [
        ("\\sin", "\\operatorname{sen}"),
    ],
}


def translate_math(math: str, lang: str) -> str:
    """Apply the special case translations of `lang` to a formula.

    Languages without rewrite rules get the formula back unchanged.
    """
    for source, target in MATH_REWRITES.get(lang, []):
        math = math.replace(source, target)
    return math
