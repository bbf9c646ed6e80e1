"""Detection of math, graphies and widgets, and group key normalization."""

import re
from dataclasses import dataclass
from typing import Dict, List, Type

from .errors import (
    GraphieMismatchError,
    MathMismatchError,
    MismatchError,
    WidgetMismatchError,
)
from .models import GroupKey, SubstringKind


# Matches math delimited by $, e.g. $x^2 + 2x + 1 = 0$ or $\text{cost} = \$4$
MATH_PATTERN = re.compile(r'\$(?:\\\$|[^$])+\$')

# Matches graphies, e.g.
# ![](web+graphie://ka-perseus-graphie.s3.amazonaws.com/542f2b4e297910eed545a5c29c3866918655bab4)
GRAPHIE_PATTERN = re.compile(r'!\[\]\([^)]+\)')

# Matches widgets, e.g. [[☃ Expression 1]]
WIDGET_PATTERN = re.compile(r'\[\[\u2603[^\]]+\]\]')

# Natural language text inside math, e.g. \text{red}
TEXT_PATTERN = re.compile(r'\\text\{([^}]*)\}')

TEXT_PLACEHOLDER = '__TEXT__'

# Markdown separates paragraphs with a blank line.
LINE_BREAK = '\n\n'


@dataclass(frozen=True)
class KindSpec:
    """How one kind of special substring is found, replaced and compared."""
    pattern: re.Pattern
    placeholder: str
    rewrite_math: bool
    uses_dictionary: bool
    mismatch_error: Type[MismatchError]


KIND_SPECS: Dict[SubstringKind, KindSpec] = {
    SubstringKind.MATH: KindSpec(
        pattern=MATH_PATTERN,
        placeholder='__MATH__',
        rewrite_math=True,
        uses_dictionary=True,
        mismatch_error=MathMismatchError,
    ),
    SubstringKind.GRAPHIE: KindSpec(
        pattern=GRAPHIE_PATTERN,
        placeholder='__GRAPHIE__',
        rewrite_math=False,
        uses_dictionary=False,
        mismatch_error=GraphieMismatchError,
    ),
    SubstringKind.WIDGET: KindSpec(
        pattern=WIDGET_PATTERN,
        placeholder='__WIDGET__',
        rewrite_math=False,
        uses_dictionary=False,
        mismatch_error=WidgetMismatchError,
    ),
}

PLACEHOLDERS = {spec.placeholder: kind for kind, spec in KIND_SPECS.items()}

PLACEHOLDER_PATTERN = re.compile(
    '|'.join(re.escape(placeholder) for placeholder in PLACEHOLDERS)
)


def find_occurrences(text: str, kind: SubstringKind) -> List[str]:
    """Return all occurrences of `kind` in `text`, left to right.

    Kinds replaced before `kind` by replace_with_placeholders are masked first,
    e.g. a graphie inside math is not a graphie occurrence.  This keeps the
    counts equal to the number of placeholders in the string's shape.
    """
    for earlier in SubstringKind:
        if earlier == kind:
            break
        spec = KIND_SPECS[earlier]
        text = spec.pattern.sub(spec.placeholder, text)
    return KIND_SPECS[kind].pattern.findall(text)


def extract_texts(math: str) -> List[str]:
    """Return the contents of the \\text{} blocks of a formula, in order."""
    return TEXT_PATTERN.findall(math)


def replace_texts(math: str) -> str:
    """Replace every \\text{} block of a formula with a generic placeholder."""
    return TEXT_PATTERN.sub(TEXT_PLACEHOLDER, math)


def replace_with_placeholders(text: str) -> str:
    """Replace math, then graphies, then widgets with their placeholders."""
    for kind in SubstringKind:
        spec = KIND_SPECS[kind]
        text = spec.pattern.sub(spec.placeholder, text)
    return text


def string_to_group_key(text: str) -> GroupKey:
    """Return the key of the group `text` belongs to.

    Strings with equal keys share a translation template.  Whitespace
    differences around paragraphs and between a formula and a following
    widget are ignored.  The \\text{} contents of each formula are sorted so
    that reordered natural language text within a formula gives the same key.

    Example: "Is $\\text{red} + \\text{blue}$ equal to $7$?" gives
    GroupKey(shape="Is __MATH__ equal to __MATH__?", texts=(("blue", "red"), ())).
    """
    texts = tuple(
        tuple(sorted(extract_texts(math)))
        for math in find_occurrences(text, SubstringKind.MATH)
    )

    shape = replace_with_placeholders(text)
    shape = re.sub(r'__MATH__[\t ]*__WIDGET__', '__MATH__ __WIDGET__', shape)
    shape = LINE_BREAK.join(line.strip() for line in shape.split(LINE_BREAK))

    return GroupKey(shape=shape, texts=texts)
