"""Data models for the translation assistant."""

import json
from dataclasses import dataclass, field
from enum import Enum
from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple, Union


class SubstringKind(Enum):
    """Kind of special substring that is never translated."""
    MATH = "math"  # $...$
    GRAPHIE = "graphie"  # ![](web+graphie://...)
    WIDGET = "widget"  # [[☃ Expression 1]]


class GroupStatus(Enum):
    """State of the template attached to a suggestion group."""
    TEMPLATED = "templated"
    FAILED = "failed"
    UNTRANSLATED = "untranslated"


@dataclass(frozen=True)
class GroupKey:
    """Shape of a string used to group strings that can share a translation.

    `shape` is the string with math, graphies and widgets replaced by
    placeholders.  `texts` holds, for each formula in order, the sorted
    contents of its \\text{} blocks.
    """
    shape: str
    texts: Tuple[Tuple[str, ...], ...] = ()

    def serialize(self) -> str:
        """Stable JSON rendering, e.g. '{"str": "Is __MATH__?", "texts": [["red"]]}'."""
        return json.dumps(
            {"str": self.shape, "texts": [list(t) for t in self.texts]},
            ensure_ascii=False,
        )


@dataclass(frozen=True)
class Template:
    """Reusable translation built from one (English, translated) pair."""
    lines: Tuple[str, ...]
    math_mapping: Tuple[int, ...]
    graphie_mapping: Tuple[int, ...]
    widget_mapping: Tuple[int, ...]
    math_dictionary: Mapping[str, str] = field(default_factory=lambda: MappingProxyType({}))


@dataclass(frozen=True)
class TemplateFailure:
    """Result of a template construction whose special substrings didn't match."""
    kind: SubstringKind
    message: str


TemplateResult = Union[Template, TemplateFailure]


@dataclass(frozen=True)
class SuggestionGroup:
    """Items sharing a group key, plus the template built for them."""
    key: GroupKey
    items: Tuple[Any, ...] = ()
    template: Optional[TemplateResult] = None

    @property
    def status(self) -> GroupStatus:
        if self.template is None:
            return GroupStatus.UNTRANSLATED
        if isinstance(self.template, TemplateFailure):
            return GroupStatus.FAILED
        return GroupStatus.TEMPLATED
