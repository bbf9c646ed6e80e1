"""Tests for mapping special substrings of a translation to its source."""

import pytest

from translation_assistant.errors import (
    GraphieMismatchError,
    MathMismatchError,
    MismatchError,
    WidgetMismatchError,
)
from translation_assistant.models import SubstringKind
from translation_assistant.position_mapper import get_mapping


class TestMathMapping:
    """Test mapping of formulas."""

    def test_swapped_formulas(self):
        mapping = get_mapping("$2/4$ and $3/6$", "$3/6$ and $2/4$", "es", SubstringKind.MATH)
        assert mapping == [1, 0]

    def test_across_paragraphs_with_repeats(self):
        mapping = get_mapping(
            "simplify $2/4$\n\nhint: the denominator is $2$",
            "hintz: da denom $2$ iz $2$\n\nsimplifz $2/4$",
            "es",
            SubstringKind.MATH,
        )
        assert mapping == [1, 1, 0]

    def test_duplicates_map_to_first_match(self):
        assert get_mapping("$x$ or $x$", "$x$ o $x$", "es", SubstringKind.MATH) == [0, 0]

    def test_dictionary_applied_to_english(self):
        mapping = get_mapping(
            r"Is $\text{red}$ more?",
            r"¿Es $\text{rojo}$ más?",
            "es",
            SubstringKind.MATH,
            {"red": "rojo"},
        )
        assert mapping == [0]

    def test_language_rewrite_on_both_sides(self):
        mapping = get_mapping(
            r"Find $\sin(x)$",
            r"Encontre $\operatorname{sen}(x)$",
            "pt",
            SubstringKind.MATH,
            {},
        )
        assert mapping == [0]

    def test_changed_formula_raises(self):
        with pytest.raises(MathMismatchError) as exc_info:
            get_mapping("Simplify $2/4$", "Simplifica $1/2$", "es", SubstringKind.MATH)
        assert exc_info.value.kind == SubstringKind.MATH
        assert isinstance(exc_info.value, MismatchError)

    def test_dropped_formula_is_not_an_error(self):
        assert get_mapping("$a$ and $b$", "$b$", "es", SubstringKind.MATH) == [1]


class TestGraphieAndWidgetMapping:
    """Test mapping of graphies and widgets."""

    def test_graphies_reordered(self):
        mapping = get_mapping(
            "![](web+graphie://a) then ![](web+graphie://b)",
            "![](web+graphie://b) luego ![](web+graphie://a)",
            "es",
            SubstringKind.GRAPHIE,
        )
        assert mapping == [1, 0]

    def test_graphie_mismatch(self):
        with pytest.raises(GraphieMismatchError):
            get_mapping("![](web+graphie://a)", "![](web+graphie://z)", "es", SubstringKind.GRAPHIE)

    def test_widget_mismatch(self):
        with pytest.raises(WidgetMismatchError):
            get_mapping("[[☃ radio 1]]", "[[☃ radio 2]]", "es", SubstringKind.WIDGET)

    def test_graphies_are_not_rewritten(self):
        mapping = get_mapping(
            r"![](web+graphie://\sin)",
            r"![](web+graphie://\sin)",
            "pt",
            SubstringKind.GRAPHIE,
        )
        assert mapping == [0]
