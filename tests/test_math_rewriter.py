"""Tests for per-language math rewrites."""

from translation_assistant.math_rewriter import translate_math


def test_portuguese_sine():
    assert translate_math(r"$\sin(x)$", "pt") == r"$\operatorname{sen}(x)$"


def test_portuguese_rewrites_every_occurrence():
    assert translate_math(r"$\sin^2 x + \sin y$", "pt") == (
        r"$\operatorname{sen}^2 x + \operatorname{sen} y$"
    )


def test_other_languages_unchanged():
    assert translate_math(r"$\sin(x)$", "es") == r"$\sin(x)$"
    assert translate_math(r"$\sin(x)$", "") == r"$\sin(x)$"


def test_rewrite_is_idempotent():
    once = translate_math(r"$\sin(x)$", "pt")
    assert translate_math(once, "pt") == once
