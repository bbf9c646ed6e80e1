"""Tests for the HTML report."""

from translation_assistant import TranslationAssistant
from translation_assistant.config import ReportConfig
from translation_assistant.report_generator import ReportGenerator


def make_assistant():
    items = [
        {"en": "Simplify $2/4$", "tr": "Simplifica $2/4$"},
        {"en": "Simplify $3/12$", "tr": None},
        {"en": "Solve $x$", "tr": "Resuelve $y$"},
        {"en": "Hello <b>world</b>", "tr": None},
    ]
    return TranslationAssistant(items, lambda i: i["en"], lambda i: i["tr"], "es")


def test_report_lists_groups_and_statistics():
    html = ReportGenerator().generate_report(make_assistant())

    assert "Translation Suggestion Report" in html
    assert "Simplify __MATH__" in html
    assert "group-templated" in html
    assert "group-failed" in html
    assert "group-untranslated" in html
    assert "Failed Groups" in html


def test_report_escapes_strings():
    html = ReportGenerator().generate_report(make_assistant())
    assert "Hello &lt;b&gt;world&lt;/b&gt;" in html
    assert "<b>world</b>" not in html


def test_samples_limited_per_group():
    config = ReportConfig(max_items_per_group=1)
    html = ReportGenerator(config).generate_report(make_assistant())
    assert "Simplify $2/4$" in html
    assert "Simplify $3/12$" not in html


def test_report_written_to_file(tmp_path):
    output_path = tmp_path / "reports" / "report.html"
    html = ReportGenerator().generate_report(make_assistant(), str(output_path))

    assert output_path.exists()
    assert output_path.read_text(encoding="utf-8") == html


def test_configured_output_path(tmp_path):
    output_path = tmp_path / "configured.html"
    config = ReportConfig(title="Spanish", output_path=str(output_path))
    ReportGenerator(config).generate_report(make_assistant())

    assert "Spanish" in output_path.read_text(encoding="utf-8")
