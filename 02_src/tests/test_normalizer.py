"""Tests for input normalisation."""

from aurora.dialogue import normalize


class TestNormalize:
    def test_trims_and_lowercases(self):
        result = normalize("  Bom Dia \n")
        assert result.normalized == "bom dia"
        assert result.numeric == "Bom Dia"

    def test_keeps_case_in_numeric(self):
        result = normalize(" 2025.12.08.1.0001 ")
        assert result.numeric == "2025.12.08.1.0001"

    def test_empty_and_missing(self):
        assert normalize("").normalized == ""
        assert normalize("   ").numeric == ""
        assert normalize(None).normalized == ""

    def test_accented_text(self):
        assert normalize("NÃO").normalized == "não"
