"""Text normalization tests."""

import pytest

from cercaclasse.text import normalize, tokenize


class TestNormalize:
    """normalize()"""

    def test_lowercase_and_diacritics(self):
        assert normalize("È à") == normalize("e a") == "e a"
        assert normalize("NICOLÒ") == "nicolo"

    def test_punctuation_becomes_space(self):
        assert normalize("Sant'Arcangelo") == "sant arcangelo"
        assert normalize("IIS EINSTEIN - DE LORENZO") == "iis einstein de lorenzo"
        assert normalize('a.b,c;d:e-f_g/h\\i’j"k(l)m[n]o') == "a b c d e f g h i j k l m n o"

    def test_whitespace_collapsed_and_trimmed(self):
        assert normalize("  liceo \t\n  scientifico  ") == "liceo scientifico"

    def test_empty_and_none(self):
        assert normalize("") == ""
        assert normalize(None) == ""
        assert normalize("  ...  ") == ""

    def test_compatibility_and_dotted_capitals(self):
        assert normalize("ℌello") == "hello"
        assert normalize("İstanbul") == "istanbul"

    @pytest.mark.parametrize("text", [
        "Liceo Scientifico \"Galileo Galilei\"",
        "Ça è già (1°A)",
        "ℌello   Wörld",
        "İstanbul",
    ])
    def test_idempotent(self, text):
        once = normalize(text)
        assert normalize(once) == once


class TestTokenize:
    """tokenize()"""

    def test_splits_normalized_text(self):
        assert tokenize("Carducci, Roma") == ["carducci", "roma"]

    def test_no_tokens(self):
        assert tokenize("   ") == []
        assert tokenize(None) == []
