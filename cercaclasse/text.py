"""Text normalization for accent- and punctuation-insensitive matching."""

import re
import unicodedata

_PUNCT_RE = re.compile(r"[.,;:\-_/\\’'\"()\[\]]")
_SPACE_RE = re.compile(r"\s+")


def normalize(text: str | None) -> str:
    """Canonicalize free text for comparison.

    Lower-cases, strips diacritics (NFKD + drop combining marks), turns the
    usual punctuation into spaces and collapses whitespace. ``None`` and the
    empty string both give ``""``.
    """
    if not text:
        return ""
    decomposed = unicodedata.normalize("NFKD", text)
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c)).lower()
    spaced = _PUNCT_RE.sub(" ", stripped)
    return _SPACE_RE.sub(" ", spaced).strip()


def tokenize(text: str | None) -> list[str]:
    """Return the whitespace-delimited tokens of the normalized text."""
    return normalize(text).split()
