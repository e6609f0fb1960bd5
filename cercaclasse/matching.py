"""Code classification and token scoring over class records."""

import re
from collections.abc import Iterable

from cercaclasse.schema import ClassRecord
from cercaclasse.text import normalize, tokenize

# Codice meccanografico: 2 letters + 7-10 alphanumerics, e.g. PZIS022008
_CODE_RE = re.compile(r"[A-Z]{2}[A-Z0-9]{7,10}")
_WHITESPACE_RE = re.compile(r"\s+")

WORD_MATCH = 1
MUNICIPALITY_MATCH = 3
PROVINCE_MATCH = 1


def compact_code(query: str) -> str:
    """Drop all whitespace and upper-case."""
    return _WHITESPACE_RE.sub("", query).upper()


def looks_like_code(query: str) -> bool:
    return _CODE_RE.fullmatch(compact_code(query)) is not None


def _haystack(record: ClassRecord) -> str:
    return normalize(" ".join([
        record.school_name,
        record.municipality,
        record.province,
        record.class_label,
        record.institution_name,
    ]))


def _score_tokens(tokens: list[str], record: ClassRecord) -> int:
    if not tokens:
        return 0

    hay = _haystack(record)
    municipality = normalize(record.municipality)
    province = normalize(record.province)

    total = sum(WORD_MATCH for t in tokens if t in hay)

    # exact location matches beat partial ones: comune > provincia
    for t in tokens:
        if t == municipality:
            total += MUNICIPALITY_MATCH
        if t == province:
            total += PROVINCE_MATCH

    return total


def score(query: str, record: ClassRecord) -> int:
    """Score a record against a free-text query.

    +1 for each query token found anywhere in the record's text fields,
    +3 when a token equals the municipality, +1 when it equals the province.
    """
    return _score_tokens(tokenize(query), record)


def rank(query: str, records: Iterable[ClassRecord], limit: int) -> list[tuple[ClassRecord, int]]:
    """Return up to ``limit`` (record, score) pairs with a positive score, best first.

    Records with equal scores keep their original order.
    """
    tokens = tokenize(query)
    if not tokens:
        return []

    scored = [(r, _score_tokens(tokens, r)) for r in records]
    hits = [pair for pair in scored if pair[1] > 0]
    hits.sort(key=lambda pair: pair[1], reverse=True)
    return hits[:limit]
