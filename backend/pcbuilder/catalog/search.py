"""Token-based catalog search with relevance ranking.

The query is split into tokens and every part is scored by how many
tokens it matches:
  - +2 per token found in the part name
  - +1 per token found in the SKU
  - +3 bonus when every token is in the name
Parts scoring 0 are dropped; the rest are sorted by score, then name.
"""

from __future__ import annotations

import re
import unicodedata
from collections.abc import Sequence
from typing import TypeVar

from pcbuilder.schemas.component import Part

PartT = TypeVar("PartT", bound=Part)

MIN_TOKEN_LENGTH = 2

_WHITESPACE = re.compile(r"\s+")


def normalize(text: str) -> str:
    """Lowercase, strip accents and collapse whitespace."""
    decomposed = unicodedata.normalize("NFD", text.lower().strip())
    stripped = "".join(c for c in decomposed if not unicodedata.combining(c))
    return _WHITESPACE.sub(" ", stripped)


def tokenize(query: str) -> list[str]:
    return [t for t in normalize(query).split(" ") if len(t) >= MIN_TOKEN_LENGTH]


def score_part(part: Part, tokens: Sequence[str]) -> int:
    name = normalize(part.name)
    sku = normalize(part.sku) if part.sku else ""

    score = 0
    name_matches = 0
    for token in tokens:
        if token in name:
            score += 2
            name_matches += 1
        if token in sku:
            score += 1

    if name_matches == len(tokens):
        score += 3
    return score


def search_parts(parts: Sequence[PartT], query: str) -> list[PartT]:
    """Rank ``parts`` against ``query``; a blank query returns them all."""
    if not query.strip():
        return list(parts)

    tokens = tokenize(query)
    if not tokens:
        return list(parts)

    scored = [(score_part(p, tokens), p) for p in parts]
    matches = [(score, p) for score, p in scored if score > 0]
    matches.sort(key=lambda sp: (-sp[0], normalize(sp[1].name)))
    return [p for _, p in matches]
