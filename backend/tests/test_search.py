"""Tests for catalog token search."""

from pcbuilder.catalog.search import normalize, score_part, search_parts, tokenize
from pcbuilder.schemas.component import Part


def _part(part_id: str, name: str, sku: str | None = None) -> Part:
    return Part(id=part_id, name=name, sku=sku)


CATALOG = [
    _part("1", "Procesador AMD Ryzen 5 7600", "100-100001015BOX"),
    _part("2", "Tarjeta Madre ASUS TUF B650-PLUS", "90MB1BY0"),
    _part("3", "Memoria Kingston Fury Beast DDR5 32GB", "KF552C40BBK2-32"),
    _part("4", "Módulo de Memoria Corsair Vengeance DDR5", "CMK32GX5M2B5200C40"),
    _part("5", "Disipador Ryzen Wraith", "RYZEN-COOL"),
]


class TestNormalize:
    def test_lowercase_and_accents(self):
        assert normalize("Módulo ÉXITO") == "modulo exito"

    def test_collapses_whitespace(self):
        assert normalize("  Hola   mundo \t ") == "hola mundo"

    def test_tokenize_drops_short_tokens(self):
        assert tokenize("a RTX 4070 x") == ["rtx", "4070"]


class TestScore:
    def test_name_and_all_tokens_bonus(self):
        assert score_part(CATALOG[0], ["ryzen"]) == 5

    def test_sku_only(self):
        assert score_part(_part("x", "Cable", "RTX-CABLE"), ["rtx"]) == 1

    def test_no_match(self):
        assert score_part(CATALOG[1], ["ddr5"]) == 0


class TestSearchParts:
    def test_blank_query_returns_everything(self):
        assert search_parts(CATALOG, "   ") == CATALOG
        assert search_parts(CATALOG, "x") == CATALOG

    def test_accent_insensitive(self):
        result = search_parts(CATALOG, "modulo")
        assert [p.id for p in result] == ["4"]

    def test_ties_sorted_by_name(self):
        result = search_parts(CATALOG, "memoria ddr5")
        assert [p.id for p in result] == ["3", "4"]

    def test_more_matches_rank_first(self):
        result = search_parts(CATALOG, "ryzen 7600")
        assert [p.id for p in result] == ["1", "5"]

    def test_no_matches(self):
        assert search_parts(CATALOG, "teclado") == []
