"""Behaviour of the predicate tree, in memory and compiled to SQL."""
from datetime import datetime
from types import SimpleNamespace

import pytest

from mototrack.filters.predicates import (
    And,
    ContainsIgnoreCase,
    Equals,
    EqualsIgnoreCase,
    GreaterOrEqual,
    LessOrEqual,
    MatchAll,
    conjunction,
    evaluate,
    resolve,
    to_clause,
)
from mototrack.models import Moto


def filial(**kwargs):
    return SimpleNamespace(**{"id": 1, "nome": None, "estado": None, **kwargs})


def moto(**kwargs):
    return SimpleNamespace(**{"id": 1, "placa": "ABC1234", "ano": 2022, "filial": None, **kwargs})


class TestResolve:
    def test_plain_attribute(self):
        assert resolve(moto(placa="XYZ9876"), ("placa",)) == "XYZ9876"

    def test_related_attribute(self):
        assert resolve(moto(filial=filial(id=7)), ("filial", "id")) == 7

    def test_missing_relationship_yields_none(self):
        assert resolve(moto(filial=None), ("filial", "id")) is None


class TestAtomicPredicates:
    def test_equals(self):
        assert evaluate(Equals(("id",), 3), moto(id=3))
        assert not evaluate(Equals(("id",), 3), moto(id=4))

    def test_equals_ignore_case(self):
        predicate = EqualsIgnoreCase(("estado",), "sp")
        assert evaluate(predicate, filial(estado="SP"))
        assert evaluate(predicate, filial(estado="Sp"))
        assert not evaluate(predicate, filial(estado="SPX"))

    def test_contains_ignore_case(self):
        predicate = ContainsIgnoreCase(("nome",), "lap")
        assert evaluate(predicate, filial(nome="Filial Lapa"))
        assert evaluate(predicate, filial(nome="LAPA Centro"))
        assert not evaluate(predicate, filial(nome="Mooca"))

    def test_contains_treats_wildcards_literally(self):
        predicate = ContainsIgnoreCase(("nome",), "100%")
        assert evaluate(predicate, filial(nome="Desconto 100%"))
        assert not evaluate(predicate, filial(nome="Desconto 1000"))

    def test_range_bounds_are_inclusive(self):
        lower = GreaterOrEqual(("ano",), 2020)
        upper = LessOrEqual(("ano",), 2022)
        assert evaluate(lower, moto(ano=2020))
        assert evaluate(upper, moto(ano=2022))
        assert not evaluate(lower, moto(ano=2019))
        assert not evaluate(upper, moto(ano=2023))

    def test_datetime_range(self):
        predicate = GreaterOrEqual(("data_hora",), datetime(2025, 6, 1))
        assert evaluate(predicate, SimpleNamespace(data_hora=datetime(2025, 6, 1)))
        assert not evaluate(predicate, SimpleNamespace(data_hora=datetime(2025, 5, 31, 23, 59)))

    @pytest.mark.parametrize(
        "predicate",
        [
            Equals(("nome",), "x"),
            EqualsIgnoreCase(("nome",), "x"),
            ContainsIgnoreCase(("nome",), "x"),
            GreaterOrEqual(("nome",), "x"),
            LessOrEqual(("nome",), "x"),
        ],
    )
    def test_null_attribute_never_matches(self, predicate):
        assert not evaluate(predicate, filial(nome=None))

    def test_related_equals(self):
        predicate = Equals(("filial", "id"), 7)
        assert evaluate(predicate, moto(filial=filial(id=7)))
        assert not evaluate(predicate, moto(filial=filial(id=8)))
        assert not evaluate(predicate, moto(filial=None))


class TestComposition:
    def test_match_all(self):
        assert evaluate(MatchAll(), moto())
        assert MatchAll().constraint_count == 0

    def test_and_requires_every_term(self):
        predicate = And((ContainsIgnoreCase(("placa",), "abc"), GreaterOrEqual(("ano",), 2021)))
        assert evaluate(predicate, moto(placa="ABC1234", ano=2022))
        assert not evaluate(predicate, moto(placa="ABC1234", ano=2020))
        assert not evaluate(predicate, moto(placa="XYZ9876", ano=2022))
        assert predicate.constraint_count == 2

    def test_conjunction_of_nothing_is_match_all(self):
        assert conjunction([]) == MatchAll()

    def test_conjunction_of_one_term_is_the_term(self):
        term = Equals(("id",), 1)
        assert conjunction([term]) is term

    def test_conjunction_keeps_order(self):
        first, second = Equals(("id",), 1), Equals(("ano",), 2022)
        assert conjunction([first, second]) == And((first, second))

    def test_predicates_are_immutable(self):
        predicate = Equals(("id",), 1)
        with pytest.raises(AttributeError):
            predicate.value = 2


class TestSqlCompilation:
    def test_contains_escapes_like_wildcards(self):
        clause = to_clause(ContainsIgnoreCase(("placa",), "10%"), Moto)
        assert "ESCAPE '/'" in str(clause)

    def test_related_constraint_is_an_exists(self):
        clause = to_clause(Equals(("filial", "id"), 3), Moto)
        assert "EXISTS" in str(clause)

    def test_match_all_compiles_to_true(self):
        assert str(to_clause(MatchAll(), Moto)) == "true"

    def test_paths_beyond_one_hop_are_rejected(self):
        with pytest.raises(ValueError):
            to_clause(Equals(("filial", "endereco", "cep"), "x"), Moto)
