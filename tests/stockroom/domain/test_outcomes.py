"""Tests for the tagged results returned by ProductService."""

from stockroom.product.outcomes import (
    Absent,
    Corrected,
    CorrectResult,
    Found,
    Lookup,
    NotFound,
    Outcome,
    Stocked,
    StockResult,
    Unstocked,
    UnstockResult,
)


class TestOutcomes:
    def test_each_mutation_result_exposes_its_outcome(self, hobbit):
        assert Stocked(hobbit).outcome is Outcome.STOCKED
        assert Corrected(hobbit).outcome is Outcome.CORRECTED
        assert Unstocked("abc").outcome is Outcome.UNSTOCKED
        assert NotFound("abc").outcome is Outcome.NOT_FOUND

    def test_outcome_values(self):
        assert [outcome.value for outcome in Outcome] == ["Stocked", "NotFound", "Corrected", "Unstocked"]

    def test_outcome_is_not_a_dataclass_field(self, hobbit):
        assert Stocked(hobbit) == Stocked(hobbit)
        assert "outcome" not in repr(Stocked(hobbit))

    def test_found_and_absent_are_distinct(self, hobbit):
        assert Found(hobbit) != Absent("abc")
        assert Absent("abc").product_id == "abc"
        assert Found(hobbit).product is hobbit

    def test_result_aliases_cover_each_operation(self, hobbit):
        assert isinstance(Stocked(hobbit), StockResult)
        assert isinstance(Found(hobbit), Lookup)
        assert isinstance(Absent("abc"), Lookup)
        assert isinstance(Corrected(hobbit), CorrectResult)
        assert isinstance(NotFound("abc"), CorrectResult)
        assert isinstance(Unstocked("abc"), UnstockResult)
        assert not isinstance(Corrected(hobbit), UnstockResult)
