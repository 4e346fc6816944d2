"""
Tests for feasibility_engine/scoring/response_scorer.py.

What we test
------------
score_response():
  - Missing response → 0.
  - SingleChoice: table lookup scaled by weight; unknown option → 0; no table → 0.
  - MultiChoice: average over selections, unmapped values count as 0 in
    the divisor; empty selection → 0; no table → 0.
  - Numeric: clamped to [0, 100], scaled by weight, table or not.
  - Text: always 0.
  - Every contribution lies in [0, weight].
"""

from __future__ import annotations

import math

import pytest

from feasibility_engine.models.response import MultiChoice, Numeric, Response, Text
from feasibility_engine.scoring.response_scorer import score_response
from feasibility_engine.taxonomy.domain_taxonomy import QuestionType


@pytest.fixture
def yes_no(make_question):
    return make_question(weight=10, scoring={"yes": 100, "no": 0})


@pytest.fixture
def abc(make_question):
    return make_question(
        weight=10, scoring={"a": 100, "b": 50, "c": 0}, qtype=QuestionType.MULTI_SELECT,
    )


@pytest.fixture
def numeric(make_question):
    return make_question(weight=10, scoring=None, qtype=QuestionType.NUMBER)


def _r(value) -> Response:
    return Response.from_value("q-1", value)


class TestMissingResponse:
    def test_none_scores_zero(self, yes_no):
        assert score_response(yes_no, None) == 0


class TestSingleChoice:
    def test_yes_scores_full_weight(self, yes_no):
        assert score_response(yes_no, _r("yes")) == pytest.approx(10)

    def test_no_scores_zero(self, yes_no):
        assert score_response(yes_no, _r("no")) == 0

    def test_unlisted_value_scores_zero(self, yes_no):
        assert score_response(yes_no, _r("maybe")) == 0

    def test_partial_value(self, make_question):
        q = make_question(weight=8, scoring={"partial": 60})
        assert score_response(q, _r("partial")) == pytest.approx(4.8)

    def test_no_table_scores_zero(self, numeric):
        assert score_response(numeric, _r("yes")) == 0

    def test_matching_is_case_sensitive(self, yes_no):
        assert score_response(yes_no, _r("YES")) == 0


class TestMultiChoice:
    def test_average_of_selected(self, abc):
        # (100 + 50) / 2 = 75 → 7.5
        assert score_response(abc, _r(["a", "b"])) == pytest.approx(7.5)

    def test_single_selection(self, abc):
        assert score_response(abc, _r(["a"])) == pytest.approx(10)

    def test_empty_selection_scores_zero(self, abc):
        assert score_response(abc, _r([])) == 0

    def test_unmapped_values_count_in_divisor(self, abc):
        # (100 + 0) / 2 = 50 → 5
        assert score_response(abc, _r(["a", "zzz"])) == pytest.approx(5)

    def test_all_unmapped_scores_zero(self, abc):
        assert score_response(abc, _r(["x", "y"])) == 0

    def test_no_table_scores_zero(self, numeric):
        assert score_response(numeric, _r(["a", "b"])) == 0

    def test_duplicates_count_twice(self, abc):
        # (100 + 100 + 0) / 3
        resp = Response(question_id="q-1", answer=MultiChoice(values=("a", "a", "c")))
        assert score_response(abc, resp) == pytest.approx(10 * 200 / 300)


class TestNumeric:
    @pytest.mark.parametrize(
        "value,expected",
        [(0, 0), (42, 4.2), (100, 10), (150, 10), (-20, 0), (1e300, 10), (-1e300, 0)],
    )
    def test_clamped_and_scaled(self, numeric, value, expected):
        assert score_response(numeric, _r(value)) == pytest.approx(expected)

    def test_numeric_on_question_with_table_is_clamped(self, yes_no):
        assert score_response(yes_no, _r(75)) == pytest.approx(7.5)

    @pytest.mark.parametrize("value", [math.nan, math.inf, -math.inf])
    def test_non_finite_value_scores_zero(self, numeric, value):
        # model_construct skips the finite check on Numeric.value.
        answer = Numeric.model_construct(value=value)
        resp = Response.model_construct(question_id="q-1", answer=answer)
        assert score_response(numeric, resp) == 0


class TestText:
    def test_text_scores_zero_without_table(self, numeric):
        resp = Response(question_id="q-1", answer=Text(value="We use AWS"))
        assert score_response(numeric, resp) == 0

    @pytest.mark.parametrize("raw", [None, True, {"k": "v"}, ["a", 2], math.nan])
    def test_odd_shapes_score_zero(self, yes_no, raw):
        assert score_response(yes_no, _r(raw)) == 0


class TestBounds:
    @pytest.mark.parametrize(
        "raw",
        ["yes", "no", "other", [], ["yes"], ["yes", "no", "x"], -5, 0, 55, 1e9, None, "", True],
    )
    def test_contribution_within_weight(self, make_question, raw):
        q = make_question(weight=7, scoring={"yes": 100, "no": 0})
        value = score_response(q, _r(raw))
        assert 0 <= value <= q.weight
