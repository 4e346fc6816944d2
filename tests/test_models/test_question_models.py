"""Tests for the Question model."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from feasibility_engine.models.question import Question
from feasibility_engine.taxonomy.domain_taxonomy import QuestionType, ScoreDomain


class TestQuestion:
    def test_minimal_question(self):
        q = Question(id="q-1", domain="security", weight=5)
        assert q.domain is ScoreDomain.SECURITY
        assert q.type is QuestionType.SINGLE_SELECT
        assert q.scoring is None
        assert q.required is True

    def test_is_frozen(self):
        q = Question(id="q-1", domain="security", weight=5)
        with pytest.raises(ValidationError):
            q.weight = 7

    @pytest.mark.parametrize("weight", [0, -1, -0.5])
    def test_weight_must_be_positive(self, weight):
        with pytest.raises(ValidationError):
            Question(id="q-1", domain="security", weight=weight)

    def test_unknown_domain_rejected(self):
        with pytest.raises(ValidationError):
            Question(id="q-1", domain="marketing", weight=5)

    @pytest.mark.parametrize("raw", [-1, 100.5, 250])
    def test_scoring_values_must_be_0_to_100(self, raw):
        with pytest.raises(ValidationError):
            Question(id="q-1", domain="security", weight=5, scoring={"a": raw})

    def test_max_option_score(self):
        q = Question(id="q-1", domain="security", weight=5, scoring={"a": 20, "b": 85})
        assert q.max_option_score == 85

    def test_max_option_score_without_table(self):
        q = Question(id="q-1", domain="security", weight=5, type="number")
        assert q.max_option_score is None
