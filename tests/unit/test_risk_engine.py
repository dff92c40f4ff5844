"""
Unit Tests for the Risk Engine

Tests for model selection and stable ranking.
"""
import pytest

from cardiorisk.core.inference import RiskCandidate, RiskEngine, RiskLevel, evaluate_risks, rank_top, rank_top3


def _candidate(cid: str, score: float) -> RiskCandidate:
    return RiskCandidate(id=cid, title=cid.upper(), level=RiskLevel.LOW, score=score)


def _ids(candidates):
    return [c.id for c in candidates]


class TestRanking:
    """Tests for stable score ranking."""

    def test_ties_keep_evaluation_order(self):
        ranked = rank_top3([_candidate("a", 0.5), _candidate("b", 0.8), _candidate("c", 0.5)])
        assert _ids(ranked) == ["b", "a", "c"]

    def test_limit_and_no_mutation(self):
        candidates = [_candidate(str(i), i / 10) for i in range(5)]
        original = list(candidates)
        assert _ids(rank_top(candidates, 2)) == ["4", "3"]
        assert candidates == original

    def test_fewer_than_limit(self):
        assert _ids(rank_top3([_candidate("only", 0.1)])) == ["only"]


class TestRiskLevel:

    def test_ordinal(self):
        assert RiskLevel.LOW < RiskLevel.BORDERLINE < RiskLevel.INTERMEDIATE < RiskLevel.HIGH < RiskLevel.CRITICAL
        assert RiskLevel.HIGH >= RiskLevel.HIGH
        assert RiskLevel.CRITICAL.rank == 4

    @pytest.mark.parametrize("pct,cutoff,level", [
        (4.9, 7.5, RiskLevel.LOW),
        (5.0, 7.5, RiskLevel.BORDERLINE),
        (7.5, 7.5, RiskLevel.INTERMEDIATE),
        (9.9, 10, RiskLevel.BORDERLINE),
        (20.0, 10, RiskLevel.HIGH),
    ])
    def test_from_percent(self, pct, cutoff, level):
        assert RiskLevel.from_percent(pct, cutoff) == level

    def test_candidate_to_dict_omits_empty_lists(self):
        data = _candidate("x", 0.123456).to_dict()
        assert data["score"] == 0.1235
        assert "warnings" not in data
        assert "actions" not in data


class TestEvaluateRisks:
    """Tests for model selection per patient."""

    def test_reference_smoker(self, smoker_55m):
        assert _ids(evaluate_risks(smoker_55m)) == [
            "bp_category", "diabetes_risk", "ascvd_10yr", "framingham_10yr_chd", "who_cvd_10yr",
        ]

    def test_reference_smoker_top3(self, smoker_55m):
        ranked = rank_top3(evaluate_risks(smoker_55m))
        assert _ids(ranked) == ["framingham_10yr_chd", "bp_category", "ascvd_10yr"]

    def test_age_35_ascvd_or_relative_never_both(self, make_patient):
        ids = _ids(evaluate_risks(make_patient(age=35)))
        assert ("ascvd_10yr" in ids) != ("relative_risk" in ids)
        assert "relative_risk" in ids

    def test_age_25_without_labs(self, make_patient):
        risks = evaluate_risks(make_patient(age=25, has_lab_results=False))
        assert _ids(risks) == ["bp_category", "diabetes_risk", "relative_risk"]
        relative = risks[2]
        assert relative.warnings and "not validated for ages <40" in relative.warnings[0]

    def test_no_relative_risk_at_40_without_labs(self, make_patient):
        ids = _ids(evaluate_risks(make_patient(age=45, has_lab_results=False)))
        assert "ascvd_10yr" not in ids
        assert "relative_risk" not in ids
        assert "who_cvd_10yr" in ids

    def test_obesity_appended_last(self, make_patient):
        assert _ids(evaluate_risks(make_patient(bmi=36.0)))[-1] == "severe_obesity"


class TestRiskEngine:

    def test_region_from_string(self):
        assert RiskEngine("east_asia").region.value == "east_asia"

    def test_unknown_region(self):
        with pytest.raises(ValueError):
            RiskEngine("atlantis")

    def test_evaluate_rank_find(self, smoker_55m):
        engine = RiskEngine()
        risks = engine.evaluate(smoker_55m)
        assert len(engine.rank(risks, limit=1)) == 1
        assert engine.find(risks, "ascvd_10yr").id == "ascvd_10yr"
        assert engine.find(risks, "severe_obesity") is None
