from ptp_calc.domain.clinical_thresholds import RiskCategory, category_label
from ptp_calc.scoring.assessment import assess
from ptp_calc.validation.flags import FlagLevel


def test_assess_without_cac():
    result = assess(45, "men", "chestPain")
    assert result.ok
    assert result.cac is None
    assert result.flags == ()


def test_assess_with_cac():
    result = assess(62, "women", "dyspnea", "150")
    assert result.ok
    assert result.ptp.percent == 14
    assert result.cac.category is RiskCategory.INTERMEDIATE_HIGH


def test_invalid_cac_does_not_affect_ptp():
    result = assess(45, "men", "chestPain", -10)
    assert result.ok
    assert result.ptp.percent == 22
    assert result.ptp.flags == ()
    assert not result.cac.ok
    assert [(f.level, f.message) for f in result.flags] == [(FlagLevel.BAD, "CAC input invalid (must be ≥0).")]


def test_age_above_ceiling_is_flagged_but_computed():
    result = assess(104, "men", "chestPain")
    assert result.ok
    assert result.ptp.percent == 52
    assert [f.message for f in result.flags] == ["Age >100: verify input."]
    assert result.flags[0].level is FlagLevel.WARN


def test_custom_age_ceiling():
    result = assess(92, "men", "chestPain", advisory_age_ceiling=90)
    assert [f.message for f in result.flags] == ["Age >90: verify input."]


def test_age_ceiling_not_checked_on_failure():
    result = assess(150, None, "chestPain")
    assert not result.ok
    assert [f.message for f in result.flags] == ["Sex is required."]


def test_failed_ptp_still_reports_cac():
    result = assess(25, "men", "chestPain", 1200)
    assert not result.ok
    assert result.cac.ok
    assert result.cac.category is RiskCategory.HIGH


def test_to_dict():
    data = assess(55, "men", "dyspnea", 0).to_dict()
    assert data["ok"] is True
    assert data["ptp"]["percent"] == 20
    assert data["cac"]["bucket"] == "0-99"
    assert data["flags"] == []


def test_category_labels():
    assert category_label(RiskCategory.LOW) == "Low ≤15%"
    assert category_label("intermediateHigh") == "Intermediate–High >15%"
    assert category_label(RiskCategory.HIGH) == "High >50%"
