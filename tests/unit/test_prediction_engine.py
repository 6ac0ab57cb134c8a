import math

import pytest
from pydantic import ValidationError

from bloodwise.schemas.lab import LabValues
from bloodwise.schemas.prediction import Disease, Prediction, RiskLevel
from bloodwise.services.prediction_engine import PredictionEngine

# --- Test Data Fixtures ---

@pytest.fixture
def normal_panel():
    return LabValues(hemoglobin=13.0, glucose=90, creatinine=1.0)

@pytest.fixture
def sick_panel():
    return LabValues(
        hemoglobin=9.0,
        glucose=150,
        creatinine=2.5,
        urea=30,
        platelets=90000,
        mcv=75,
        mch=25,
    )

def diseases(predictions):
    return [p.disease for p in predictions]

# --- Confidence ---

def test_confidence_decreasing_direction():
    assert PredictionEngine.calculate_confidence(11.0, 12.0, 8.0) == 53
    assert PredictionEngine.calculate_confidence(9.0, 12.0, 8.0) == 78

def test_confidence_increasing_direction():
    assert PredictionEngine.calculate_confidence(200, 126, 200) == 90
    assert PredictionEngine.calculate_confidence(163, 126, 200) == 65

def test_confidence_is_clamped():
    assert PredictionEngine.calculate_confidence(2.0, 12.0, 8.0) == 90
    assert PredictionEngine.calculate_confidence(500, 126, 200) == 90
    assert PredictionEngine.calculate_confidence(12.5, 12.0, 8.0) == 40
    assert PredictionEngine.calculate_confidence(0.0, 1.2, 3.0) == 40

# --- Rules ---

def test_mild_anemia():
    result = PredictionEngine.classify(
        LabValues(hemoglobin=11.0, glucose=90, creatinine=1.0, platelets=200000)
    )
    assert len(result) == 1
    assert result[0].disease == Disease.ANEMIA
    assert result[0].risk_level == RiskLevel.MODERATE
    assert result[0].confidence == 53
    assert result[0].markers == {"hemoglobin": 11.0}

def test_severe_anemia():
    result = PredictionEngine.classify(LabValues(hemoglobin=9.0))
    assert result[0].disease == Disease.ANEMIA
    assert result[0].risk_level == RiskLevel.HIGH
    assert result[0].confidence == 78

def test_hemoglobin_at_threshold_does_not_trigger(normal_panel):
    panel = normal_panel.model_copy(update={"hemoglobin": 12.0})
    assert diseases(PredictionEngine.classify(panel)) == [Disease.HEALTHY]

def test_diabetes_high_risk():
    result = PredictionEngine.classify(LabValues(glucose=200))
    assert result[0].disease == Disease.TYPE_2_DIABETES
    assert result[0].risk_level == RiskLevel.HIGH
    assert result[0].confidence == 90

def test_diabetes_moderate_at_180():
    result = PredictionEngine.classify(LabValues(glucose=180))
    assert result[0].risk_level == RiskLevel.MODERATE

def test_kidney_disease_from_creatinine():
    result = PredictionEngine.classify(LabValues(creatinine=2.5))
    assert result[0].disease == Disease.CHRONIC_KIDNEY_DISEASE
    assert result[0].risk_level == RiskLevel.HIGH
    assert result[0].markers == {"creatinine": 2.5, "urea": None}

def test_kidney_disease_from_urea_only_scores_on_missing_creatinine():
    result = PredictionEngine.classify(LabValues(urea=45))
    assert result[0].disease == Disease.CHRONIC_KIDNEY_DISEASE
    assert result[0].risk_level == RiskLevel.MODERATE
    # creatinine absent counts as 0, the bottom of the scale
    assert result[0].confidence == 40

def test_thrombocytopenia():
    moderate = PredictionEngine.classify(LabValues(platelets=120000))
    assert moderate[0].disease == Disease.THROMBOCYTOPENIA
    assert moderate[0].risk_level == RiskLevel.MODERATE
    assert moderate[0].confidence == 55

    high = PredictionEngine.classify(LabValues(platelets=90000))
    assert high[0].risk_level == RiskLevel.HIGH

def test_thalassemia_fixed_confidence():
    result = PredictionEngine.classify(LabValues(mch=25, mcv=75))
    assert result[0].disease == Disease.THALASSEMIA
    assert result[0].confidence == 75
    assert result[0].risk_level == RiskLevel.MODERATE

def test_thalassemia_needs_both_indices():
    result = PredictionEngine.classify(LabValues(mch=25))
    assert diseases(result) == [Disease.INCONCLUSIVE]

def test_all_rules_keep_evaluation_order(sick_panel):
    result = PredictionEngine.classify(sick_panel)
    assert diseases(result) == [
        Disease.ANEMIA,
        Disease.TYPE_2_DIABETES,
        Disease.CHRONIC_KIDNEY_DISEASE,
        Disease.THROMBOCYTOPENIA,
        Disease.THALASSEMIA,
    ]

# --- Fallbacks ---

def test_healthy_fallback(normal_panel):
    result = PredictionEngine.classify(normal_panel)
    assert len(result) == 1
    assert result[0].disease == Disease.HEALTHY
    assert result[0].confidence == 85
    assert result[0].risk_level == RiskLevel.LOW
    assert result[0].markers == {
        "hemoglobin": 13.0,
        "glucose": 90,
        "creatinine": 1.0,
        "platelets": None,
    }

def test_inconclusive_when_empty():
    result = PredictionEngine.classify(LabValues())
    assert len(result) == 1
    assert result[0].disease == Disease.INCONCLUSIVE
    assert result[0].confidence == 30
    assert result[0].markers is None

def test_inconclusive_when_core_marker_missing():
    result = PredictionEngine.classify(LabValues(hemoglobin=13.0, glucose=90, platelets=250000))
    assert diseases(result) == [Disease.INCONCLUSIVE]

def test_zero_is_a_measurement_not_absence():
    # creatinine=0 is present, so the panel is complete
    result = PredictionEngine.classify(LabValues(hemoglobin=13.0, glucose=90, creatinine=0))
    assert diseases(result) == [Disease.HEALTHY]

def test_nan_is_treated_as_absent():
    values = LabValues(hemoglobin=math.nan, glucose=90, creatinine=1.0)
    assert values.hemoglobin is None
    assert diseases(PredictionEngine.classify(values)) == [Disease.INCONCLUSIVE]

def test_unconstructed_nan_is_ignored_by_rules():
    values = LabValues.model_construct(hemoglobin=math.nan, platelets=math.nan)
    result = PredictionEngine.classify(values)
    assert diseases(result) == [Disease.INCONCLUSIVE]

def test_unconstructed_nan_core_marker_is_not_healthy():
    values = LabValues.model_construct(hemoglobin=math.nan, glucose=90.0, creatinine=1.0)
    result = PredictionEngine.classify(values)
    assert diseases(result) == [Disease.INCONCLUSIVE]
    assert result[0].markers is None

def test_classify_is_deterministic(sick_panel):
    first = PredictionEngine.classify(sick_panel)
    second = PredictionEngine.classify(sick_panel)
    assert [p.model_dump() for p in first] == [p.model_dump() for p in second]

def test_unknown_field_rejected():
    with pytest.raises(ValidationError):
        LabValues(hemoglobin=13.0, ferritin=20)

# --- Ranking ---

def test_rank_by_risk_is_stable(sick_panel):
    ranked = PredictionEngine.rank_by_risk(PredictionEngine.classify(sick_panel))
    assert diseases(ranked) == [
        Disease.ANEMIA,
        Disease.CHRONIC_KIDNEY_DISEASE,
        Disease.THROMBOCYTOPENIA,
        Disease.TYPE_2_DIABETES,
        Disease.THALASSEMIA,
    ]

def test_highest_risk():
    predictions = [
        Prediction(disease=Disease.THALASSEMIA, confidence=75, risk_level=RiskLevel.MODERATE, description="x"),
        Prediction(disease=Disease.TYPE_2_DIABETES, confidence=90, risk_level=RiskLevel.HIGH, description="y"),
    ]
    assert PredictionEngine.highest_risk(predictions).disease == Disease.TYPE_2_DIABETES
    assert PredictionEngine.highest_risk([]) is None

def test_risk_level_rank_order():
    assert RiskLevel.LOW.rank < RiskLevel.MODERATE.rank < RiskLevel.HIGH.rank
