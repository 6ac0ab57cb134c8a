import math
from typing import List, Optional, Sequence

from bloodwise.schemas.lab import CORE_MARKERS, LabValues
from bloodwise.schemas.prediction import Disease, Prediction, RiskLevel

DESCRIPTIONS = {
    Disease.ANEMIA: "Low hemoglobin levels detected, indicating possible anemia.",
    Disease.TYPE_2_DIABETES: "Elevated glucose levels detected, indicating possible diabetes.",
    Disease.CHRONIC_KIDNEY_DISEASE: "Elevated creatinine and/or urea levels detected, indicating possible kidney issues.",
    Disease.THROMBOCYTOPENIA: "Low platelet count detected, indicating possible thrombocytopenia.",
    Disease.THALASSEMIA: "Low MCV and MCH levels detected, suggesting possible thalassemia.",
    Disease.HEALTHY: "All measured values appear within normal ranges.",
    Disease.INCONCLUSIVE: "Not enough data provided to make accurate predictions. Please provide more test values.",
}

HEALTHY_CONFIDENCE = 85
INCONCLUSIVE_CONFIDENCE = 30
THALASSEMIA_CONFIDENCE = 75


def _present(value: Optional[float]) -> bool:
    return value is not None and not math.isnan(value)


class PredictionEngine:
    """
    Rule-based classifier from a lab panel to candidate conditions.

    Every rule is independent and several may fire. The output keeps rule
    order (anemia, diabetes, kidney, platelets, thalassemia); ranking by
    risk is left to the caller via ``rank_by_risk``.
    """

    @staticmethod
    def calculate_confidence(value: float, threshold: float, extreme: float) -> int:
        """
        Maps how far ``value`` has moved from ``threshold`` towards ``extreme``
        onto 40..90. Direction comes from the thresholds: an extreme below
        the threshold means lower readings are worse (hemoglobin, platelets).
        """
        if extreme < threshold:
            deviation = (threshold - value) / (threshold - extreme)
        else:
            deviation = (value - threshold) / (extreme - threshold)
        deviation = min(1.0, max(0.0, deviation))
        # Half-up rounding, 52.5 -> 53
        return int(math.floor(40 + deviation * 50 + 0.5))

    @staticmethod
    def classify(values: LabValues) -> List[Prediction]:
        predictions: List[Prediction] = []

        hemoglobin = values.hemoglobin
        if _present(hemoglobin) and hemoglobin < 12.0:
            predictions.append(Prediction(
                disease=Disease.ANEMIA,
                confidence=PredictionEngine.calculate_confidence(hemoglobin, 12.0, 8.0),
                risk_level=RiskLevel.HIGH if hemoglobin < 10.0 else RiskLevel.MODERATE,
                description=DESCRIPTIONS[Disease.ANEMIA],
                markers={"hemoglobin": hemoglobin},
            ))

        glucose = values.glucose
        if _present(glucose) and glucose > 126:
            predictions.append(Prediction(
                disease=Disease.TYPE_2_DIABETES,
                confidence=PredictionEngine.calculate_confidence(glucose, 126, 200),
                risk_level=RiskLevel.HIGH if glucose > 180 else RiskLevel.MODERATE,
                description=DESCRIPTIONS[Disease.TYPE_2_DIABETES],
                markers={"glucose": glucose},
            ))

        creatinine = values.creatinine if _present(values.creatinine) else None
        urea = values.urea if _present(values.urea) else None
        if (creatinine is not None and creatinine > 1.2) or (urea is not None and urea > 20):
            high = creatinine is not None and creatinine > 2.0
            # Urea-only triggers still score on creatinine (0 when absent)
            score_on = creatinine if creatinine is not None else 0.0
            predictions.append(Prediction(
                disease=Disease.CHRONIC_KIDNEY_DISEASE,
                confidence=PredictionEngine.calculate_confidence(score_on, 1.2, 3.0),
                risk_level=RiskLevel.HIGH if high else RiskLevel.MODERATE,
                description=DESCRIPTIONS[Disease.CHRONIC_KIDNEY_DISEASE],
                markers={"creatinine": creatinine, "urea": urea},
            ))

        platelets = values.platelets
        if _present(platelets) and platelets < 150000:
            predictions.append(Prediction(
                disease=Disease.THROMBOCYTOPENIA,
                confidence=PredictionEngine.calculate_confidence(platelets, 150000, 50000),
                risk_level=RiskLevel.HIGH if platelets < 100000 else RiskLevel.MODERATE,
                description=DESCRIPTIONS[Disease.THROMBOCYTOPENIA],
                markers={"platelets": platelets},
            ))

        mch, mcv = values.mch, values.mcv
        if _present(mch) and _present(mcv) and mch < 27 and mcv < 80:
            predictions.append(Prediction(
                disease=Disease.THALASSEMIA,
                confidence=THALASSEMIA_CONFIDENCE,
                risk_level=RiskLevel.MODERATE,
                description=DESCRIPTIONS[Disease.THALASSEMIA],
                markers={"hemoglobin": values.hemoglobin, "mcv": mcv, "mch": mch},
            ))

        if predictions:
            return predictions

        return [PredictionEngine._fallback(values)]

    @staticmethod
    def _fallback(values: LabValues) -> Prediction:
        if all(_present(getattr(values, name)) for name in CORE_MARKERS):
            return Prediction(
                disease=Disease.HEALTHY,
                confidence=HEALTHY_CONFIDENCE,
                risk_level=RiskLevel.LOW,
                description=DESCRIPTIONS[Disease.HEALTHY],
                markers={
                    "hemoglobin": values.hemoglobin,
                    "glucose": values.glucose,
                    "creatinine": values.creatinine,
                    "platelets": values.platelets,
                },
            )

        return Prediction(
            disease=Disease.INCONCLUSIVE,
            confidence=INCONCLUSIVE_CONFIDENCE,
            risk_level=RiskLevel.LOW,
            description=DESCRIPTIONS[Disease.INCONCLUSIVE],
        )

    @staticmethod
    def rank_by_risk(predictions: Sequence[Prediction]) -> List[Prediction]:
        """
        Highest risk first. ``sorted`` is stable, so equal risks keep
        the engine's rule order.
        """
        return sorted(predictions, key=lambda p: -p.risk_level.rank)

    @staticmethod
    def highest_risk(predictions: Sequence[Prediction]) -> Optional[Prediction]:
        ranked = PredictionEngine.rank_by_risk(predictions)
        return ranked[0] if ranked else None
