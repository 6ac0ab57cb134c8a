"""
Scripted health assistant.

Replies are picked by keyword category and filled from the knowledge base
and the user's current predictions. There is no language model here: the
same input always produces the same reply.
"""
from typing import Dict, List, Optional, Sequence

from bloodwise.schemas.knowledge import DiseaseInfo
from bloodwise.schemas.prediction import Disease, Prediction
from bloodwise.services.knowledge_base import get_disease_info
from bloodwise.services.prediction_engine import PredictionEngine

GREETING = (
    "Hello! I'm Dr. AI, your virtual health assistant. I can help you understand your blood test "
    "results and provide personalized health recommendations. How may I help you today?"
)

# Checked in this order; the first category with a matching keyword wins.
VERIFICATION_KEYWORDS = ("verify", "authentic", "real", "fake", "trust")
ASSESSMENT_KEYWORDS = ("risk", "disease", "condition")
TREATMENT_KEYWORDS = ("treatment", "therapy", "medication", "medicine", "drug")
LIFESTYLE_KEYWORDS = ("lifestyle", "diet", "exercise", "nutrition", "habits")
RECOMMENDATION_KEYWORDS = ("recommendation", "advice", "suggest", "help", "tips")
IMPACT_KEYWORDS = ("affect me", "impact", "change my life", "daily life", "living with")
EXPLANATION_KEYWORDS = ("explain", "tell me about", "what is", "understand")
SYMPTOM_KEYWORDS = ("symptom", "feel", "sign", "prognosis", "future")
VALUE_KEYWORDS = ("value", "level", "test", "result", "number")
CAUSE_KEYWORDS = ("cause", "why", "reason", "how did", "develop")
COMPLICATION_KEYWORDS = ("complications", "risks", "dangerous", "serious", "worry")

# Marker(s) named when pointing at the most concerning reading
CONCERNING_MARKER = {
    Disease.TYPE_2_DIABETES: "glucose",
    Disease.CHRONIC_KIDNEY_DISEASE: "creatinine and urea",
    Disease.THROMBOCYTOPENIA: "platelet",
    Disease.THALASSEMIA: "MCV and MCH",
}

# (marker, label, unit, target range)
VALUE_ROWS = (
    ("glucose", "Glucose", "mg/dL", "70-100 mg/dL"),
    ("hemoglobin", "Hemoglobin", "g/dL", "12.0-15.5 g/dL"),
    ("creatinine", "Creatinine", "mg/dL", "0.6-1.2 mg/dL"),
    ("urea", "Urea/BUN", "mg/dL", "7-20 mg/dL"),
)


def _matches(text: str, keywords: Sequence[str]) -> bool:
    return any(keyword in text for keyword in keywords)


def _bullets(items: Sequence[str]) -> str:
    return "\n".join(f"• {item}" for item in items)


def _listing(items: Sequence[str], empty: str = "none listed") -> str:
    return ", ".join(items) if items else empty


def _format_number(value: float) -> str:
    return f"{value:g}"


class ChatResponder:

    @staticmethod
    def respond(message: str, predictions: Sequence[Prediction], report_verified: bool = False) -> str:
        text = message.lower()

        if _matches(text, VERIFICATION_KEYWORDS):
            return ChatResponder._verification_reply(predictions, report_verified)

        if not predictions:
            if _matches(text, ASSESSMENT_KEYWORDS):
                return (
                    "I need to see your blood test results before I can assess your health status. "
                    "Could you please upload your lab report or enter your blood values? Once I have "
                    "that information, I can provide a thorough analysis."
                )
            return (
                "I'm here to help you understand your health status, but I don't have your blood test "
                "data yet. Please upload your results or fill in the form first so I can provide "
                "personalized insights."
            )

        top = PredictionEngine.highest_risk(predictions)
        info = get_disease_info(top.disease)

        if _matches(text, TREATMENT_KEYWORDS):
            return (
                f"For {info.name}, the following treatment options are typically considered:\n\n"
                f"{_bullets(info.treatments)}\n\n"
                f"Medications commonly prescribed include:\n{_bullets(info.medications)}\n\n"
                "It's essential to consult with a healthcare professional before starting any treatment, "
                "as your specific situation may require a personalized approach."
            )

        if _matches(text, LIFESTYLE_KEYWORDS):
            return (
                f"For managing {info.name}, these lifestyle adjustments are recommended:\n\n"
                f"{_bullets(info.lifestyle)}\n\n"
                "These changes can significantly impact your condition and overall health. Would you like "
                "more specific information about any of these recommendations?"
            )

        if _matches(text, RECOMMENDATION_KEYWORDS):
            return ChatResponder._recommendation_reply(info)

        if _matches(text, IMPACT_KEYWORDS):
            return ChatResponder._impact_reply(info)

        if _matches(text, EXPLANATION_KEYWORDS):
            named = ChatResponder._named_prediction(text, predictions)
            if named:
                return ChatResponder._explanation_reply(named, get_disease_info(named.disease))
            return (
                "I'd be happy to explain more about your health conditions. From your blood test results, "
                f"I've detected indicators for {top.disease.value}. Would you like me to explain what this "
                "means, what might be causing it, or what treatment options are available?"
            )

        if _matches(text, SYMPTOM_KEYWORDS):
            symptoms = _listing(info.symptoms, empty="no specific symptoms")
            return (
                f"With {info.name}, you might experience the following symptoms: {symptoms}.\n\n"
                f"Regarding prognosis: {info.prognosis}\n\n"
                "It's important to note that individual experiences vary, and early detection and proper "
                "management can significantly improve outcomes. Would you like to discuss treatment options?"
            )

        if _matches(text, VALUE_KEYWORDS):
            return ChatResponder._values_reply(predictions, top)

        if _matches(text, CAUSE_KEYWORDS):
            return (
                f"{info.name} is typically caused by: {_listing(info.causes)}.\n\n"
                f"In your case, your blood test shows {top.description.lower()} This doesn't necessarily "
                "tell us the exact cause in your specific situation, but it helps identify the condition. "
                "Further diagnostic testing may be needed to determine the underlying cause. Would you like "
                "to discuss next steps for diagnosis or treatment?"
            )

        if _matches(text, COMPLICATION_KEYWORDS):
            return (
                f"If left untreated or poorly managed, {info.name} can lead to these potential complications: "
                f"{_listing(info.complications)}.\n\n"
                "However, it's important to note that with proper management and regular medical care, many "
                f"of these complications can be prevented or minimized. Your current risk level is "
                f"{top.risk_level.value}, and early intervention offers the best opportunity to prevent these issues."
            )

        if top.disease in (Disease.HEALTHY, Disease.INCONCLUSIVE):
            return (
                f"Based on my analysis of your blood test results: {top.description} "
                "Would you like some general health tips, or to know what else to test for?"
            )

        return (
            "Based on my analysis of your blood test results, my primary concern is the indicators for "
            f"{top.disease.value} with a {top.confidence}% confidence level. Your "
            f"{CONCERNING_MARKER.get(top.disease, 'hemoglobin')} levels are outside the optimal range, "
            f"suggesting {top.risk_level.value} risk. \n\n"
            "The good news is that with proper management and lifestyle adjustments, this condition can often "
            "be effectively controlled. Would you like to discuss treatment options, lifestyle recommendations, "
            "or learn more about how this condition might affect you?"
        )

    @staticmethod
    def _verification_reply(predictions: Sequence[Prediction], report_verified: bool) -> str:
        if report_verified:
            return (
                "I've verified that your blood test report is authentic using cryptographic verification. "
                "The digital signature matches the issuing laboratory and the report hasn't been tampered "
                "with. You can trust these results for making health decisions."
            )
        if not predictions:
            return (
                "I don't have any report to verify. Please upload your blood test results first so I can "
                "authenticate them using our cryptographic verification system."
            )
        return (
            "Unfortunately, I couldn't verify the authenticity of this report. The digital signature "
            "verification failed, which could mean the report lacks proper security features or may have "
            "been modified. I recommend obtaining a digitally signed report from an accredited laboratory."
        )

    @staticmethod
    def _recommendation_reply(info: DiseaseInfo) -> str:
        monitoring = next(
            (t for t in info.treatments if "monitor" in t),
            "Regular check-ups with your healthcare provider",
        )
        diet = next((l for l in info.lifestyle if "diet" in l), "Follow a balanced diet")
        first_treatment = info.treatments[0] if info.treatments else "Regular check-ups with your healthcare provider"
        first_lifestyle = info.lifestyle[0] if info.lifestyle else "Follow a balanced diet"
        return (
            f"Based on your {info.name} indicators, here are my recommendations:\n\n"
            f"1. Medical follow-up: {first_treatment}\n"
            f"2. Lifestyle change: {first_lifestyle}\n"
            f"3. Monitoring: {monitoring}\n"
            f"4. Diet: {diet}\n"
            f"5. Support: Consider joining a support group for people with {info.name}\n\n"
            "Would you like more specific recommendations about any of these areas?"
        )

    @staticmethod
    def _impact_reply(info: DiseaseInfo) -> str:
        medical_care = next((t for t in info.treatments if "regular" in t), "Regular medical follow-ups")
        daily = info.lifestyle[0] if info.lifestyle else "Keep up your current routine"
        return (
            f"Living with {info.name} can impact your daily life in several ways:\n\n"
            f"1. Physical symptoms: You may experience {_listing(info.symptoms[:3], empty='no specific symptoms')}\n\n"
            f"2. Daily management: {daily}\n\n"
            f"3. Medical care: {medical_care}\n\n"
            f"4. Potential complications if not managed: {_listing(info.complications[:2])}\n\n"
            f"5. Outlook: {info.prognosis}\n\n"
            f"With proper management and support, many people with {info.name} lead fulfilling, active "
            "lives. The key is early intervention and consistent care."
        )

    @staticmethod
    def _named_prediction(text: str, predictions: Sequence[Prediction]) -> Optional[Prediction]:
        for prediction in predictions:
            name = prediction.disease.value.lower()
            if name in text or name.replace(" ", "", 1) in text:
                return prediction
        return None

    @staticmethod
    def _explanation_reply(prediction: Prediction, info: DiseaseInfo) -> str:
        return (
            f"{info.description}\n\n"
            f"Your test results show a {prediction.confidence}% likelihood with a "
            f"{prediction.risk_level.value} risk level. {prediction.description}\n\n"
            f"Common symptoms include: {_listing(info.symptoms[:4], empty='none specific')}.\n\n"
            f"Common causes include: {_listing(info.causes[:3])}.\n\n"
            "Would you like to know about treatment options, lifestyle recommendations, or possible complications?"
        )

    @staticmethod
    def _values_reply(predictions: Sequence[Prediction], top: Prediction) -> str:
        markers: Dict[str, float] = {}
        for prediction in predictions:
            for name, value in (prediction.markers or {}).items():
                if value is not None:
                    markers.setdefault(name, value)

        rows: List[str] = []
        for key, label, unit, target in VALUE_ROWS:
            value = markers.get(key)
            reading = f"{_format_number(value)} {unit}" if value is not None else "not measured"
            rows.append(f"- {label}: {reading} (Target: {target})")

        concerning = CONCERNING_MARKER.get(top.disease, "hemoglobin")
        return (
            "Let me break down your key blood test values:\n\n"
            + "\n".join(rows)
            + f"\n\nThe most concerning value is your {concerning}, which suggests {top.disease.value}. "
            "Would you like me to explain what these values mean for your health?"
        )
