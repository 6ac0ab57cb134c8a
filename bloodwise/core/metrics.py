from prometheus_client import Counter

PREDICTIONS_TOTAL = Counter(
    "bloodwise_predictions_total",
    "Predictions emitted by the classifier",
    ["disease", "risk_level"],
)

REPORT_UPLOADS_TOTAL = Counter(
    "bloodwise_report_uploads_total",
    "Lab report uploads by outcome",
    ["outcome"],
)
