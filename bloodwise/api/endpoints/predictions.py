from typing import List, Literal, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, status

from bloodwise.core.metrics import PREDICTIONS_TOTAL
from bloodwise.schemas.lab import LabValues
from bloodwise.schemas.prediction import Prediction
from bloodwise.services.history import HistoryStore, get_history_store, record_history_entry
from bloodwise.services.prediction_engine import PredictionEngine

router = APIRouter()
logger = structlog.get_logger()

@router.post("/classify", response_model=List[Prediction])
async def classify_lab_values(
    payload: LabValues,
    order: Literal["engine", "risk"] = Query("engine", description="'risk' lists the highest risk first"),
    require_core: bool = Query(False, description="Reject panels missing hemoglobin, glucose or creatinine"),
    lab_name: Optional[str] = Query(None, max_length=120),
    store: HistoryStore = Depends(get_history_store)
):
    if require_core:
        missing = payload.missing_core_markers()
        if missing:
            logger.info("classification_missing_values", missing=missing)
            raise HTTPException(
                status_code=status.HTTP_409_CONFLICT,
                detail={
                    "status": "MISSING_VALUES",
                    "message": "Please provide values for: " + ", ".join(missing),
                    "missing_fields": missing,
                }
            )

    predictions = PredictionEngine.classify(payload)

    for prediction in predictions:
        PREDICTIONS_TOTAL.labels(
            disease=prediction.disease.value,
            risk_level=prediction.risk_level.value
        ).inc()

    record_history_entry(store, predictions, lab_name=lab_name)

    logger.info(
        "classification_completed",
        diseases=[p.disease.value for p in predictions],
        order=order
    )

    if order == "risk":
        return PredictionEngine.rank_by_risk(predictions)
    return predictions
