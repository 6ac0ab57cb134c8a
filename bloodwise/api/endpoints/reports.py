import structlog
from fastapi import APIRouter, Depends, File, HTTPException, UploadFile, status

from bloodwise.core.config import settings
from bloodwise.core.metrics import REPORT_UPLOADS_TOTAL
from bloodwise.core.simulator_factory import get_simulator
from bloodwise.schemas.report import ExtractionResult, VerificationRequest, VerificationResult
from bloodwise.services.report_extraction import (
    ReportExtractor,
    ReportTooLargeError,
    UnsupportedReportTypeError,
    measure_upload,
)
from bloodwise.services.simulation.base import Simulator
from bloodwise.services.verification import ReportVerifier

router = APIRouter()
logger = structlog.get_logger()

@router.post("/reports/verify", response_model=VerificationResult)
async def verify_report(
    payload: VerificationRequest,
    simulator: Simulator = Depends(get_simulator)
):
    try:
        return await ReportVerifier(simulator).verify(payload.predictions)
    except ValueError as e:
        logger.warning("report_verification_rejected", error=str(e))
        raise HTTPException(status_code=400, detail=str(e))

@router.post("/reports/upload", response_model=ExtractionResult)
async def upload_report(
    file: UploadFile = File(...),
    simulator: Simulator = Depends(get_simulator)
):
    filename = file.filename or "report"
    content_type = file.content_type or "application/octet-stream"
    size = None

    try:
        size = await measure_upload(file, settings.MAX_UPLOAD_BYTES)
        result = await ReportExtractor(simulator).extract(filename, content_type, size)
    except ReportTooLargeError as e:
        REPORT_UPLOADS_TOTAL.labels(outcome="too_large").inc()
        logger.warning("report_upload_rejected", reason="too_large", filename=filename, size=size)
        raise HTTPException(status_code=status.HTTP_413_REQUEST_ENTITY_TOO_LARGE, detail=str(e))
    except UnsupportedReportTypeError as e:
        REPORT_UPLOADS_TOTAL.labels(outcome="unsupported_type").inc()
        logger.warning("report_upload_rejected", reason="unsupported_type", content_type=content_type)
        raise HTTPException(status_code=status.HTTP_415_UNSUPPORTED_MEDIA_TYPE, detail=str(e))
    finally:
        await file.close()

    REPORT_UPLOADS_TOTAL.labels(outcome="processed").inc()
    return result
