import structlog
from fastapi import APIRouter, HTTPException

from bloodwise.schemas.knowledge import DiseaseInfo, HealthTip
from bloodwise.services.knowledge_base import get_disease_info, get_health_tip, get_tips

router = APIRouter()
logger = structlog.get_logger()

@router.get("/knowledge/{disease}", response_model=DiseaseInfo)
async def read_disease_info(disease: str):
    info = get_disease_info(disease)
    if not info:
        logger.warning("unknown_disease_requested", disease=disease)
        raise HTTPException(status_code=404, detail=f"No information for '{disease}'")
    return info

@router.get("/knowledge/{disease}/tips", response_model=HealthTip)
async def read_health_tips(disease: str):
    """
    Unknown conditions still get the generic tip list.
    """
    tip = get_health_tip(disease)
    if not tip:
        return HealthTip(disease=disease, tips=get_tips(disease))
    return tip
