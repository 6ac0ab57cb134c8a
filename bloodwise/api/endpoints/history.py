import uuid
from typing import List, Optional

import structlog
from fastapi import APIRouter, Depends, HTTPException, Query, Response, status

from bloodwise.schemas.history import HistoryEntry
from bloodwise.services.history import HistoryStore, get_history_store

router = APIRouter()
logger = structlog.get_logger()

@router.get("/history", response_model=List[HistoryEntry])
async def list_history(
    disease: Optional[str] = Query(None, description="Only entries that predicted this condition"),
    store: HistoryStore = Depends(get_history_store)
):
    return store.list(disease=disease)

@router.delete("/history/{entry_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_history_entry(
    entry_id: uuid.UUID,
    store: HistoryStore = Depends(get_history_store)
):
    if not store.remove(entry_id):
        raise HTTPException(status_code=404, detail="History entry not found")

    logger.info("history_entry_deleted", entry_id=str(entry_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
