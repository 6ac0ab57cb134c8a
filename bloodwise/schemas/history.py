import uuid
from datetime import datetime, timezone
from typing import List, Optional

from pydantic import BaseModel, Field

from bloodwise.schemas.prediction import Prediction

class HistoryEntry(BaseModel):
    id: uuid.UUID = Field(default_factory=uuid.uuid4)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    lab_name: Optional[str] = None
    predictions: List[Prediction]
