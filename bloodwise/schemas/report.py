from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field

from bloodwise.schemas.lab import LabValues
from bloodwise.schemas.prediction import Prediction

class VerificationStatus(str, Enum):
    VERIFIED = "verified"
    FAILED = "failed"

class VerificationRequest(BaseModel):
    predictions: List[Prediction] = Field(default_factory=list)

    model_config = ConfigDict(extra="forbid")

class VerificationResult(BaseModel):
    status: VerificationStatus
    message: str = Field(..., description="Transcript text for the chat window")
    signature: Optional[str] = None
    report_hash: Optional[str] = None

class ExtractionResult(BaseModel):
    filename: str
    values: LabValues
    extracted_count: int
