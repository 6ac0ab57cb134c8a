from datetime import datetime, timezone
from typing import List, Literal

from pydantic import BaseModel, ConfigDict, Field, field_validator

from bloodwise.schemas.prediction import Prediction

class ChatRequest(BaseModel):
    message: str = Field(..., description="What the user typed")
    predictions: List[Prediction] = Field(default_factory=list)
    report_verified: bool = False

    model_config = ConfigDict(extra="forbid")

    @field_validator("message")
    @classmethod
    def not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("message must not be blank")
        return value

class ChatMessage(BaseModel):
    role: Literal["user", "assistant"]
    content: str
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
