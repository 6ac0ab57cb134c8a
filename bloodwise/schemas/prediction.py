from enum import Enum
from typing import Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

class Disease(str, Enum):
    ANEMIA = "Anemia"
    TYPE_2_DIABETES = "Type 2 Diabetes"
    CHRONIC_KIDNEY_DISEASE = "Chronic Kidney Disease"
    THROMBOCYTOPENIA = "Thrombocytopenia"
    THALASSEMIA = "Thalassemia"
    HEALTHY = "Healthy"
    INCONCLUSIVE = "Inconclusive"

class RiskLevel(str, Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"

    @property
    def rank(self) -> int:
        return _RISK_RANK[self]

_RISK_RANK = {
    RiskLevel.LOW: 1,
    RiskLevel.MODERATE: 2,
    RiskLevel.HIGH: 3,
}

class Prediction(BaseModel):
    disease: Disease
    confidence: int = Field(..., ge=0, le=100, description="Percentage")
    risk_level: RiskLevel = Field(..., alias="riskLevel")
    description: str
    markers: Optional[Dict[str, Optional[float]]] = Field(
        None, description="Input markers behind this prediction, copied unchanged"
    )

    model_config = ConfigDict(populate_by_name=True)
