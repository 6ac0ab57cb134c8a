import math
from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

class Gender(str, Enum):
    MALE = "male"
    FEMALE = "female"
    UNKNOWN = "unknown"

# Minimum panel the form asks for before a result can be called "Healthy"
CORE_MARKERS = ("hemoglobin", "glucose", "creatinine")

NUMERIC_FIELDS = (
    "hemoglobin", "glucose", "creatinine", "urea", "cholesterol",
    "wbc", "rbc", "platelets", "hematocrit", "mcv", "mch", "mchc", "age",
)

class LabValues(BaseModel):
    """
    One blood panel. Every marker is optional: None means "not measured",
    which is not the same thing as a measured zero.
    """
    hemoglobin: Optional[float] = Field(None, description="g/dL")
    glucose: Optional[float] = Field(None, description="mg/dL (fasting)")
    creatinine: Optional[float] = Field(None, description="mg/dL")
    urea: Optional[float] = Field(None, description="mg/dL (BUN)")
    cholesterol: Optional[float] = Field(None, description="mg/dL (total)")
    wbc: Optional[float] = Field(None, description="White cells per microlitre")
    rbc: Optional[float] = Field(None, description="Red cells, million per microlitre")
    platelets: Optional[float] = Field(None, description="Platelets per microlitre")
    hematocrit: Optional[float] = Field(None, description="%")
    mcv: Optional[float] = Field(None, description="fL")
    mch: Optional[float] = Field(None, description="pg")
    mchc: Optional[float] = Field(None, description="g/dL")
    age: Optional[float] = Field(None, description="Years")
    gender: Optional[Gender] = None

    model_config = ConfigDict(extra="forbid")

    @field_validator(*NUMERIC_FIELDS, mode="after")
    @classmethod
    def drop_non_finite(cls, value: Optional[float]) -> Optional[float]:
        # NaN / inf can only be "unmeasured", never a reading
        if value is not None and not math.isfinite(value):
            return None
        return value

    def missing_core_markers(self) -> List[str]:
        return [name for name in CORE_MARKERS if getattr(self, name) is None]

    def measured_count(self) -> int:
        count = sum(1 for name in NUMERIC_FIELDS if getattr(self, name) is not None)
        return count + (1 if self.gender is not None else 0)
