from pydantic import BaseModel, ConfigDict, Field
from typing import List

class DiseaseInfo(BaseModel):
    name: str
    description: str
    symptoms: List[str] = []
    causes: List[str] = []
    treatments: List[str] = []
    lifestyle: List[str] = []
    medications: List[str] = []
    complications: List[str] = []
    prognosis: str

class HealthTip(BaseModel):
    disease: str
    tips: List[str]
    treatments: List[str] = []
    lifestyle_impact: List[str] = Field(default_factory=list, alias="lifestyleImpact")
    medications: List[str] = []

    model_config = ConfigDict(populate_by_name=True)
