from __future__ import annotations

from datetime import datetime
from typing import List, Literal

from pydantic import BaseModel, Field

ClassificationMethod = Literal["huggingface", "rule-based", "fallback"]


class EmotionScore(BaseModel):
    label: str
    score: float


class EmotionResult(BaseModel):
    primary: str
    confidence: float = Field(ge=0.0, le=1.0)
    all: List[EmotionScore] = Field(default_factory=list)
    method: ClassificationMethod


class ActivityRecommendation(BaseModel):
    id: str
    priority: int


class CompanionReply(BaseModel):
    message: str
    emotion: str
    confidence: float
    activities: List[ActivityRecommendation]
    timestamp: datetime


class AnalysisResult(BaseModel):
    success: bool
    message: str
    emotion: str
    confidence: float = 0.0
    activities: List[ActivityRecommendation] = Field(default_factory=list)
    intents: List[str] = Field(default_factory=list)
    method: ClassificationMethod
    timestamp: datetime


__all__ = [
    "ClassificationMethod",
    "EmotionScore",
    "EmotionResult",
    "ActivityRecommendation",
    "CompanionReply",
    "AnalysisResult",
]
