"""
Pydantic schemas for the ATS resume checker.
"""
from typing import Literal
from pydantic import BaseModel, Field


class ScoreResult(BaseModel):
    """Keyword overlap between a resume and a job description."""
    atsScore: int = Field(..., ge=0, le=98, description="Match percentage, capped at 98")
    matchedKeywords: int = Field(..., ge=0, description="Job description tokens found in the resume")
    totalKeywords: int = Field(..., ge=0, description="Job description token count, duplicates included")
    analysis: Literal["poor", "moderate", "great"] = Field(..., description="Qualitative match band")
    feedback: str = Field(..., description="Human-readable advice for the band")

    class Config:
        json_schema_extra = {
            "example": {
                "atsScore": 62,
                "matchedKeywords": 10,
                "totalKeywords": 16,
                "analysis": "moderate",
                "feedback": "Moderate match. Improve keyword usage and formatting."
            }
        }


class ATSErrorResponse(BaseModel):
    """Payload returned when a scoring request is rejected."""
    error: str = Field(..., description="Why the request was rejected")
