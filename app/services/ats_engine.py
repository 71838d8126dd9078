"""
Keyword-matching ATS scorer.

Scores a resume against a job description by the share of job description
words that also appear somewhere in the resume.
"""
import math
import re
from typing import List

from app.core.exceptions import JobDescriptionTooShort, EmptyResumeText, EmptyTokenSet
from app.schemas.ats import ScoreResult

MIN_JOB_DESCRIPTION_LENGTH = 30
MAX_REPORTED_SCORE = 98
MODERATE_THRESHOLD = 40
GREAT_THRESHOLD = 70

FEEDBACK = {
    "poor": "Poor match. Add more job-specific keywords.",
    "moderate": "Moderate match. Improve keyword usage and formatting.",
    "great": "Great match! Resume is well optimized.",
}

# ASCII word characters only: accented letters split words
_NON_WORD = re.compile(r"\W+", re.ASCII)


def tokenize(text: str) -> List[str]:
    """
    Lowercase and split on runs of non-word characters.
    
    Empty strings produced at leading/trailing separators are kept.
    """
    return _NON_WORD.split(text.lower())


def text_length(text: str) -> int:
    """Length in UTF-16 code units, so astral characters such as emoji count twice."""
    return len(text.encode("utf-16-le")) // 2


def analysis_band(raw_score: int) -> str:
    if raw_score < MODERATE_THRESHOLD:
        return "poor"
    if raw_score < GREAT_THRESHOLD:
        return "moderate"
    return "great"


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def score(resume_text: str, job_description: str) -> ScoreResult:
    """
    Score a resume against a job description.
    
    Args:
        resume_text: Plain text extracted from the resume
        job_description: Job description text, at least 30 characters
        
    Returns:
        ScoreResult with the clamped score and its analysis band
        
    Raises:
        JobDescriptionTooShort: Job description missing or under 30 characters
        EmptyResumeText: Resume text missing or empty
        EmptyTokenSet: Job description has no word characters at all
    """
    if not job_description or text_length(job_description) < MIN_JOB_DESCRIPTION_LENGTH:
        raise JobDescriptionTooShort()
    if not resume_text:
        raise EmptyResumeText()
    
    jd_tokens = tokenize(job_description)
    if not any(jd_tokens):
        raise EmptyTokenSet()
    
    resume_tokens = set(tokenize(resume_text))
    matched = sum(1 for token in jd_tokens if token in resume_tokens)
    total = len(jd_tokens)
    
    raw_score = _round_half_up(matched / total * 100)
    band = analysis_band(raw_score)
    
    return ScoreResult(
        atsScore=min(raw_score, MAX_REPORTED_SCORE),
        matchedKeywords=matched,
        totalKeywords=total,
        analysis=band,
        feedback=FEEDBACK[band],
    )
