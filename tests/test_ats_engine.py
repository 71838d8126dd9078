"""
Unit tests for the keyword-matching ATS scorer.
"""
import pytest

from app.core.exceptions import (
    ValidationError,
    JobDescriptionTooShort,
    EmptyResumeText,
    EmptyTokenSet,
)
from app.services.ats_engine import score, tokenize, analysis_band, FEEDBACK


BACKEND_JD = "Looking for a Python developer with REST API and SQL experience for backend systems."
BACKEND_RESUME = "Experienced backend developer skilled in Python, REST API design, and SQL databases."


def test_tokenize_lowercases_and_keeps_empty_tokens():
    assert tokenize("Hello, World!") == ["hello", "world", ""]
    assert tokenize("...Leading") == ["", "leading"]


def test_tokenize_keeps_digits_and_underscores():
    assert tokenize("python3 snake_case C++") == ["python3", "snake_case", "c", ""]


def test_tokenize_splits_on_non_ascii_letters():
    assert tokenize("Résumé naïve") == ["r", "sum", "na", "ve"]


def test_accented_words_match_only_their_ascii_pieces():
    result = score("cafe", "Barista wanted for our café in the city centre")
    
    assert result.matchedKeywords == 0
    assert "caf" in tokenize("café")


def test_backend_scenario():
    """
    JD tokens (15): looking for a python developer with rest api and sql
    experience for backend systems "" -> 8 present in the resume
    (python developer rest api and sql backend and the trailing "").
    """
    result = score(BACKEND_RESUME, BACKEND_JD)
    
    assert result.totalKeywords == 15
    assert result.matchedKeywords == 8
    assert result.atsScore == 53
    assert result.analysis == "moderate"
    assert result.feedback == FEEDBACK["moderate"]


def test_full_overlap_is_clamped_to_98():
    result = score(BACKEND_JD, BACKEND_JD)
    
    assert result.matchedKeywords == result.totalKeywords
    assert result.atsScore == 98
    assert result.analysis == "great"


def test_no_overlap_scores_zero():
    result = score("Chef cook baker", "Kubernetes Terraform Ansible Jenkins pipelines")
    
    assert result.matchedKeywords == 0
    assert result.totalKeywords == 5
    assert result.atsScore == 0
    assert result.analysis == "poor"


def test_scoring_is_case_insensitive():
    jd = "We need Data Science skills and machine learning experience"
    
    assert score("Data Science", jd) == score("data science", jd)
    assert score("DATA SCIENCE", jd).matchedKeywords == 2


def test_duplicate_jd_tokens_each_count():
    result = score("python", "python python python java developer position")
    
    assert result.totalKeywords == 6
    assert result.matchedKeywords == 3
    assert result.atsScore == 50


def test_score_of_exactly_40_is_moderate():
    result = score("alpha bravo", "alpha bravo charlie delta echoes")
    
    assert result.atsScore == 40
    assert result.analysis == "moderate"


def test_score_of_exactly_70_is_great():
    result = score(
        "one two three four five six seven",
        "one two three four five six seven eight nine ten",
    )
    
    assert result.atsScore == 70
    assert result.analysis == "great"


def test_half_percent_rounds_up():
    jd = "alpha bravo charlie delta echoes foxtrot golfing hotels"
    
    assert score("alpha", jd).atsScore == 13  # 12.5
    assert score("alpha bravo charlie", jd).atsScore == 38  # 37.5


@pytest.mark.parametrize("raw, band", [
    (0, "poor"),
    (39, "poor"),
    (40, "moderate"),
    (69, "moderate"),
    (70, "great"),
    (100, "great"),
])
def test_analysis_band_thresholds(raw, band):
    assert analysis_band(raw) == band


def test_score_always_within_reported_range():
    jd = "Senior Python engineer, SQL, REST APIs, Docker, Kubernetes and AWS."
    resumes = [
        "x",
        "Python",
        "python sql rest apis docker",
        jd,
        jd + " plus many other words that do not matter at all",
    ]
    for resume in resumes:
        result = score(resume, jd)
        assert 0 <= result.atsScore <= 98
        assert 0 <= result.matchedKeywords <= result.totalKeywords


def test_job_description_of_29_chars_is_rejected():
    with pytest.raises(JobDescriptionTooShort):
        score("python developer", "x" * 29)


def test_job_description_length_counts_utf16_units():
    # 28 letters + one rocket emoji: 29 code points, 30 UTF-16 units
    result = score("a" * 28, "a" * 28 + "\U0001F680")
    
    assert result.totalKeywords == 2
    assert result.matchedKeywords == 1
    assert result.atsScore == 50


def test_job_description_of_29_utf16_units_is_rejected():
    with pytest.raises(JobDescriptionTooShort):
        score("a" * 28, "a" * 28 + "\u00e9")


def test_job_description_of_30_chars_is_accepted():
    result = score("a" * 30, "a" * 30)
    
    assert result.totalKeywords == 1
    assert result.atsScore == 98


@pytest.mark.parametrize("jd", [None, ""])
def test_missing_job_description_is_rejected(jd):
    with pytest.raises(JobDescriptionTooShort):
        score("python developer", jd)


def test_empty_resume_text_is_rejected():
    with pytest.raises(EmptyResumeText):
        score("", BACKEND_JD)


def test_whitespace_resume_text_is_still_scored():
    """Only the trailing empty JD token can match a resume of pure whitespace."""
    result = score("   \n\t ", BACKEND_JD)
    
    assert result.matchedKeywords == 1
    assert result.totalKeywords == 15
    assert result.atsScore == 7
    assert result.analysis == "poor"


def test_punctuation_only_job_description_is_rejected():
    with pytest.raises(EmptyTokenSet):
        score("python developer", "!!!! ---- .... ,,,, ;;;; ???? ....")


def test_precondition_errors_share_validation_base():
    for error in (JobDescriptionTooShort, EmptyResumeText, EmptyTokenSet):
        assert issubclass(error, ValidationError)
