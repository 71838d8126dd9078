"""
ATS resume checker endpoint.
"""
import logging
from typing import Optional

from fastapi import APIRouter, UploadFile, File, Form, status
from fastapi.responses import JSONResponse
from starlette.concurrency import run_in_threadpool

from app.core.config import MAX_UPLOAD_BYTES
from app.core.exceptions import (
    ATSError,
    MissingFile,
    UnsupportedFormat,
    FileTooLarge,
    JobDescriptionTooShort,
    EmptyResumeText,
)
from app.schemas.ats import ScoreResult, ATSErrorResponse
from app.services import ats_engine
from app.services.resume_parser import extract_text, is_supported

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/ats", tags=["ATS"])


@router.post(
    "/check",
    response_model=ScoreResult,
    responses={
        400: {"model": ATSErrorResponse},
        413: {"model": ATSErrorResponse},
        500: {"model": ATSErrorResponse},
    },
)
async def check_resume(
    resume: Optional[UploadFile] = File(None, description="PDF or DOCX resume"),
    jobDescription: Optional[str] = Form(None, description="Job description, at least 30 characters"),
):
    """
    Score an uploaded resume against a job description.
    
    Preconditions are checked in order and the first failure is returned as
    ``{"error": ...}``; nothing is extracted until the cheap checks pass.
    """
    try:
        if resume is None or not resume.filename:
            raise MissingFile()
        
        if not jobDescription or ats_engine.text_length(jobDescription) < ats_engine.MIN_JOB_DESCRIPTION_LENGTH:
            raise JobDescriptionTooShort()
        
        if not is_supported(resume.content_type):
            raise UnsupportedFormat()
        
        content = await resume.read(MAX_UPLOAD_BYTES + 1)
        if len(content) > MAX_UPLOAD_BYTES:
            raise FileTooLarge()
        
        resume_text = await run_in_threadpool(extract_text, content, resume.content_type)
        if not resume_text.strip():
            raise EmptyResumeText()
        
        result = ats_engine.score(resume_text, jobDescription)
        
    except ATSError as e:
        logger.info(f"ATS check rejected: {type(e).__name__}: {e.message}")
        return JSONResponse(status_code=e.status_code, content={"error": e.message})
    except Exception as e:
        logger.error(f"ATS check failed: {e}", exc_info=True)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Error processing resume."},
        )
    
    logger.info(
        f"ATS check scored: score={result.atsScore}, matched={result.matchedKeywords}/"
        f"{result.totalKeywords}, analysis={result.analysis}"
    )
    return result
