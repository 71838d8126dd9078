"""
Error taxonomy for resume scoring.

Every failure is terminal for its request and reported as ``{"error": message}``.
"""


class ATSError(Exception):
    """Base class for resume upload, extraction and scoring failures."""

    status_code = 400
    default_message = "Error processing resume."

    def __init__(self, message: str = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class MissingFile(ATSError):
    default_message = "Resume file is required."


class UnsupportedFormat(ATSError):
    default_message = "Only PDF or DOCX files allowed."


class FileTooLarge(ATSError):
    status_code = 413
    default_message = "Resume file is too large."


class ExtractionFailure(ATSError):
    default_message = "Error processing resume."


class ValidationError(ATSError):
    """Scoring inputs failed their preconditions."""

    default_message = "Invalid scoring request."


class JobDescriptionTooShort(ValidationError):
    default_message = "Job description must be longer."


class EmptyResumeText(ValidationError):
    default_message = "No text could be read from the resume."


class EmptyTokenSet(ValidationError):
    default_message = "Job description contains no keywords."
