"""
Tests for POST /api/ats/check.
"""
from app.api.routes import ats as ats_routes
from app.services.resume_parser import PDF_MIME, DOCX_MIME

JD = "Looking for a Python developer with REST API and SQL experience for backend systems."
RESUME = "Experienced backend developer skilled in Python, REST API design, and SQL databases."


def test_pdf_resume_is_scored(client, make_pdf):
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.pdf", make_pdf(RESUME), PDF_MIME)},
        data={"jobDescription": JD},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"atsScore", "matchedKeywords", "totalKeywords", "analysis", "feedback"}
    assert data["totalKeywords"] == 15
    assert 0 <= data["atsScore"] <= 98
    assert data["analysis"] in ("poor", "moderate", "great")
    assert "error" not in data


def test_docx_resume_is_scored(client, make_docx):
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.docx", make_docx(JD), DOCX_MIME)},
        data={"jobDescription": JD},
    )
    
    assert response.status_code == 200
    data = response.json()
    assert data["atsScore"] == 98
    assert data["analysis"] == "great"


def test_missing_file(client):
    response = client.post("/api/ats/check", data={"jobDescription": JD})
    
    assert response.status_code == 400
    assert response.json() == {"error": "Resume file is required."}


def test_short_job_description(client, make_pdf):
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.pdf", make_pdf(RESUME), PDF_MIME)},
        data={"jobDescription": "x" * 29},
    )
    
    assert response.status_code == 400
    assert response.json() == {"error": "Job description must be longer."}


def test_job_description_with_emoji_reaches_minimum_length(client, make_pdf):
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.pdf", make_pdf(RESUME), PDF_MIME)},
        data={"jobDescription": "x" * 28 + "\U0001F680"},
    )
    
    assert response.status_code == 200
    assert response.json()["totalKeywords"] == 2


def test_missing_job_description(client, make_pdf):
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.pdf", make_pdf(RESUME), PDF_MIME)},
    )
    
    assert response.status_code == 400
    assert response.json() == {"error": "Job description must be longer."}


def test_png_is_rejected_before_extraction(client, monkeypatch):
    def fail_extract(*args, **kwargs):
        raise AssertionError("extraction should not run")

    monkeypatch.setattr(ats_routes, "extract_text", fail_extract)
    
    response = client.post(
        "/api/ats/check",
        files={"resume": ("photo.png", b"\x89PNG\r\n\x1a\n", "image/png")},
        data={"jobDescription": JD},
    )
    
    assert response.status_code == 400
    assert response.json() == {"error": "Only PDF or DOCX files allowed."}


def test_oversized_file(client, make_pdf, monkeypatch):
    monkeypatch.setattr(ats_routes, "MAX_UPLOAD_BYTES", 16)
    
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.pdf", make_pdf(RESUME), PDF_MIME)},
        data={"jobDescription": JD},
    )
    
    assert response.status_code == 413
    assert "error" in response.json()


def test_corrupt_file(client):
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.pdf", b"not really a pdf", PDF_MIME)},
        data={"jobDescription": JD},
    )
    
    assert response.status_code == 400
    assert response.json() == {"error": "Error processing resume."}


def test_resume_without_text(client, make_pdf):
    response = client.post(
        "/api/ats/check",
        files={"resume": ("scan.pdf", make_pdf(""), PDF_MIME)},
        data={"jobDescription": JD},
    )
    
    assert response.status_code == 400
    assert response.json() == {"error": "No text could be read from the resume."}


def test_unexpected_error_is_reported_without_partial_result(client, make_pdf, monkeypatch):
    def boom(*args, **kwargs):
        raise RuntimeError("boom")

    monkeypatch.setattr(ats_routes.ats_engine, "score", boom)
    
    response = client.post(
        "/api/ats/check",
        files={"resume": ("resume.pdf", make_pdf(RESUME), PDF_MIME)},
        data={"jobDescription": JD},
    )
    
    assert response.status_code == 500
    assert response.json() == {"error": "Error processing resume."}
