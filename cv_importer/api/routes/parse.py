from fastapi import APIRouter, UploadFile, File, HTTPException

from cv_importer.core.config import get_config
from cv_importer.core.schemas import StructuredRecord
from cv_importer.core.resume_parser import parse_resume_docx, parse_resume_pdf, parse_resume_text

router = APIRouter(tags=["parse"])

DOCX_CONTENT_TYPE = "application/vnd.openxmlformats-officedocument.wordprocessingml.document"


@router.post(
    "/parse",
    response_model=StructuredRecord,
    summary="Import Resume",
    description="Turn a resume file (PDF, DOCX or TXT) into a structured CV record ready to seed the editor.",
    responses={
        200: {
            "description": "Successfully parsed resume",
            "content": {
                "application/json": {
                    "example": {
                        "profile": {
                            "fullName": "Huynh Quoc Bao",
                            "position": "Backend Developer",
                            "email": "bao@example.com",
                            "phone": "0912345678",
                            "location": "Ho Chi Minh City",
                            "linkedin": "",
                            "github": "https://github.com/bao",
                            "website": "",
                            "summary": "<p>Backend engineer focused on Go services.</p>"
                        },
                        "experience": [
                            {
                                "id": "5f1c1a2e-6f0a-4d8e-9a51-0c3f1f2b9e11",
                                "company": "Bach Khoa Technology",
                                "role": "Backend Developer",
                                "location": "",
                                "startDate": "06/2024",
                                "endDate": "",
                                "isCurrent": True,
                                "description": "<ul><li>Built the payment service</li></ul>"
                            }
                        ],
                        "education": [],
                        "skills": [],
                        "projects": [],
                        "certifications": [],
                        "settings": {
                            "primaryColor": "#2563eb",
                            "fontFamily": "font-sans",
                            "margin": "p-10",
                            "language": "vi",
                            "moduleOrder": ["summary", "experience", "education", "projects", "skills", "certifications"]
                        }
                    }
                }
            }
        },
        400: {"description": "Empty file uploaded"},
        413: {"description": "File larger than the configured upload limit"},
        415: {"description": "Unsupported file format"},
        422: {"description": "File could not be read as a resume"}
    }
)
async def parse_resume(
    file: UploadFile = File(..., description="Resume file (PDF, DOCX or TXT format)")
):
    """
    Parse a resume file into a structured CV record.

    **Supported formats:**
    - PDF (.pdf) - Text-layer extraction only, OCR not supported
    - DOCX (.docx)
    - TXT (.txt, .md)

    Every section is best-effort: fields that cannot be recognised come back empty.
    """
    raw = await file.read()
    if not raw:
        raise HTTPException(status_code=400, detail="Empty file uploaded.")
    if len(raw) > get_config().max_upload_bytes:
        raise HTTPException(status_code=413, detail="File is larger than the upload limit.")

    filename = (file.filename or "").lower()
    content_type = (file.content_type or "").lower()

    if filename.endswith(".pdf") or content_type == "application/pdf":
        record = parse_resume_pdf(raw)
    elif filename.endswith(".docx") or content_type == DOCX_CONTENT_TYPE:
        record = parse_resume_docx(raw)
    elif content_type in {"text/plain", "text/markdown"} or filename.endswith((".txt", ".md")):
        record = parse_resume_text(raw.decode("utf-8", errors="replace"))
    else:
        raise HTTPException(status_code=415, detail=f"Unsupported content type for now: {file.content_type}")

    if record is None:
        raise HTTPException(status_code=422, detail="Could not read this file as a resume.")
    return record
