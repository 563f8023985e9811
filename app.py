"""
Cover Letter Generator: FastAPI Backend
Generates a cover letter through an OpenAI-compatible model and lays it out
as a single-page PDF.
"""
import datetime as dt
import io
import logging

from fastapi import FastAPI
from fastapi.responses import JSONResponse, StreamingResponse
from pydantic import BaseModel

from coverletter import provider
from coverletter.config import load_settings
from coverletter.errors import GenerationError, LayoutPreconditionError
from coverletter.header import HeaderRecord
from coverletter.layout import layout_letter
from coverletter.naming import artifact_filename
from coverletter.prompt import build_prompt
from coverletter.render import MEDIA_TYPE, count_pages, render_pdf
from coverletter.session import REQUIRED_FIELDS_MESSAGE

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)

settings = load_settings()

# ── FastAPI App ───────────────────────────────────────────────────────────────
app = FastAPI(title="Cover Letter Generator")

# ── Request Models ────────────────────────────────────────────────────────────
class PromptRequest(BaseModel):
    prompt: str = ""

class HeaderFields(BaseModel):
    full_name: str = ""
    location: str = ""
    phone: str = ""
    email: str = ""
    linkedin: str = ""
    website: str = ""

    def record(self) -> HeaderRecord:
        return HeaderRecord(**self.model_dump(include=set(HeaderFields.model_fields)))

class CoverLetterRequest(HeaderFields):
    job_description: str = ""
    resume: str = ""

class PdfRequest(HeaderFields):
    text: str = ""

# ── Generation Proxy ──────────────────────────────────────────────────────────
@app.post("/api/generate-cover-letter")
def generate_cover_letter(req: PromptRequest):
    """Forward a prompt to the model and relay its text."""
    if not req.prompt.strip():
        return JSONResponse({"error": "Missing required field: prompt"}, status_code=400)
    try:
        text = provider.complete(req.prompt, settings)
    except provider.ProviderNotConfigured as e:
        logger.error("%s", e.message)
        return JSONResponse({"error": e.message}, status_code=500)
    except Exception as e:
        logger.exception("Error in generate-cover-letter")
        return JSONResponse(
            {"error": "Failed to generate cover letter", "details": str(e)},
            status_code=500,
        )
    return {"text": text}

# ── Endpoints ─────────────────────────────────────────────────────────────────
@app.post("/cover-letter")
def cover_letter(req: CoverLetterRequest):
    """Build the prompt from the form and return the generated letter."""
    if not (req.full_name.strip() and req.email.strip() and req.job_description.strip()):
        return JSONResponse({"error": REQUIRED_FIELDS_MESSAGE}, status_code=400)

    prompt = build_prompt(req.full_name, req.job_description, req.resume, req.website)
    try:
        text = provider.complete(prompt, settings)
    except GenerationError as e:
        return JSONResponse({"error": e.message}, status_code=502)
    except Exception as e:
        logger.exception("Error generating cover letter")
        return JSONResponse({"error": str(e)}, status_code=500)
    return JSONResponse({"text": text, "prompt_chars": len(prompt)})


@app.post("/pdf")
def download_pdf(req: PdfRequest):
    """Lay out the letter on one page and return it as a PDF attachment."""
    today = dt.date.today()
    header = req.record()
    try:
        result = layout_letter(header, req.text, today=today)
    except LayoutPreconditionError as e:
        return JSONResponse({"error": str(e)}, status_code=400)

    try:
        pdf_bytes = render_pdf(result, title=f"Cover Letter - {header.full_name}")
        pages = count_pages(pdf_bytes)
    except Exception as e:
        logger.exception("Error generating PDF")
        return JSONResponse({"error": str(e)}, status_code=500)

    filename = artifact_filename(header.full_name, today)
    return StreamingResponse(
        io.BytesIO(pdf_bytes),
        media_type=MEDIA_TYPE,
        headers={
            "Content-Disposition": f'attachment; filename="{filename}"',
            "X-Pages": str(pages),
            "X-Truncated": "true" if result.truncated else "false",
        }
    )


@app.get("/health")
def health():
    return {"status": "ok", "model": settings.model}
