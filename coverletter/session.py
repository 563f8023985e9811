"""
Form state for one user: inputs, the generated letter and busy flags.
"""

from __future__ import annotations

import datetime as dt
import logging
from dataclasses import dataclass
from typing import Optional

from coverletter.errors import BusyError, GenerationError, LayoutPreconditionError, ValidationError
from coverletter.header import HeaderRecord
from coverletter.layout import layout_letter
from coverletter.naming import artifact_filename
from coverletter.prompt import build_prompt
from coverletter.render import MEDIA_TYPE, render_pdf

logger = logging.getLogger(__name__)

REQUIRED_FIELDS_MESSAGE = "Please fill in your Full Name, Email, and the Job Description."


@dataclass(frozen=True)
class Artifact:
    filename: str
    content: bytes
    media_type: str = MEDIA_TYPE
    truncated: bool = False


class CoverLetterSession:
    def __init__(self, client):
        self.client = client

        self.full_name = ""
        self.location = ""
        self.phone = ""
        self.email = ""
        self.linkedin = ""
        self.website = ""
        self.resume = ""
        self.job_description = ""

        self.cover_letter = ""
        self.error: Optional[str] = None
        self.is_loading = False
        self.is_downloading_pdf = False

    @property
    def is_form_valid(self) -> bool:
        return bool(self.full_name.strip() and self.email.strip() and self.job_description.strip())

    @property
    def is_busy(self) -> bool:
        return self.is_loading or self.is_downloading_pdf

    def header(self) -> HeaderRecord:
        return HeaderRecord(
            full_name=self.full_name,
            location=self.location,
            phone=self.phone,
            email=self.email,
            linkedin=self.linkedin,
            website=self.website,
        )

    def generate_cover_letter(self) -> str:
        if self.is_busy:
            raise BusyError("A request is already in progress.")
        if not self.is_form_valid:
            self.error = REQUIRED_FIELDS_MESSAGE
            raise ValidationError(REQUIRED_FIELDS_MESSAGE)

        self.is_loading = True
        self.error = None
        self.cover_letter = ""
        try:
            prompt = build_prompt(self.full_name, self.job_description, self.resume, self.website)
            self.cover_letter = self.client.generate(prompt)
            return self.cover_letter
        except GenerationError as e:
            logger.error("Error generating cover letter: %s", e.message)
            self.error = e.message
            raise
        finally:
            self.is_loading = False

    def copy_text(self) -> str:
        """Letter text followed by the applicant's name, as copied to the clipboard."""
        if not self.cover_letter:
            return ""
        return f"{self.cover_letter.strip()}\n\n{self.full_name}"

    def download_pdf(self, today: Optional[dt.date] = None) -> Artifact:
        if self.is_busy:
            raise BusyError("A request is already in progress.")
        if not self.cover_letter or not self.full_name.strip():
            self.error = "Cover letter content or full name is missing for PDF generation."
            raise LayoutPreconditionError(self.error)

        self.is_downloading_pdf = True
        self.error = None
        try:
            today = today or dt.date.today()
            header = self.header()
            result = layout_letter(header, self.cover_letter, today=today)
            return Artifact(
                filename=artifact_filename(header.full_name, today),
                content=render_pdf(result, title=f"Cover Letter - {header.full_name}"),
                truncated=result.truncated,
            )
        finally:
            self.is_downloading_pdf = False
