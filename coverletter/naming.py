from __future__ import annotations

import datetime as dt
import re


def artifact_filename(full_name: str, today: dt.date, prefix: str = "cover-letter") -> str:
    """Filesystem-safe PDF name, e.g. ``cover-letter-ada-lovelace-2026-10-19.pdf``."""
    slug = re.sub(r"[^a-zA-Z0-9\s-]", "", full_name.strip())
    slug = re.sub(r"\s+", "-", slug).lower()
    return f"{prefix}-{slug}-{today.isoformat()}.pdf"
