"""Resume storage on local disk, served back under /uploads."""

import logging
import re
import time
from pathlib import Path

from jobboard.config import settings

logger = logging.getLogger(__name__)

UPLOAD_URL_PREFIX = "/uploads"
_UNSAFE_CHARS_RE = re.compile(r"[^A-Za-z0-9._-]")


class UploadRejected(Exception):
    def __init__(self, message: str, status_code: int = 400):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


def allowed_extensions() -> set[str]:
    return {e.strip().lower() for e in settings.allowed_resume_extensions.split(",") if e.strip()}


def max_resume_bytes() -> int:
    return settings.max_resume_upload_mb * 1024 * 1024


def check_resume(filename: str | None, size: int | None) -> None:
    """Raise UploadRejected if the file type or size is not accepted. An unknown size only checks the type."""
    ext = Path(filename or "").suffix.lower()
    if ext not in allowed_extensions():
        raise UploadRejected("Only PDF and Word documents are allowed")
    if size is not None and size > max_resume_bytes():
        raise UploadRejected(f"File too large. Max allowed is {settings.max_resume_upload_mb}MB.", status_code=413)


def read_resume(upload) -> bytes:
    """
    Read an uploaded resume after checking its name and declared size.
    At most one byte over the limit is read, so an undeclared oversize body is still rejected.
    """
    check_resume(upload.filename, getattr(upload, "size", None))
    content = upload.file.read(max_resume_bytes() + 1)
    check_resume(upload.filename, len(content))
    return content


def stored_filename(original: str) -> str:
    safe = _UNSAFE_CHARS_RE.sub("_", Path(original).name) or "resume"
    return f"{int(time.time() * 1000)}-{safe}"


def save_resume(filename: str, content: bytes) -> str:
    """Write an already checked file; return the public URL path."""
    upload_dir = Path(settings.upload_dir)
    upload_dir.mkdir(parents=True, exist_ok=True)
    name = stored_filename(filename)
    (upload_dir / name).write_bytes(content)
    logger.info("Stored resume %s (%d bytes)", name, len(content))
    return f"{UPLOAD_URL_PREFIX}/{name}"
