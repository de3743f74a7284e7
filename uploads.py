# uploads.py
from dataclasses import dataclass
from pathlib import Path

from config import DEFAULT_MIME
from utils import now_ms, sanitize_filename, stored_filename


class MissingUpload(Exception):
    """Raised when a request carries no file part."""


@dataclass
class UploadedFile:
    name: str
    mime: str
    size: int
    filename: str


def save_upload(file, upload_dir: Path, display_name=None) -> UploadedFile:
    """Write a werkzeug FileStorage into upload_dir under a unique stored filename.

    The target is created exclusively; if another upload already took the name
    (same original name within the same millisecond) the timestamp is bumped.
    """
    if file is None or not file.filename:
        raise MissingUpload("No file uploaded")

    ts = now_ms()
    while True:
        filename = stored_filename(file.filename, ts)
        path = upload_dir / filename
        try:
            out = open(path, "xb")
        except FileExistsError:
            ts += 1
            continue
        break

    with out:
        try:
            file.save(out)
        except OSError:
            out.close()
            path.unlink(missing_ok=True)
            raise
    size = path.stat().st_size

    return UploadedFile(
        name=display_name or sanitize_filename(file.filename),
        mime=file.mimetype or DEFAULT_MIME,
        size=size,
        filename=filename,
    )
