# routes/files.py
from flask import Blueprint, current_app, jsonify, request

from config import UPLOADS_URL_PREFIX
from db import get_store
from uploads import MissingUpload, save_upload
from utils import now_ms

bp = Blueprint("files", __name__)

@bp.get("/api/files")
def list_files():
    current_app.logger.debug("GET /api/files invoked")
    return jsonify(get_store().list_files())

@bp.post("/api/files")
def upload_file():
    """Store one multipart file (field "file", optional "name") and register its metadata."""
    upload_dir = current_app.config["UPLOAD_DIR"]
    try:
        up = save_upload(request.files.get("file"), upload_dir, request.form.get("name"))
    except MissingUpload as e:
        return jsonify(error=str(e)), 400

    created_at = now_ms()
    file_id = get_store().insert_file(up.name, up.mime, up.size, up.filename, created_at)
    current_app.logger.info("Stored upload %s as %s (%d bytes)", up.name, up.filename, up.size)
    return jsonify(
        id=file_id,
        name=up.name,
        mime=up.mime,
        size=up.size,
        filename=up.filename,
        createdAt=created_at,
        url=f"{UPLOADS_URL_PREFIX}/{up.filename}",
    )

@bp.get("/api/files/<file_id>")
def get_file(file_id: str):
    row = get_store().get_file(file_id)
    if not row:
        return jsonify(error="not found"), 404
    return jsonify(row)

@bp.delete("/api/files/<file_id>")
def delete_file(file_id: str):
    """Delete the metadata row; the stored file is removed best-effort."""
    store = get_store()
    row = store.get_file(file_id)
    if not row:
        return jsonify(error="not found"), 404

    path = current_app.config["UPLOAD_DIR"] / row["filename"]
    try:
        path.unlink()
    except OSError as e:
        current_app.logger.warning("Could not remove %s: %s", path, e)

    store.delete_file(file_id)
    current_app.logger.info("Deleted file %s (%s)", file_id, row["filename"])
    return jsonify(success=True)
