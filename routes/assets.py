# routes/assets.py
from flask import Blueprint, current_app, send_from_directory

from config import UPLOADS_URL_PREFIX

bp = Blueprint("assets", __name__)

@bp.get(f"{UPLOADS_URL_PREFIX}/<path:filename>")
def uploads(filename: str):
    return send_from_directory(current_app.config["UPLOAD_DIR"].resolve(), filename)

@bp.get("/")
@bp.get("/<path:path>")
def public(path: str = None):
    """Serve the bundled front-end; directories resolve to their index.html."""
    public_dir = current_app.config["PUBLIC_DIR"].resolve()
    path = path or "index.html"
    if (public_dir / path).is_dir():
        path = f"{path.rstrip('/')}/index.html"
    return send_from_directory(public_dir, path)
