# routes/profile.py
from flask import Blueprint, jsonify, request

from config import DEFAULT_PROFILE_USER
from db import get_store
from utils import json_object, now_ms, or_default

bp = Blueprint("profile", __name__)

@bp.post("/api/profile")
def save_profile():
    """Append a profile snapshot. Earlier rows for the same user are kept."""
    data = json_object(request.get_json(silent=True))
    user = or_default(data.get("user"), DEFAULT_PROFILE_USER)
    get_store().insert_profile(user, or_default(data.get("data"), {}), now_ms())
    return jsonify(success=True)
