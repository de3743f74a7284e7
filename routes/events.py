# routes/events.py
from flask import Blueprint, current_app, jsonify, request

from db import get_store
from utils import json_object, now_ms

bp = Blueprint("events", __name__)

@bp.get("/api/events")
def list_events():
    """Return diary entries, newest date first."""
    current_app.logger.debug("GET /api/events invoked")
    return jsonify(get_store().list_events())

@bp.post("/api/events")
def create_event():
    data = json_object(request.get_json(silent=True))
    title = data.get("title")
    body = data.get("body")
    date = data.get("date")
    created_at = now_ms()
    event_id = get_store().insert_event(title, body, date, created_at)
    return jsonify(id=event_id, title=title, body=body, date=date, createdAt=created_at)
