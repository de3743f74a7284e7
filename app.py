# app.py
import logging
import sqlite3
from pathlib import Path

from flask import Flask, jsonify
from flask_cors import CORS
from werkzeug.exceptions import NotFound

from config import APP_TITLE, Config
from db import Store
from routes import register_routes

def create_app(config=None, store=None):
    """Build the Flask app. `config` overrides Config values; `store` replaces the SQLite handle."""
    # bundled front-end is served by the assets blueprint instead
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if config:
        app.config.update(config)
    for key in ("UPLOAD_DIR", "PUBLIC_DIR", "DB_PATH"):
        app.config[key] = Path(app.config[key])

    logging.basicConfig(level=app.config["LOG_LEVEL"],
                        format="%(asctime)s %(levelname)s %(name)s - %(message)s")
    app.logger.setLevel(app.config["LOG_LEVEL"])

    app.config["UPLOAD_DIR"].mkdir(parents=True, exist_ok=True)
    app.config["DB_PATH"].parent.mkdir(parents=True, exist_ok=True)

    if store is None:
        store = Store(app.config["DB_PATH"])
        # a failure here aborts startup
        store.init()
    app.extensions["store"] = store

    CORS(app)
    register_error_handlers(app)
    register_routes(app)
    app.logger.debug("Application created and configured")
    return app

def register_error_handlers(app):
    @app.errorhandler(NotFound)
    def not_found(e):
        return jsonify(error="not found"), 404

    @app.errorhandler(sqlite3.Error)
    @app.errorhandler(OSError)
    def server_error(e):
        app.logger.exception("Request failed")
        return jsonify(error=str(e)), 500

if __name__ == "__main__":
    app = create_app()
    host = app.config["HOST"]
    port = app.config["PORT"]
    app.logger.info("Starting %s on http://%s:%s", APP_TITLE, host, port)
    app.run(host=host, port=port, threaded=True)
