# routes/__init__.py
from .files import bp as files_bp
from .events import bp as events_bp
from .profile import bp as profile_bp
from .assets import bp as assets_bp

def register_routes(app):
    app.register_blueprint(files_bp)
    app.register_blueprint(events_bp)
    app.register_blueprint(profile_bp)
    # catch-all static routes last
    app.register_blueprint(assets_bp)
