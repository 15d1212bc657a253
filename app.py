import os
import logging
from datetime import datetime
from uuid import uuid4

from dotenv import load_dotenv

# Load environment variables from .env file
load_dotenv()

# --- Flask specific imports ---
from flask import Flask, request, g
from flask_cors import CORS

# --- Import our configuration and the domain services ---
from config import Config
from playlist_manager.auth import init_auth, FlaskLoginSessions
from playlist_manager.database import JsonUserStore
from playlist_manager.domain import (
    AuthService,
    PlaylistService,
    UploadHandler,
    YouTubeSearchService,
)
from playlist_manager.interfaces.http import register_error_handlers
from playlist_manager.interfaces.http.routes import (
    auth_bp,
    health_bp,
    playlist_bp,
    upload_bp,
    youtube_bp,
)
from playlist_manager.interfaces.http.routes.uploads import register_upload_serving
from playlist_manager.observability import configure_structured_logging, metrics_blueprint
from playlist_manager.settings import load_app_settings


logger = logging.getLogger(__name__)


def configure_logging(log_dir: str) -> str:
    """
    Configure root logging with:
      - FileHandler (INFO+) to a new file per run: log-YYYY-MM-DD-HH-MM-SS
      - StreamHandler (WARNING+) to console when ENABLE_CONSOLE_LOGS is set
      - Werkzeug/Flask loggers routed to root (no extra console spam)

    Returns the path to the created log file.
    """
    os.makedirs(log_dir, exist_ok=True)

    timestamp = datetime.now().strftime("%Y-%m-%d-%H-%M-%S")
    log_path = os.path.join(log_dir, f"log-{timestamp}")

    root = logging.getLogger()
    root.setLevel(logging.INFO)

    # Preserve structured handlers; remove existing FileHandlers to avoid duplicates
    root.handlers = [h for h in root.handlers if not isinstance(h, logging.FileHandler)]

    formatter = logging.Formatter(
        fmt='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    file_handler = logging.FileHandler(log_path, encoding='utf-8')
    file_handler.setLevel(logging.INFO)
    file_handler.setFormatter(formatter)
    root.addHandler(file_handler)

    if Config.ENABLE_CONSOLE_LOGS:
        console_handler = logging.StreamHandler()
        console_handler.setLevel(logging.WARNING)
        console_handler.setFormatter(formatter)
        root.addHandler(console_handler)

    for name in ("werkzeug", "flask.app"):
        _l = logging.getLogger(name)
        _l.setLevel(logging.INFO)
        _l.handlers = []
        _l.propagate = True

    return log_path


def create_app(config_overrides=None):
    # JSON API only; uploads get their own static route below
    app = Flask(__name__, static_folder=None)
    app.config.from_object(Config)
    if config_overrides:
        app.config.update(config_overrides)
    if 'MAX_CONTENT_LENGTH' not in (config_overrides or {}):
        app.config['MAX_CONTENT_LENGTH'] = int(app.config['MAX_UPLOAD_MB']) * 1024 * 1024
    configure_structured_logging(app)

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get('X-Request-ID') or uuid4().hex

    @app.after_request
    def _inject_request_id(response):
        if getattr(g, 'request_id', None):
            response.headers.setdefault('X-Request-ID', g.request_id)
        return response

    settings = load_app_settings(app.config)
    allowed_origins = sorted({
        origin.strip()
        for origin in settings.cors_allowed_origins
        if origin and origin.strip() and origin.strip() != "*"
    })
    CORS(
        app,
        resources={r"/api/*": {"origins": allowed_origins}},
        supports_credentials=True,
    )

    # --- Storage and domain services, wired at the app boundary ---
    user_store = JsonUserStore(
        settings.users_db_path,
        serialize_writes=settings.store_serialize_writes,
    )
    user_store.ensure_document()

    upload_handler = UploadHandler(
        uploads_dir=settings.uploads_dir,
        url_prefix=settings.uploads_url_prefix,
    )
    upload_handler.ensure_directory()

    if not settings.youtube_api_key:
        app.logger.warning("YOUTUBE_API_KEY not set; /api/youtube/search will fail until configured.")

    app.extensions['settings'] = settings
    app.extensions['user_store'] = user_store
    app.extensions['auth_service'] = AuthService(user_store, FlaskLoginSessions())
    app.extensions['playlist_service'] = PlaylistService(user_store)
    app.extensions['upload_handler'] = upload_handler
    app.extensions['youtube_search'] = YouTubeSearchService(
        api_key=settings.youtube_api_key,
        api_base=settings.youtube_api_base,
        timeout=settings.youtube_timeout_seconds,
        max_results=settings.youtube_max_results,
    )

    init_auth(app)
    register_error_handlers(app)

    # --- Register Blueprints ---
    app.register_blueprint(auth_bp)
    app.register_blueprint(playlist_bp)
    app.register_blueprint(upload_bp)
    app.register_blueprint(youtube_bp)
    app.register_blueprint(health_bp)
    app.register_blueprint(metrics_blueprint)
    register_upload_serving(app, settings.uploads_url_prefix)

    app.logger.info(
        "Playlist manager ready: store=%s uploads=%s serialize_writes=%s",
        user_store.path, upload_handler.uploads_dir, settings.store_serialize_writes,
    )
    return app


if __name__ == '__main__':
    # Configure logging:
    # - In debug with reloader: only in the child process to avoid duplicate files
    # - In non-debug: always configure here
    debug_mode = bool(Config.DEBUG)
    log_dir = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'log')
    if not debug_mode or os.environ.get('WERKZEUG_RUN_MAIN') == 'true':
        log_file_path = configure_logging(log_dir)
        logger.info("File logging initialized at %s", log_file_path)

    if not Config.YOUTUBE_API_KEY:
        logger.warning("YouTube API key not found in environment variables.")
        logger.warning("Please set YOUTUBE_API_KEY to enable video search.")

    application = create_app()
    application.run(host='0.0.0.0', port=Config.PORT, debug=debug_mode)
