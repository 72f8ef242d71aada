from flask import Flask, redirect, url_for, request, jsonify
from flask_sqlalchemy import SQLAlchemy
from dotenv import load_dotenv
from flask_migrate import Migrate
from flask_compress import Compress
import os

# Load environment variables early so config is available for blueprint creation
load_dotenv()

from quizbox.config import config

db = SQLAlchemy()
migrate = Migrate()
compress = Compress()


def create_app() -> Flask:
    """
    Application factory for the Flask app.
    Loads environment variables, configures the database,
    and registers blueprints.
    """
    # Re-initialize config to ensure latest .env values are loaded
    from quizbox.config import Config
    global config
    config = Config()

    # Validate configuration
    config.validate()

    project_root = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))

    app = Flask(
        __name__,
        template_folder=os.path.join(project_root, "templates"),
        static_folder=os.path.join(project_root, "static"),
    )

    # Load configuration from config module
    app.config["SECRET_KEY"] = config.SECRET_KEY
    db_uri = config.SQLALCHEMY_DATABASE_URI
    if config.is_mysql:
        if "?" not in db_uri:
            db_uri += "?charset=utf8mb4"
        # Database connection pooling for performance
        app.config["SQLALCHEMY_ENGINE_OPTIONS"] = {
            "pool_size": 10,
            "pool_recycle": 3600,
            "pool_pre_ping": True,
            "max_overflow": 20,
            "connect_args": {
                "connect_timeout": 5,
                "read_timeout": 10,
                "write_timeout": 10,
                "charset": "utf8mb4",
                "autocommit": False,
            }
        }
    app.config["SQLALCHEMY_DATABASE_URI"] = db_uri
    app.config["SQLALCHEMY_TRACK_MODIFICATIONS"] = config.SQLALCHEMY_TRACK_MODIFICATIONS
    app.config["SQLALCHEMY_ECHO"] = config.SQLALCHEMY_ECHO

    app.config["API_PREFIX"] = config.API_PREFIX
    app.config["API_BASE_URL"] = config.API_BASE_URL
    app.config["API_TIMEOUT_SECONDS"] = config.API_TIMEOUT_SECONDS

    # Response compression settings
    app.config["COMPRESS_MIMETYPES"] = [
        'text/html', 'text/css', 'application/json',
    ]
    app.config["COMPRESS_LEVEL"] = 6  # Balance between compression and CPU
    app.config["COMPRESS_MIN_SIZE"] = 500  # Only compress responses > 500 bytes
    app.config["SESSION_COOKIE_SECURE"] = config.SESSION_COOKIE_SECURE
    app.config["SESSION_COOKIE_HTTPONLY"] = config.SESSION_COOKIE_HTTPONLY
    app.config["SESSION_COOKIE_SAMESITE"] = config.SESSION_COOKIE_SAMESITE

    # Initialize extensions
    db.init_app(app)
    migrate.init_app(app, db)
    compress.init_app(app)

    @app.after_request
    def add_performance_headers(response):
        """Add caching headers to responses."""
        if request.endpoint == 'static':
            response.cache_control.max_age = 3600
            response.cache_control.public = True
        # Quiz pages carry per-session state, never cache them
        elif response.content_type and 'text/html' in response.content_type:
            response.cache_control.no_cache = True
            response.cache_control.no_store = True
            response.cache_control.must_revalidate = True
        return response

    @app.route("/")
    def index():
        return redirect(url_for('web.quiz_list'))

    # Register blueprints
    from quizbox.api import api_bp
    app.register_blueprint(api_bp, url_prefix=config.API_PREFIX)

    from quizbox.web import web_bp
    app.register_blueprint(web_bp)

    def is_api_path(path: str) -> bool:
        return path == config.API_PREFIX or path.startswith(config.API_PREFIX + '/')

    # Custom error handler for API routes to return JSON instead of HTML
    @app.errorhandler(404)
    def handle_404(e):
        """Handle 404 errors - return JSON for API routes, HTML for others."""
        path = request.path
        method = request.method
        app.logger.warning(f"404 error: {method} {path}")
        if is_api_path(path):
            return jsonify({
                'success': False,
                'error': f'Route not found: {method} {path}',
                'path': path,
                'method': method
            }), 404
        return f"Page not found: {path}", 404

    @app.errorhandler(405)
    def handle_405(e):
        """Handle 405 Method Not Allowed - return JSON for API routes."""
        path = request.path
        method = request.method
        app.logger.warning(f"405 error: {method} {path}")
        if is_api_path(path):
            return jsonify({
                'success': False,
                'error': f'Method not allowed: {method} {path}',
                'path': path,
                'method': method
            }), 405
        return e

    # Create tables if they do not exist
    with app.app_context():
        from quizbox.quiz.models import Quiz, Question, Option  # noqa: F401
        db.create_all()

    return app
