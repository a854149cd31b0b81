"""Flask application factory and error handlers"""

from flask import Flask, render_template, request
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from mdblog.config import Settings, load_config
from mdblog.core.errors import BlogError, PostNotFound
from mdblog.core.utils.dates import EPOCH
from mdblog.logger import logger
from mdblog.web.routes import bp


NOT_FOUND_TITLE = "404 - Not Found"
NOT_FOUND_MESSAGE = "The page you are looking for does not exist."
SERVER_ERROR_BODY = "500: Internal Server Error"


def _requested_url() -> str:
    """Path plus query string, as the client sent it."""
    return request.full_path.rstrip("?")


def _not_found(e):
    return render_template(
        "error.html",
        title=NOT_FOUND_TITLE,
        message=NOT_FOUND_MESSAGE,
        url=_requested_url(),
    ), 404


def _server_error(e):
    logger.error("Error rendering %s: %s", request.path, e, exc_info=e)
    return SERVER_ERROR_BODY, 500


def _http_error(e: HTTPException):
    """Pass other HTTP errors through unchanged."""
    return e


def create_app(settings: Settings = None) -> Flask:
    """Build the blog app; settings default to load_config()."""
    app = Flask(__name__)
    app.config["SETTINGS"] = settings or load_config()
    app.config["DEBUG"] = app.config["SETTINGS"].debug

    @app.context_processor
    def site_context():
        return {"app_name": app.config["SETTINGS"].app_name, "epoch": EPOCH}

    app.register_blueprint(bp)
    app.register_error_handler(NotFound, _not_found)
    app.register_error_handler(MethodNotAllowed, _not_found)
    app.register_error_handler(PostNotFound, _not_found)
    app.register_error_handler(HTTPException, _http_error)
    app.register_error_handler(BlogError, _server_error)
    app.register_error_handler(Exception, _server_error)
    return app
