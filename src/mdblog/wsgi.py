"""WSGI entry point, e.g. `gunicorn mdblog.wsgi:app`"""

from mdblog.config import load_config
from mdblog.logger import setup_logger
from mdblog.web.app import create_app


settings = load_config()
setup_logger(settings.log_level)
app = create_app(settings)
