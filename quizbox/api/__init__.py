"""REST API blueprint for quizzes. Mounted at config.API_PREFIX."""
from flask import Blueprint

api_bp = Blueprint('api', __name__)

from quizbox.api import routes  # noqa: E402,F401
