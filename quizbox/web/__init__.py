"""Browser pages for authoring, listing and taking quizzes."""
from flask import Blueprint

web_bp = Blueprint('web', __name__)

from quizbox.web import routes  # noqa: E402,F401
