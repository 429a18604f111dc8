from flask import Blueprint, request

from ..controllers import PageController, RouteHandler
from ..repository import SqlPostRepository
from ..views import TemplateRenderer

bp = Blueprint("main", __name__)


def _controller() -> RouteHandler:
    return PageController(SqlPostRepository(), TemplateRenderer())


@bp.route("/")
def index():
    """
    Landing page listing posts.
    args:
        None
    returns:
        Rendered template
    """
    return _controller().handle(request)


@bp.route("/about")
def about():
    return _controller().handle(request)
