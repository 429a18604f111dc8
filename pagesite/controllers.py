from typing import Protocol, runtime_checkable

from werkzeug.exceptions import NotFound

from .repository import PostRepository
from .views import AboutViewModel, IndexViewModel, ViewRenderer


@runtime_checkable
class RouteHandler(Protocol):
    def handle(self, request):
        ...


class PageController(RouteHandler):
    """Static pages and the post listing.

    Built once per request with its collaborators injected, then discarded.
    """

    ACTIONS = ("index", "about")

    def __init__(self, posts: PostRepository, renderer: ViewRenderer):
        self.posts = posts
        self.renderer = renderer

    def handle(self, request):
        """Dispatch a request to the action named by its endpoint.
        args:
            request: object with an ``endpoint`` such as "main.index"
        returns:
            Rendered output of the action
        """
        action = (request.endpoint or "").rpartition(".")[2]
        if action not in self.ACTIONS:
            raise NotFound()
        return getattr(self, action)()

    def index(self):
        posts = self.posts.get_posts()
        return self.renderer.render("pages/index", IndexViewModel(posts=posts, title="Welcome"))

    def about(self):
        return self.renderer.render("pages/about", AboutViewModel(title="About Us"))
