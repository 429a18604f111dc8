from dataclasses import dataclass, field
from typing import Any, Dict, List, Protocol

from flask import render_template


@dataclass(frozen=True)
class IndexViewModel:
    """Data for the pages/index template."""
    posts: List[Any] = field(default_factory=list)
    title: str = "Welcome"

    def as_context(self) -> Dict[str, Any]:
        return {"title": self.title, "posts": self.posts}


@dataclass(frozen=True)
class AboutViewModel:
    """Data for the pages/about template."""
    title: str = "About Us"

    def as_context(self) -> Dict[str, Any]:
        return {"title": self.title}


class ViewRenderer(Protocol):
    def render(self, template_name: str, view_model) -> str:
        ...


class TemplateRenderer:
    """Render view-models through Jinja2 templates in pagesite/templates."""

    def render(self, template_name: str, view_model) -> str:
        """Render a named template.
        args:
            template_name: template path without extension, e.g. "pages/index"
            view_model: object exposing as_context()
        returns:
            Rendered HTML
        """
        return render_template(f"{template_name}.html", **view_model.as_context())
