from typing import List, Protocol

from flask import current_app

from .models import Post


class PostRepository(Protocol):
    """Read access to persisted posts."""

    def get_posts(self) -> List[Post]:
        ...


class SqlPostRepository:
    """PostRepository backed by Flask-SQLAlchemy."""

    def get_posts(self) -> List[Post]:
        """Fetch every post, newest first.
        args:
            None
        returns:
            List of Post rows, possibly empty, never None.
        """
        rows = (
            Post.query
            .order_by(Post.created_at.desc(), Post.id.desc())
            .all()
        )
        current_app.logger.debug("Fetched %d posts", len(rows))
        return list(rows)
