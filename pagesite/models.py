import datetime as dt
from . import db


class Post(db.Model):
    """A published post shown on the landing page."""
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False)
    body = db.Column(db.Text, nullable=False)
    created_at = db.Column(db.DateTime, default=lambda: dt.datetime.now(dt.timezone.utc), nullable=False, index=True)

    def __repr__(self) -> str:
        return f"<Post {self.id} {self.title!r}>"
