import datetime as dt

from pagesite import db
from pagesite.models import Post
from pagesite.repository import SqlPostRepository


def test_get_posts_empty(app):
    assert SqlPostRepository().get_posts() == []


def test_get_posts_newest_first(app):
    older = Post(title="Older", body="a", created_at=dt.datetime(2020, 1, 1))
    newer = Post(title="Newer", body="b", created_at=dt.datetime(2020, 1, 31))
    db.session.add_all([older, newer])
    db.session.commit()

    titles = [p.title for p in SqlPostRepository().get_posts()]

    assert titles == ["Newer", "Older"]


def test_get_posts_ties_broken_by_id(app):
    stamp = dt.datetime(2020, 1, 31, 10, 32)
    db.session.add_all([Post(title=t, body="x", created_at=stamp) for t in ("first", "second")])
    db.session.commit()

    titles = [p.title for p in SqlPostRepository().get_posts()]

    assert titles == ["second", "first"]


def test_created_at_defaults(app):
    db.session.add(Post(title="Hello", body="..."))
    db.session.commit()

    post = SqlPostRepository().get_posts()[0]

    assert isinstance(post.created_at, dt.datetime)


def test_created_at_defaults_to_utc_now(app):
    post = Post(title="Hello", body="...")
    db.session.add(post)
    db.session.flush()

    now = dt.datetime.now(dt.timezone.utc).replace(tzinfo=None)
    stamp = post.created_at.replace(tzinfo=None)

    assert abs(now - stamp) < dt.timedelta(minutes=1)
