import pytest

import utils
from app import db
from conftest import ensure_user
from models import Blog, Role, create_blog


@pytest.mark.parametrize('title, expected', [
    ('Hello World', 'hello-world'),
    ('  Trailing   spaces  ', 'trailing-spaces'),
    ('Crème brûlée', 'creme-brulee'),
    ('!!!', 'blog'),
])
def test_make_slug(title, expected):
    assert utils.make_slug(title) == expected


def test_generate_unique_slug_counts_up(app):
    with app.app_context():
        author = ensure_user('writer', role=Role.AUTHOR)
        assert utils.generate_unique_slug('Hello World') == 'hello-world'

        for slug in ('hello-world', 'hello-world-1'):
            db.session.add(Blog(title='Hello World', content='c', slug=slug, author_id=author.id))
        db.session.commit()

        assert utils.generate_unique_slug('Hello World') == 'hello-world-2'


def test_create_blog_retries_when_slug_taken_concurrently(app, monkeypatch):
    with app.app_context():
        author = ensure_user('writer', role=Role.AUTHOR)
        create_blog(author, 'Race', 'first')

        real_slug_exists = utils.slug_exists
        calls = []

        def stale_read(slug):
            # the first lookup misses the row another request just committed
            calls.append(slug)
            if len(calls) == 1:
                return False
            return real_slug_exists(slug)

        monkeypatch.setattr(utils, 'slug_exists', stale_read)
        blog = create_blog(author, 'Race', 'second')

        assert blog.slug == 'race-1'
        assert sorted(b.slug for b in Blog.query.all()) == ['race', 'race-1']
