import pytest

from app import db
from conftest import ensure_user
from models import Blog, Role


def add_blog(author, title, slug, image=None):
    b = Blog(title=title, content=f'{title} body', slug=slug, author_id=author.id, image=image)
    db.session.add(b)
    db.session.commit()
    return b


@pytest.mark.parametrize('path, text', [
    ('/signup', 'Create an account'),
    ('/register', 'Create an account'),
    ('/login', 'Log in'),
    ('/contact', 'Contact'),
    ('/about', 'About'),
    ('/single', 'Sample post'),
])
def test_static_pages_render(client, path, text):
    rv = client.get(path)
    assert rv.status_code == 200
    assert text in rv.get_data(as_text=True)


def test_home_shows_featured_with_placeholder(app, client):
    with app.app_context():
        author = ensure_user('writer', role=Role.AUTHOR)
        add_blog(author, 'Pictured', 'pictured', image='https://img.example/pic.jpg')
        add_blog(author, 'Plain', 'plain')

        txt = client.get('/').get_data(as_text=True)
        assert 'https://img.example/pic.jpg' in txt
        assert 'picsum.photos/seed/quill-' in txt
        assert txt.index('Plain') < txt.index('Pictured')


def test_home_answers_json_when_asked(client):
    rv = client.get('/', headers={'Accept': 'application/json'})
    assert rv.get_json() == {'message': 'Index Page'}


def test_blog_list_pagination(app, client):
    with app.app_context():
        author = ensure_user('writer', role=Role.AUTHOR)
        for i in range(3):
            add_blog(author, f'Post number {i}', f'post-{i}')

        first = client.get('/blogs', query_string={'page': '1', 'limit': '2'}).get_data(as_text=True)
        assert 'Post number 2' in first and 'Post number 1' in first
        assert 'Post number 0' not in first
        assert 'page=2' in first

        second = client.get('/blogs', query_string={'page': '2', 'limit': '2'}).get_data(as_text=True)
        assert 'Post number 0' in second
        assert 'page=3' not in second


def test_blog_list_ignores_bad_paging(app, client):
    with app.app_context():
        rv = client.get('/blogs', query_string={'page': 'abc', 'limit': '-4'})
        assert rv.status_code == 200
        assert 'Page 1' in rv.get_data(as_text=True)


def test_blog_detail(app, client):
    with app.app_context():
        author = ensure_user('writer', role=Role.AUTHOR)
        add_blog(author, 'Hello World', 'hello-world')

        rv = client.get('/blogs/hello-world')
        assert rv.status_code == 200
        txt = rv.get_data(as_text=True)
        assert 'Hello World body' in txt
        assert 'by writer' in txt

        missing = client.get('/blogs/nope')
        assert missing.status_code == 404
        assert 'Blog not found' in missing.get_data(as_text=True)


def test_profile_redirects_to_login_without_cookie(client):
    rv = client.get('/profile')
    assert rv.status_code == 302
    assert rv.headers['Location'].endswith('/login')


def test_signup_and_login_forms(app, client):
    with app.app_context():
        rv = client.post('/signup', data={'username': 'dana', 'email': 'dana@example.com',
                                          'password': 'pw', 'role': 'author'})
        assert rv.status_code == 302
        assert rv.headers['Location'].endswith('/login')

        rv = client.post('/login', data={'email': 'dana@example.com', 'password': 'pw'})
        assert rv.status_code == 302
        assert rv.headers['Location'].endswith('/profile')
        assert client.get_cookie('token') is not None

        txt = client.get('/profile').get_data(as_text=True)
        assert 'dana@example.com' in txt
        assert 'author' in txt


def test_login_form_with_bad_credentials(app, client):
    with app.app_context():
        ensure_user('dana')
        rv = client.post('/login', data={'email': 'dana@example.com', 'password': 'wrong'},
                         follow_redirects=True)
        assert rv.status_code == 200
        assert 'Invalid credentials' in rv.get_data(as_text=True)
        assert client.get_cookie('token') is None


def test_signup_form_duplicate(app, client):
    with app.app_context():
        ensure_user('dana')
        rv = client.post('/register', data={'username': 'dana', 'email': 'x@example.com', 'password': 'pw'},
                         follow_redirects=True)
        assert 'already exists' in rv.get_data(as_text=True)


def test_logout_page_clears_cookie(app, client):
    with app.app_context():
        ensure_user('dana')
        client.post('/login', data={'email': 'dana@example.com', 'password': 'pass'})
        assert client.get_cookie('token') is not None

        rv = client.get('/logout')
        assert rv.status_code == 200
        assert 'Log in' in rv.get_data(as_text=True)
        assert client.get_cookie('token') is None
