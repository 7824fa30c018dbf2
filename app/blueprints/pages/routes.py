# app/blueprints/pages/routes.py
"""
Server-rendered pages
"""

from flask import (abort, current_app, flash, g, jsonify, make_response, redirect,
                   render_template, request, url_for)
from werkzeug.exceptions import HTTPException

from app.extensions import db
from app.blueprints.auth.accounts import authenticate, register_user
from app.blueprints.blogs.routes import listed_blogs_query
from models import Blog, User
from decorators import token_required
from tokens import clear_token_cookie, set_token_cookie
from utils import parse_positive_integer, pick_placeholder_image
from . import pages_bp

MAX_PAGE_SIZE = 50


def blog_card(blog):
    """Template view of a blog; posts without an image get a placeholder."""
    data = blog.to_dict()
    data['author_name'] = blog.author.username if blog.author else None
    data['image'] = blog.image or pick_placeholder_image()
    return data


@pages_bp.route('/')
def home():
    best = request.accept_mimetypes.best_match(['text/html', 'application/json'])
    if best == 'application/json':
        return jsonify({"message": "Index Page"})

    featured = listed_blogs_query().limit(current_app.config['FEATURED_COUNT']).all()
    return render_template('home.html', featured=[blog_card(b) for b in featured])


@pages_bp.route('/signup', methods=['GET', 'POST'])
@pages_bp.route('/register', methods=['GET', 'POST'])
def signup():
    """
    Sign-up page and registration handler

    GET: Display the form
    POST: Create the account and redirect to the login page
    """
    if request.method == 'POST':
        try:
            register_user(
                request.form.get('username'),
                request.form.get('password'),
                request.form.get('email'),
                role=request.form.get('role'),
            )
        except HTTPException as e:
            flash(e.description, 'danger')
            return redirect(url_for('pages.signup'))

        flash('Account created, you can log in now', 'success')
        return redirect(url_for('pages.login'))

    return render_template('signup.html', roles=current_app.config['SELF_ASSIGNABLE_ROLES'])


@pages_bp.route('/login', methods=['GET', 'POST'])
def login():
    """
    Login page and authentication handler

    GET: Display login form
    POST: Authenticate, set the session cookie and redirect to the profile
    """
    if request.method == 'POST':
        try:
            _, token = authenticate(request.form.get('email'), request.form.get('password'))
        except HTTPException as e:
            flash(e.description, 'danger')
            return redirect(url_for('pages.login'))

        return set_token_cookie(redirect(url_for('pages.profile')), token)

    return render_template('login.html')


@pages_bp.route('/logout', methods=['GET', 'POST'])
def logout():
    """Drop the session cookie and show the login form again"""
    response = make_response(render_template('login.html'))
    return clear_token_cookie(response)


@pages_bp.route('/contact')
def contact():
    return render_template('contact.html')


@pages_bp.route('/about')
def about():
    return render_template('about.html')


@pages_bp.route('/single')
def single():
    return render_template('single.html')


@pages_bp.route('/blogs')
def blogs():
    page = parse_positive_integer(request.args.get('page'), 1)
    limit = parse_positive_integer(request.args.get('limit'),
                                   current_app.config['BLOGS_PER_PAGE'], maximum=MAX_PAGE_SIZE)

    pagination = listed_blogs_query().paginate(page=page, per_page=limit, error_out=False)
    return render_template(
        'blogs.html',
        blogs=[blog_card(b) for b in pagination.items],
        page=page,
        limit=limit,
        has_more=pagination.has_next,
    )


@pages_bp.route('/blogs/<slug>')
def blog_detail(slug):
    blog = Blog.query.filter_by(slug=slug).first()
    if blog is None:
        abort(404, description='Blog not found')
    return render_template('blog.html', blog=blog_card(blog))


@pages_bp.route('/profile')
@token_required
def profile():
    user = db.session.get(User, g.current_claim['userId'])
    if user is None:
        abort(401, description='Invalid credentials')

    posts = (Blog.query.filter_by(author_id=user.id)
             .order_by(Blog.created_at.desc(), Blog.id.desc()).all())
    return render_template('profile.html', user=user, blogs=[blog_card(b) for b in posts])
