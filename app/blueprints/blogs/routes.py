# app/blueprints/blogs/routes.py
"""
Blog API routes
"""

from flask import abort, current_app, g, jsonify, request

from app.extensions import cache, db
from models import Blog, BlogStatus, Role, User, create_blog
from decorators import role_required, token_required
from utils import clean_text
from . import blogs_bp


def listed_blogs_query():
    """Blogs shown by the public listings, newest first."""
    return (Blog.query
            .filter(Blog.status == BlogStatus(current_app.config['LISTED_STATUS']))
            .order_by(Blog.created_at.desc(), Blog.id.desc()))


# Cached listings; invalidated on every create/delete
@cache.memoize(timeout=300)
def get_listed_blogs():
    return [b.to_dict(include_author=False) for b in listed_blogs_query().all()]


@cache.memoize(timeout=300)
def get_author_blogs(author_id):
    return [b.to_dict() for b in listed_blogs_query().filter(Blog.author_id == author_id).all()]


def clear_blog_cache():
    """Clear listing caches - call after adding/deleting blogs"""
    cache.delete_memoized(get_listed_blogs)
    cache.delete_memoized(get_author_blogs)


@blogs_bp.route('', methods=['POST'])
@token_required
@role_required(Role.AUTHOR)
def create():
    data = request.get_json(silent=True) or {}

    user = db.session.get(User, g.current_claim['userId'])
    if user is None:
        abort(401, description='Invalid credentials')

    title = clean_text(data.get('title'))
    content = data.get('content') if isinstance(data.get('content'), str) else ''
    if not title or not content.strip():
        abort(400, description='Title and content are required')

    blog = create_blog(
        user,
        title=title,
        content=content,
        subtitle=clean_text(data.get('subtitle')) or None,
        image=clean_text(data.get('image')) or None,
    )
    clear_blog_cache()
    current_app.logger.info(f'Blog created: {blog.slug} by {user.username}')
    return jsonify({"message": "Blog post created", "blog": blog.to_dict()}), 201


@blogs_bp.route('/<slug>', methods=['DELETE'])
@token_required
@role_required(Role.AUTHOR)
def delete(slug):
    # Authors may only remove their own posts
    blog = Blog.query.filter_by(slug=slug, author_id=g.current_claim['userId']).first()
    if blog is None:
        abort(404, description='Blog not found or not authorized')

    db.session.delete(blog)
    db.session.commit()
    clear_blog_cache()
    current_app.logger.info(f'Blog deleted: {slug} by user {g.current_claim["userId"]}')
    return jsonify({"message": "Blog deleted"}), 200


@blogs_bp.route('', methods=['GET'])
def list_blogs():
    return jsonify({"message": "List of published posts", "blogs": get_listed_blogs()}), 200


@blogs_bp.route('/author/<username>', methods=['GET'])
def list_author_blogs(username):
    user = User.query.filter_by(username=username).first()
    if user is None:
        abort(401, description='Author not found')

    return jsonify({
        "message": f"List of published posts by {username}",
        "blog": get_author_blogs(user.id),
    }), 200
