# app/blueprints/blogs/__init__.py
"""
Blogs Blueprint

Responsible for:
- Creating and deleting posts (authors only)
- Listing posts, globally and per author
"""

from flask import Blueprint

blogs_bp = Blueprint('blogs', __name__, url_prefix='/api/blogs')

# Import routes after blueprint creation to avoid circular imports
from . import routes
