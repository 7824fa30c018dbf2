# app/blueprints/pages/__init__.py
"""
Pages Blueprint

Server-rendered pages: home, blog list, single post, auth forms,
profile and the static content pages.
"""

from flask import Blueprint

pages_bp = Blueprint('pages', __name__)

# Import routes after blueprint creation to avoid circular imports
from . import routes
