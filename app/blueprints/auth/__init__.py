# app/blueprints/auth/__init__.py
"""
Authentication Blueprint

Responsible for:
- Registration and login (JSON API)
- Issuing and clearing the session token cookie
- The token-protected test endpoint
"""

from flask import Blueprint

# No url_prefix to keep /api/... and /protected URLs as they are
auth_bp = Blueprint('auth', __name__)

# Import routes after blueprint creation to avoid circular imports
from . import routes
