# app/blueprints/auth/accounts.py
"""
Registration and login, shared by the JSON API and the page forms.

Failures are raised as Werkzeug HTTP exceptions so both callers can
either let the app error handlers answer or show ``e.description``.
"""

from datetime import datetime

from flask import abort, current_app
from sqlalchemy.exc import IntegrityError

from app.extensions import db
from models import Role, User
from tokens import issue_token
from utils import clean_text

DUPLICATE_USER_MESSAGE = 'User with this email or username already exists'
INVALID_CREDENTIALS_MESSAGE = 'Invalid credentials'


def resolve_requested_role(value):
    """Role for a new account; only self-assignable roles are accepted."""
    if value is None or value == '':
        return Role.READER
    allowed = current_app.config.get('SELF_ASSIGNABLE_ROLES', ())
    if value not in allowed:
        abort(400, description=f"Role must be one of: {', '.join(allowed)}")
    return Role(value)


def register_user(username, password, email, role=None):
    """
    Create a user after checking that neither username nor email is taken.

    The read check gives the usual answer; the unique constraints on
    ``users.username`` and ``users.email`` settle concurrent registrations.
    """
    username = clean_text(username)
    email = clean_text(email)
    if not username or not email or not isinstance(password, str) or not password:
        abort(400, description='Username, password and email are required')
    role = resolve_requested_role(role)

    existing = User.query.filter((User.email == email) | (User.username == username)).first()
    if existing:
        abort(400, description=DUPLICATE_USER_MESSAGE)

    user = User(username=username, email=email, role=role)
    user.set_password(password)
    db.session.add(user)
    try:
        db.session.commit()
    except IntegrityError:
        db.session.rollback()
        abort(400, description=DUPLICATE_USER_MESSAGE)

    current_app.logger.info(f'User registered: {username} ({role.value})')
    return user


def authenticate(email, password):
    """
    Check credentials, record the login and return ``(user, token)``.

    Unknown email and wrong password fail the same way.
    """
    email = clean_text(email)
    user = User.query.filter_by(email=email).first() if email else None
    if user is None or not isinstance(password, str) or not user.check_password(password):
        current_app.logger.info(f'Failed login for {email or "<empty>"}')
        abort(401, description=INVALID_CREDENTIALS_MESSAGE)

    user.last_login = datetime.utcnow()
    db.session.commit()

    current_app.logger.info(f'User logged in: {user.username}')
    return user, issue_token(user)
