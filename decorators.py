"""
Custom decorators for token authentication and role-based access control
"""
from functools import wraps
from flask import abort, current_app, g, request

from models import Role
from tokens import TokenExpired, TokenInvalid, verify_token


def token_required(f):
    """
    Decorator to require a valid session token cookie.

    On success the decoded claim (``userId``, ``role``, ``email``) is stored
    in ``g.current_claim``. No database access happens here.

    Failures:
        401 Authentication required: no cookie
        401 Token expired: valid signature, past expiry
        403 Invalid token: any other verification failure
    """
    @wraps(f)
    def decorated_function(*args, **kwargs):
        token = request.cookies.get(current_app.config['TOKEN_COOKIE_NAME'])
        if not token:
            abort(401, description='Authentication required')
        try:
            g.current_claim = verify_token(token)
        except TokenExpired:
            abort(401, description='Token expired')
        except TokenInvalid as e:
            current_app.logger.info(f'Rejected session token: {e}')
            abort(403, description='Invalid token')
        return f(*args, **kwargs)
    return decorated_function


def role_required(role):
    """
    Decorator to require an exact role. Must be applied below ``token_required``.

    Args:
        role: the Role the claim must carry

    Example:
        @token_required
        @role_required(Role.AUTHOR)
        def create_blog():
            pass
    """
    required = Role(role)

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            claim = getattr(g, 'current_claim', None)
            if claim is None:
                abort(401, description='Authentication required')
            try:
                claim_role = Role(claim.get('role'))
            except ValueError:
                claim_role = None
            if claim_role is not required:
                abort(403, description='Access denied')
            return f(*args, **kwargs)
        return decorated_function
    return decorator
