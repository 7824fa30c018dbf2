"""
Session tokens: signed claims carried in an httpOnly cookie.
"""
from datetime import datetime, timedelta, timezone
from typing import Optional

import jwt
from flask import current_app


class TokenError(Exception):
    """Token could not be verified."""


class TokenExpired(TokenError):
    pass


class TokenInvalid(TokenError):
    pass


def issue_token(user, expires_delta: Optional[timedelta] = None) -> str:
    """Sign ``{userId, role, email}`` for ``user`` with an expiry."""
    if expires_delta is None:
        expires_delta = timedelta(seconds=current_app.config['TOKEN_EXPIRES_SECONDS'])
    now = datetime.now(timezone.utc)
    payload = {
        "userId": user.id,
        "role": user.role.value,
        "email": user.email,
        "iat": now,
        "exp": now + expires_delta,
    }
    return jwt.encode(payload, current_app.config['JWT_SECRET'],
                      algorithm=current_app.config['JWT_ALGORITHM'])


def verify_token(token: str) -> dict:
    """
    Verify signature and expiry and return the decoded claim.

    Raises:
        TokenExpired: the signature is valid but ``exp`` is in the past
        TokenInvalid: anything else (bad signature, malformed, missing claims)
    """
    try:
        return jwt.decode(
            token,
            current_app.config['JWT_SECRET'],
            algorithms=[current_app.config['JWT_ALGORITHM']],
            options={"require": ["exp", "userId", "role"]},
        )
    except jwt.ExpiredSignatureError as e:
        raise TokenExpired(str(e)) from e
    except jwt.InvalidTokenError as e:
        raise TokenInvalid(str(e)) from e


def set_token_cookie(response, token):
    config = current_app.config
    response.set_cookie(
        config['TOKEN_COOKIE_NAME'],
        token,
        max_age=config['TOKEN_EXPIRES_SECONDS'],
        httponly=True,
        secure=config['TOKEN_COOKIE_SECURE'],
        samesite='Strict',
    )
    return response


def clear_token_cookie(response):
    config = current_app.config
    response.delete_cookie(
        config['TOKEN_COOKIE_NAME'],
        httponly=True,
        secure=config['TOKEN_COOKIE_SECURE'],
        samesite='Strict',
    )
    return response
