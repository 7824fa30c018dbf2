# app/middleware.py
"""
Global request hooks: security headers and the /api rate limit
"""

import time

from flask import abort, request

from app.extensions import cache

SECURITY_HEADERS = {
    'X-Content-Type-Options': 'nosniff',
    'X-Frame-Options': 'SAMEORIGIN',
    'Referrer-Policy': 'no-referrer',
    'Cross-Origin-Opener-Policy': 'same-origin',
    'Cross-Origin-Resource-Policy': 'same-origin',
    'X-DNS-Prefetch-Control': 'off',
    'Content-Security-Policy': (
        "default-src 'self'; img-src 'self' https: data:; "
        "style-src 'self' 'unsafe-inline'; object-src 'none'; frame-ancestors 'self'"
    ),
}

RATE_LIMITED_PREFIX = '/api'


def client_address():
    return request.remote_addr or 'unknown'


def rate_limit_key(address, window, now=None):
    """Cache key for ``address`` in the fixed window containing ``now``."""
    if now is None:
        now = time.time()
    return f"ratelimit:{address}:{int(now // window)}"


def init_security_headers(app):

    @app.after_request
    def set_security_headers(response):
        for name, value in SECURITY_HEADERS.items():
            response.headers.setdefault(name, value)
        if app.config.get('TOKEN_COOKIE_SECURE'):
            response.headers.setdefault('Strict-Transport-Security', 'max-age=15552000; includeSubDomains')
        return response


def init_rate_limit(app):

    @app.before_request
    def enforce_rate_limit():
        if not request.path.startswith(RATE_LIMITED_PREFIX):
            return None

        window = app.config['RATELIMIT_WINDOW']
        address = client_address()
        key = rate_limit_key(address, window)
        # add() only creates the counter; inc() is atomic in the backend
        cache.add(key, 0, timeout=window)
        count = cache.cache.inc(key) or 1

        if count > app.config['RATELIMIT_MAX']:
            app.logger.warning(f'Rate limit exceeded for {address} on {request.path}')
            abort(429, description='Too many requests, please try again later.')
        return None
