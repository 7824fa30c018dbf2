# app/extensions.py
"""
Flask extensions, created here so blueprints can import them without
importing the app factory.

``db`` and ``bcrypt`` live in models.py; ``cache`` holds both the memoized
blog listings and the per-client /api rate-limit counters.
"""

from flask_migrate import Migrate
from flask_caching import Cache

from models import db, bcrypt, init_db_events

migrate = Migrate()
cache = Cache()


def init_extensions(app):
    """
    Bind the extensions to ``app``

    Args:
        app: Flask application instance
    """
    db.init_app(app)
    # Password hashing; BCRYPT_HANDLE_LONG_PASSWORDS is read here
    bcrypt.init_app(app)
    migrate.init_app(app, db)
    init_db_events(app)

    # One in-process store for listings and rate-limit counters, so the
    # threshold has to leave room for a counter per client
    cache.init_app(app, config={
        'CACHE_TYPE': app.config.get('CACHE_TYPE', 'SimpleCache'),
        'CACHE_DEFAULT_TIMEOUT': app.config.get('CACHE_DEFAULT_TIMEOUT', 900),
        'CACHE_THRESHOLD': app.config.get('CACHE_THRESHOLD', 10000),
    })
