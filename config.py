import hashlib
import os

basedir = os.path.abspath(os.path.dirname(__file__))


class Config:
    JWT_SECRET = os.environ.get('JWT_SECRET')
    if not JWT_SECRET:
        raise RuntimeError(
            "JWT_SECRET environment variable is required. "
            "Set it via: export JWT_SECRET='your-secure-random-key'"
        )

    PRODUCTION = (os.environ.get('NODE_ENV') or os.environ.get('FLASK_ENV')) == 'production'

    # Flask signs the flash-message session with its own key
    SECRET_KEY = os.environ.get('SECRET_KEY')
    if not SECRET_KEY:
        if PRODUCTION:
            raise RuntimeError(
                "SECRET_KEY environment variable is required in production. "
                "Set it via: export SECRET_KEY='another-secure-random-key'"
            )
        SECRET_KEY = hashlib.sha256(f'flask-session:{JWT_SECRET}'.encode('utf-8')).hexdigest()

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', f"sqlite:///{os.path.join(basedir, 'data', 'app.db')}")
    SQLALCHEMY_TRACK_MODIFICATIONS = False

    # Session token (signed claim in an httpOnly cookie)
    JWT_ALGORITHM = 'HS256'
    TOKEN_COOKIE_NAME = 'token'
    TOKEN_EXPIRES_SECONDS = 3600  # 1 hour
    TOKEN_COOKIE_SECURE = PRODUCTION

    BCRYPT_LOG_ROUNDS = 12
    # bcrypt only reads 72 bytes; pre-hash longer passwords with SHA-256
    BCRYPT_HANDLE_LONG_PASSWORDS = True

    # Reject request bodies over 10 KiB
    MAX_CONTENT_LENGTH = 10 * 1024

    # Fixed-window rate limit on /api
    RATELIMIT_WINDOW = 15 * 60
    RATELIMIT_MAX = 100

    CACHE_TYPE = 'SimpleCache'
    CACHE_DEFAULT_TIMEOUT = 900
    # room for one rate-limit counter per client per window
    CACHE_THRESHOLD = 10000

    # Status selected by the "published" listings. The listings have always
    # matched 'draft'; keep it until product confirms which one is meant.
    LISTED_STATUS = 'draft'

    # Roles a user may pick for themselves at registration
    SELF_ASSIGNABLE_ROLES = ('reader', 'author')

    BLOGS_PER_PAGE = 6
    FEATURED_COUNT = 3
    PLACEHOLDER_IMAGES = [
        'https://picsum.photos/seed/quill-1/1200/600',
        'https://picsum.photos/seed/quill-2/1200/600',
        'https://picsum.photos/seed/quill-3/1200/600',
        'https://picsum.photos/seed/quill-4/1200/600',
    ]

    PORT = os.environ.get('PORT', '3000')


class TestingConfig(Config):
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    BCRYPT_LOG_ROUNDS = 4
    TOKEN_COOKIE_SECURE = False
