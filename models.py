import enum
from datetime import datetime

from flask_sqlalchemy import SQLAlchemy
from flask_bcrypt import Bcrypt
from sqlalchemy import event
from sqlalchemy.exc import IntegrityError

# SQLAlchemy instance (init in app)
db = SQLAlchemy()
bcrypt = Bcrypt()

# Attempts at picking a fresh slug when a concurrent insert took ours
SLUG_INSERT_ATTEMPTS = 5


def _set_sqlite_pragma(dbapi_conn, connection_record):
    """Enable WAL mode and foreign keys for SQLite."""
    cursor = dbapi_conn.cursor()
    cursor.execute("PRAGMA journal_mode=WAL")
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.execute("PRAGMA busy_timeout=5000")
    cursor.close()


def init_db_events(app):
    """Initialize database event listeners for SQLite connections."""
    if app.config.get('SQLALCHEMY_DATABASE_URI', '').startswith('sqlite'):
        with app.app_context():
            event.listen(db.engine, "connect", _set_sqlite_pragma)


class Role(str, enum.Enum):
    READER = 'reader'
    AUTHOR = 'author'
    ADMIN = 'admin'


class BlogStatus(str, enum.Enum):
    DRAFT = 'draft'
    PUBLISHED = 'published'


def _enum_values(enum_cls):
    return [member.value for member in enum_cls]


class User(db.Model):
    __tablename__ = 'users'
    id = db.Column(db.Integer, primary_key=True)
    username = db.Column(db.String(80), unique=True, nullable=False)
    email = db.Column(db.String(120), unique=True, nullable=False)
    password_hash = db.Column(db.String(128), nullable=False)
    role = db.Column(db.Enum(Role, name='user_role', native_enum=False, values_callable=_enum_values),
                     nullable=False, default=Role.READER)
    last_login = db.Column(db.DateTime, nullable=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)

    blogs = db.relationship('Blog', back_populates='author', lazy=True)

    def set_password(self, password):
        # bcrypt returns bytes, store as decoded UTF-8 string
        self.password_hash = bcrypt.generate_password_hash(password).decode('utf-8')

    def check_password(self, password):
        return bcrypt.check_password_hash(self.password_hash, password)

    def summary(self):
        """Public identity fields, safe to send to clients."""
        return {
            "id": self.id,
            "username": self.username,
            "email": self.email,
            "role": self.role.value,
        }

    def to_dict(self):
        data = self.summary()
        data.update({
            "last_login": self.last_login.isoformat() if self.last_login else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        })
        return data

    def __repr__(self):
        return f"<User {self.username}>"


class Blog(db.Model):
    __tablename__ = 'blogs'
    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    subtitle = db.Column(db.String(255), nullable=True)
    content = db.Column(db.Text, nullable=False)
    slug = db.Column(db.String(255), unique=True, nullable=False)
    image = db.Column(db.String(500), nullable=True)
    status = db.Column(db.Enum(BlogStatus, name='blog_status', native_enum=False, values_callable=_enum_values),
                       nullable=False, default=BlogStatus.DRAFT, index=True)
    author_id = db.Column(db.Integer, db.ForeignKey('users.id'), nullable=False, index=True)
    created_at = db.Column(db.DateTime, default=datetime.utcnow, index=True)

    author = db.relationship('User', back_populates='blogs')

    def to_dict(self, include_author=True):
        data = {
            "id": self.id,
            "title": self.title,
            "subtitle": self.subtitle,
            "content": self.content,
            "slug": self.slug,
            "image": self.image,
            "status": self.status.value,
            "created_at": self.created_at.isoformat() if self.created_at else None,
        }
        if include_author:
            data["author"] = self.author_id
        return data

    def __repr__(self):
        return f"<Blog {self.slug}>"


def create_blog(author, title, content, subtitle=None, image=None):
    """
    Insert a blog with a unique slug derived from its title.

    The slug is picked by reading the store first; the unique constraint on
    ``blogs.slug`` is what actually decides. If the insert violates it, the
    session is rolled back and a new slug is picked from a fresh read.
    """
    from utils import generate_unique_slug

    for _ in range(SLUG_INSERT_ATTEMPTS):
        blog = Blog(
            title=title,
            subtitle=subtitle,
            content=content,
            image=image,
            slug=generate_unique_slug(title),
            author_id=author.id,
        )
        db.session.add(blog)
        try:
            db.session.commit()
            return blog
        except IntegrityError:
            db.session.rollback()
    raise RuntimeError(f"Could not assign a unique slug for {title!r}")
