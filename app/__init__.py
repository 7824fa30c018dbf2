# app/__init__.py - Application Factory Pattern
"""
Flask application factory for the blog.
Used for easier testing and to keep process-wide resources
(database engine, cache backend) bound to one app instance.
"""

import logging
import os
import sys

import click
from flask import Flask

from app.extensions import db


def configure_logging(app):
    """Log to stdout (good for Docker); enable file logging with LOG_TO_FILE=1."""
    if os.environ.get('LOG_TO_FILE') == '1':
        from logging.handlers import RotatingFileHandler
        try:
            os.makedirs('logs', exist_ok=True)
            file_handler = RotatingFileHandler('logs/app.log', maxBytes=10240, backupCount=3)
            file_handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s: %(message)s [in %(pathname)s:%(lineno)d]'))
            file_handler.setLevel(logging.INFO)
            app.logger.addHandler(file_handler)
        except OSError:
            # fallback to stderr if file logging cannot be configured
            app.logger.addHandler(logging.StreamHandler(sys.stderr))
            app.logger.warning('Could not configure file logging; logs will be sent to stderr')
    elif not app.testing:
        app.logger.addHandler(logging.StreamHandler(sys.stdout))
    app.logger.setLevel(logging.INFO)


def create_app(config_class=None):
    """
    Application Factory Pattern

    Args:
        config_class: Configuration class (default: Config from config.py)

    Returns:
        Flask application instance
    """
    app = Flask(__name__,
                template_folder='../templates',
                static_folder='../static')

    # Load configuration
    if config_class is None:
        from config import Config
        config_class = Config
    app.config.from_object(config_class)

    configure_logging(app)
    app.logger.info('Application startup')

    # Ensure data directory exists when using a local sqlite file
    db_uri = app.config.get('SQLALCHEMY_DATABASE_URI', '')
    if db_uri.startswith('sqlite:///') and ':memory:' not in db_uri:
        db_dir = os.path.dirname(db_uri.replace('sqlite:///', ''))
        if db_dir:
            try:
                os.makedirs(db_dir, exist_ok=True)
            except OSError:
                app.logger.warning(f'Could not create directory for sqlite DB: {db_dir}')

    # Initialize extensions
    from app.extensions import init_extensions
    init_extensions(app)

    # Global hooks
    from app.middleware import init_security_headers, init_rate_limit
    init_rate_limit(app)
    init_security_headers(app)

    from app.errors import register_error_handlers
    register_error_handlers(app)

    # Register blueprints
    from app.blueprints.auth import auth_bp
    app.register_blueprint(auth_bp)

    from app.blueprints.blogs import blogs_bp
    app.register_blueprint(blogs_bp)

    from app.blueprints.pages import pages_bp
    app.register_blueprint(pages_bp)

    register_cli(app)

    return app


def register_cli(app):
    """CLI commands for database and user management."""
    from models import Role, User

    role_choice = click.Choice([r.value for r in Role], case_sensitive=False)

    @app.cli.command('init-db')
    def init_db():
        """Create database tables."""
        db.create_all()
        click.echo('Initialized the database.')

    @app.cli.command('create-user')
    @click.argument('username')
    @click.argument('email')
    @click.argument('password')
    @click.argument('role', type=role_choice)
    def create_user(username, email, password, role):
        """Create a user with specified role: flask create-user <username> <email> <password> <role>"""
        if User.query.filter((User.username == username) | (User.email == email)).first():
            click.echo('User already exists.')
            return
        u = User(username=username, email=email, role=Role(role.lower()))
        u.set_password(password)
        db.session.add(u)
        db.session.commit()
        app.logger.info(f'User created by CLI: {username} with role {role}')
        click.echo(f'Created {role} user {username}')

    @app.cli.command('set-role')
    @click.argument('username')
    @click.argument('role', type=role_choice)
    def set_role(username, role):
        """Change a user's role: flask set-role <username> <role>"""
        u = User.query.filter_by(username=username).first()
        if u is None:
            click.echo('User not found.')
            return
        u.role = Role(role.lower())
        db.session.commit()
        app.logger.info(f'Role changed by CLI: {username} -> {role}')
        click.echo(f'{username} is now {role}')


__all__ = ['create_app', 'db']
