# app/errors.py
"""
Application-wide error handlers

API and JSON routes answer ``{"message": ...}``. Page routes redirect to the
login form on authentication failures and render ``error.html`` otherwise.
"""

from flask import flash, jsonify, redirect, render_template, request, url_for
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException, InternalServerError

from app.extensions import db

PAGE_BLUEPRINTS = {'pages'}


def wants_page():
    if request.blueprint is None:
        # unmatched URL: pages unless it is under the API prefix
        return not request.path.startswith('/api')
    return request.blueprint in PAGE_BLUEPRINTS


def register_error_handlers(app):

    @app.errorhandler(HTTPException)
    def handle_http_exception(e):
        if not wants_page():
            return jsonify({"message": e.description}), e.code

        if e.code in (401, 403) and request.endpoint != 'pages.login':
            flash(e.description, 'warning')
            return redirect(url_for('pages.login'))
        return render_template('error.html', code=e.code, message=e.description), e.code

    @app.errorhandler(SQLAlchemyError)
    def handle_database_error(e):
        db.session.rollback()
        app.logger.exception('Database error while handling %s %s', request.method, request.path)
        return handle_http_exception(InternalServerError(description='Internal server error'))

    @app.errorhandler(Exception)
    def handle_unexpected_error(e):
        app.logger.exception('Unhandled error while handling %s %s', request.method, request.path)
        return handle_http_exception(InternalServerError(description='Internal server error'))
