# app/blueprints/auth/routes.py
"""
Authentication routes (JSON)
"""

from flask import g, jsonify, request

from decorators import token_required
from tokens import clear_token_cookie, set_token_cookie
from .accounts import authenticate, register_user
from . import auth_bp


@auth_bp.route('/api/register', methods=['POST'])
def register():
    data = request.get_json(silent=True) or {}
    user = register_user(
        data.get('username'),
        data.get('password'),
        data.get('email'),
        role=data.get('role'),
    )
    return jsonify({"message": "User created successfully", "user": user.to_dict()}), 201


@auth_bp.route('/api/login', methods=['POST'])
def login():
    data = request.get_json(silent=True) or {}
    user, token = authenticate(data.get('email'), data.get('password'))

    response = jsonify({"message": "Login successful", "user": user.summary()})
    return set_token_cookie(response, token)


@auth_bp.route('/api/logout', methods=['POST'])
def logout():
    response = jsonify({"message": "Logged out"})
    return clear_token_cookie(response)


@auth_bp.route('/protected')
@token_required
def protected():
    return jsonify({"message": "This is protected data", "user": g.current_claim})
