"""
Authentication Routes

Handles user registration, login and the current-user lookup.
"""

from flask import Blueprint, g, jsonify, request

from webapp.services import credential_store, session_issuer
from webapp.services.session_issuer import require_auth

auth_bp = Blueprint('auth', __name__, url_prefix='/api/auth')


def _payload():
    return request.get_json(silent=True) or {}


@auth_bp.route('/register', methods=['POST'])
def register():
    """Create an account and log it in."""
    data = _payload()
    user = credential_store.register(
        data.get('name'),
        data.get('course'),
        data.get('college'),
        data.get('email'),
        data.get('password'),
    )
    return jsonify({
        'message': 'Account created successfully',
        'token': session_issuer.issue(user),
        'user': user,
    })


@auth_bp.route('/login', methods=['POST'])
def login():
    """Exchange email and password for a token."""
    data = _payload()
    user = credential_store.authenticate(data.get('email'), data.get('password'))
    return jsonify({
        'message': 'Login successful',
        'token': session_issuer.issue(user),
        'user': user,
    })


@auth_bp.route('/me', methods=['GET'])
@require_auth
def me():
    """Return the user the token was issued to."""
    return jsonify({'user': credential_store.lookup(g.claims['id'])})
