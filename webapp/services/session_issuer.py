"""
Session Issuer

Mints and verifies the signed bearer tokens that prove a prior login.
Tokens are stateless: validity depends only on signature and expiry.
"""

import logging
from functools import wraps
from datetime import datetime, timedelta, timezone

import jwt
from flask import current_app, g, request

from webapp.errors import Unauthorized

logger = logging.getLogger(__name__)

ALGORITHM = "HS256"


def issue(user, secret=None, ttl_days=None, now=None):
    """
    Create a token for a user.

    Args:
        user (dict): User with 'id', 'email' and 'name'
        secret (str, optional): Signing secret; defaults to the app's JWT_SECRET
        ttl_days (int, optional): Lifetime in days; defaults to the app's TOKEN_TTL_DAYS
        now (datetime, optional): Issue time, for tests

    Returns:
        str: Encoded token
    """
    if secret is None:
        secret = current_app.config['JWT_SECRET']
    if ttl_days is None:
        ttl_days = current_app.config['TOKEN_TTL_DAYS']
    if now is None:
        now = datetime.now(timezone.utc)

    claims = {
        'id': user['id'],
        'email': user['email'],
        'name': user['name'],
        'iat': now,
        'exp': now + timedelta(days=ttl_days),
    }
    return jwt.encode(claims, secret, algorithm=ALGORITHM)


def verify(token, secret=None):
    """
    Decode and check a token.

    Returns:
        dict: The token claims

    Raises:
        Unauthorized: If the signature is wrong, the token is malformed or expired
    """
    if secret is None:
        secret = current_app.config['JWT_SECRET']

    try:
        return jwt.decode(token, secret, algorithms=[ALGORITHM], options={'require': ['exp', 'id']})
    except jwt.ExpiredSignatureError:
        raise Unauthorized("Token expired")
    except jwt.InvalidTokenError as e:
        logger.info(f"Rejected token: {e}")
        raise Unauthorized("Invalid token")


def bearer_token():
    """Extract the token from the Authorization header of the current request."""
    header = request.headers.get('Authorization', '')
    scheme, _, token = header.partition(' ')
    if scheme.lower() != 'bearer' or not token.strip():
        raise Unauthorized("Missing token")
    return token.strip()


def require_auth(view):
    """
    Route decorator that verifies the bearer token.

    The verified claims are stored on ``flask.g.claims``.
    """
    @wraps(view)
    def wrapper(*args, **kwargs):
        g.claims = verify(bearer_token())
        return view(*args, **kwargs)
    return wrapper
