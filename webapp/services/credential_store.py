"""
Credential Store

Registers users, checks their credentials and looks them up by id.
Passwords are kept only as salted one-way hashes.
"""

import logging
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from werkzeug.security import generate_password_hash, check_password_hash

from config.database import get_db_session
from config.models import User
from webapp.errors import ValidationError, DuplicateEmail, NotFound, InvalidCredential

logger = logging.getLogger(__name__)

REGISTRATION_FIELDS = ('name', 'course', 'college', 'email', 'password')


def normalize_email(email):
    """
    Normalize an email address for storage and lookup.

    Args:
        email (str): Email address as typed by the user

    Returns:
        str: Lower-cased address without surrounding whitespace
    """
    return email.strip().lower()


def user_to_dict(user):
    """Public view of a user record. The password hash is never included."""
    return {
        'id': user.user_id,
        'name': user.name,
        'course': user.course,
        'college': user.college,
        'email': user.email,
        'createdAt': user.created_at.isoformat() if user.created_at else None,
    }


def _require_fields(values, fields):
    missing = [field for field in fields
               if not isinstance(values.get(field), str) or not values[field].strip()]
    if missing:
        raise ValidationError(f"Missing required fields: {', '.join(missing)}")


def register(name, course, college, email, password):
    """
    Create a new user account.

    Args:
        name (str): Display name
        course (str): Course of study
        college (str): College name
        email (str): Email address, unique regardless of case
        password (str): Plain password, stored hashed

    Returns:
        dict: The new user

    Raises:
        ValidationError: If any field is empty
        DuplicateEmail: If the email is already registered
    """
    values = {'name': name, 'course': course, 'college': college,
              'email': email, 'password': password}
    _require_fields(values, REGISTRATION_FIELDS)

    email = normalize_email(email)
    session = get_db_session()
    try:
        existing = session.execute(select(User).where(User.email == email)).scalar_one_or_none()
        if existing:
            raise DuplicateEmail("Email already registered")

        user = User(
            name=name.strip(),
            course=course.strip(),
            college=college.strip(),
            email=email,
            password_hash=generate_password_hash(password),
        )
        session.add(user)
        session.commit()
        session.refresh(user)
        logger.info(f"Registered user {user.user_id} ({email})")
        return user_to_dict(user)
    except IntegrityError:
        # Lost the race against a concurrent registration of the same email
        session.rollback()
        raise DuplicateEmail("Email already registered")
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()


def authenticate(email, password):
    """
    Check an email/password pair.

    Returns:
        dict: The matching user

    Raises:
        ValidationError: If either field is empty
        NotFound: If no user has this email
        InvalidCredential: If the password does not match
    """
    _require_fields({'email': email, 'password': password}, ('email', 'password'))

    session = get_db_session()
    try:
        user = session.execute(
            select(User).where(User.email == normalize_email(email))
        ).scalar_one_or_none()
        if user is None:
            raise NotFound("User not found")
        if not check_password_hash(user.password_hash, password):
            logger.warning(f"Failed login for user {user.user_id}")
            raise InvalidCredential("Invalid credentials")
        return user_to_dict(user)
    finally:
        session.close()


def lookup(user_id):
    """
    Get a user by id.

    Raises:
        NotFound: If the user does not exist
    """
    session = get_db_session()
    try:
        user = session.get(User, user_id)
        if user is None:
            raise NotFound("User not found")
        return user_to_dict(user)
    finally:
        session.close()
