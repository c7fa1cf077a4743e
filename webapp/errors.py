"""
Error Types

Domain errors raised by the stores and the session issuer. Each carries the
HTTP status the web app answers with.
"""


class TrackerError(Exception):
    """Base class for errors surfaced to API clients."""

    status_code = 500

    def __init__(self, message):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'error': self.message}


class ValidationError(TrackerError):
    status_code = 400


class DuplicateEmail(TrackerError):
    status_code = 409


class NotFound(TrackerError):
    status_code = 404


class Unauthorized(TrackerError):
    status_code = 401


class InvalidCredential(TrackerError):
    status_code = 401
