"""Domain error taxonomy. Each error carries the HTTP status the API maps it to."""


class DuneError(Exception):
    """Base class for errors raised by services and stores."""

    status_code = 500

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(DuneError):
    """Bad or missing input."""

    status_code = 400


class DuplicateError(DuneError):
    """A unique key (username, catalog id) already exists."""

    status_code = 409


class NotFoundError(DuneError):
    status_code = 404


class InvalidCredentialsError(DuneError):
    status_code = 401


class UnauthorizedError(DuneError):
    """No token, or a malformed or expired token."""

    status_code = 401


class ForbiddenError(DuneError):
    """Valid token whose role does not satisfy the required policy."""

    status_code = 403


class ConflictError(DuneError):
    """A conditional update matched no document."""

    status_code = 409


class NoContentError(DuneError):
    """The collection to sample from is empty."""

    status_code = 404


class ConfigError(DuneError):
    """Required configuration (e.g. JWT_SECRET) is missing."""

    status_code = 500


class CorruptRecordError(DuneError):
    """A stored document does not fit its schema (e.g. an unknown role)."""

    status_code = 500
