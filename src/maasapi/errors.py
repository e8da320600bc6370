"""Error taxonomy and classification.

Response readers raise DeserializationError or UnsupportedVersionError.
Transport failures arrive as ServerError and are mapped onto the rest of
the taxonomy by classify_server_error, using a status map chosen per
operation family (the same HTTP status means different things for a
delete and for a deploy).
"""

import json
from http import HTTPStatus
from typing import Dict, Optional, Type

from maasapi.codes import ErrorCode


class MAASError(Exception):
    """Base class for every error raised by maasapi."""
    code: ErrorCode = ErrorCode.UNEXPECTED

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message

    def annotate(self, context: str) -> "MAASError":
        """Return a copy of this error with ``context`` prefixed to the message.

        Raise the result ``from`` this error so the innermost cause stays
        reachable through ``__cause__``.
        """
        annotated = self.__class__.__new__(self.__class__)
        annotated.__dict__.update(self.__dict__)
        annotated.message = f"{context}: {self.message}"
        Exception.__init__(annotated, annotated.message)
        return annotated

    @property
    def cause(self) -> BaseException:
        """The innermost exception in the ``__cause__`` chain."""
        current: BaseException = self
        while current.__cause__ is not None:
            current = current.__cause__
        return current


class DeserializationError(MAASError):
    """A response did not match the shape expected for its type."""
    code = ErrorCode.DESERIALIZATION


class UnsupportedVersionError(MAASError):
    """No reader covers the negotiated server version for a type."""
    code = ErrorCode.UNSUPPORTED_VERSION

    def __init__(self, message: str, type_name: Optional[str] = None, version: Optional[object] = None):
        super().__init__(message)
        self.type_name = type_name
        self.version = version


class NoMatchError(MAASError):
    code = ErrorCode.NO_MATCH


class PermissionDeniedError(MAASError):
    code = ErrorCode.PERMISSION


class BadRequestError(MAASError):
    code = ErrorCode.BAD_REQUEST


class CannotCompleteError(MAASError):
    code = ErrorCode.CANNOT_COMPLETE


class UnexpectedError(MAASError):
    """Anything the taxonomy has no better name for."""
    code = ErrorCode.UNEXPECTED

    def __init__(self, error: object):
        super().__init__(f"unexpected: {error}")


class NotValidError(MAASError, ValueError):
    """Local argument validation failed; no request was made."""
    code = ErrorCode.NOT_VALID


class ServerError(Exception):
    """Non-2xx response reported by the transport layer."""

    def __init__(self, status_code: int, body_message: str = ""):
        super().__init__(f"ServerError: {status_code} ({body_message})")
        self.status_code = status_code
        self.body_message = body_message


StatusMap = Dict[int, Type[MAASError]]

DELETE_STATUSES: StatusMap = {
    HTTPStatus.NOT_FOUND: NoMatchError,
    HTTPStatus.FORBIDDEN: PermissionDeniedError,
}
UPDATE_STATUSES: StatusMap = DELETE_STATUSES
GET_FILE_STATUSES: StatusMap = DELETE_STATUSES

# deploy and create-interface
ACTION_STATUSES: StatusMap = {
    HTTPStatus.NOT_FOUND: BadRequestError,
    HTTPStatus.CONFLICT: BadRequestError,
    HTTPStatus.FORBIDDEN: PermissionDeniedError,
    HTTPStatus.SERVICE_UNAVAILABLE: CannotCompleteError,
}
LINK_STATUSES: StatusMap = {
    HTTPStatus.NOT_FOUND: BadRequestError,
    HTTPStatus.BAD_REQUEST: BadRequestError,
    HTTPStatus.FORBIDDEN: PermissionDeniedError,
    HTTPStatus.SERVICE_UNAVAILABLE: CannotCompleteError,
}
UNLINK_STATUSES: StatusMap = {
    HTTPStatus.NOT_FOUND: BadRequestError,
    HTTPStatus.BAD_REQUEST: BadRequestError,
    HTTPStatus.FORBIDDEN: PermissionDeniedError,
}
ALLOCATE_STATUSES: StatusMap = {
    HTTPStatus.CONFLICT: NoMatchError,
}
RELEASE_STATUSES: StatusMap = {
    HTTPStatus.BAD_REQUEST: BadRequestError,
    HTTPStatus.FORBIDDEN: PermissionDeniedError,
    HTTPStatus.CONFLICT: CannotCompleteError,
}
CREATE_DEVICE_STATUSES: StatusMap = {
    HTTPStatus.BAD_REQUEST: BadRequestError,
}
ADD_FILE_STATUSES: StatusMap = CREATE_DEVICE_STATUSES
CREDENTIAL_STATUSES: StatusMap = {
    HTTPStatus.UNAUTHORIZED: PermissionDeniedError,
}


def classify_server_error(error: BaseException, statuses: StatusMap) -> MAASError:
    """Map a transport failure onto the taxonomy.

    A ServerError whose status appears in ``statuses`` becomes that class
    with the server's body message; everything else is an UnexpectedError.
    The original error is attached as ``__cause__``.
    """
    if isinstance(error, MAASError):
        return error
    classified: MAASError
    if isinstance(error, ServerError) and error.status_code in statuses:
        classified = statuses[error.status_code](error.body_message)
    else:
        classified = UnexpectedError(error)
    classified.__cause__ = error
    return classified


def indicates_unsupported_version(error: Optional[BaseException]) -> bool:
    """Check whether a failed version probe means the API version is absent.

    Besides 404/410, old servers answer unknown API roots with a redirect
    to the HTML login page, which fails to decode at the first character.
    """
    if error is None:
        return False
    if isinstance(error, ServerError):
        return error.status_code in (HTTPStatus.NOT_FOUND, HTTPStatus.GONE)
    if isinstance(error, json.JSONDecodeError):
        return error.pos == 0 and error.doc[:1] == "<"
    return False


def wrap_with_deserialization_error(error: BaseException, context: str) -> DeserializationError:
    wrapped = DeserializationError(f"{context}: {error}")
    wrapped.__cause__ = error
    return wrapped


def wrap_with_unsupported_version_error(error: BaseException) -> UnsupportedVersionError:
    wrapped = UnsupportedVersionError(f"unsupported version: {error}")
    wrapped.__cause__ = error
    return wrapped
