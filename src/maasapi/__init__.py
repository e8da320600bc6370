"""maasapi: versioned, typed readers for MAAS API responses."""

import logging
from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("maasapi")
except PackageNotFoundError:
    __version__ = "dev"

# Silent until the application calls maasapi.telemetry.setup_logging.
logging.getLogger("maasapi").addHandler(logging.NullHandler())

# Public API exports
# Individual read_* functions live in maasapi.api; the facade and the
# error taxonomy are exported from the root.
from maasapi.api import ResponseReader
from maasapi.codes import ErrorCode
from maasapi.errors import (
    BadRequestError,
    CannotCompleteError,
    DeserializationError,
    MAASError,
    NoMatchError,
    NotValidError,
    PermissionDeniedError,
    ServerError,
    UnexpectedError,
    UnsupportedVersionError,
)
from maasapi.version import Version

__all__ = [
    "__version__",
    "ResponseReader",
    "Version",
    "ErrorCode",
    "MAASError",
    "DeserializationError",
    "UnsupportedVersionError",
    "NoMatchError",
    "PermissionDeniedError",
    "BadRequestError",
    "CannotCompleteError",
    "UnexpectedError",
    "NotValidError",
    "ServerError",
]
