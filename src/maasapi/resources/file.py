"""Stored file model."""

import base64
import binascii
from typing import Optional

from pydantic import BaseModel, ConfigDict

from maasapi.errors import UnexpectedError


class File(BaseModel):
    """A file kept in the server's file storage.

    ``content`` is base64 and only present when the file was fetched
    individually; listings leave it empty.
    """
    resource_uri: str
    filename: str  # no path, just the name
    anonymous_uri: str  # retrievable without credentials
    content: str = ""

    model_config = ConfigDict(frozen=True)

    def read_all(self) -> Optional[bytes]:
        """Decode the inline content.

        Returns:
            The file bytes, or None when the content must be fetched from
            the server (``files?op=get&filename=...``).

        Raises:
            UnexpectedError: If the inline content is not valid base64.
        """
        if not self.content:
            return None
        try:
            return base64.b64decode(self.content, validate=True)
        except (binascii.Error, ValueError) as exc:
            raise UnexpectedError(exc) from exc
