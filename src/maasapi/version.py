"""Server API version numbers.

The MAAS API advertises versions such as ``2.0``; readers are registered
against the first version that introduced their wire shape and compared
with standard dotted precedence.
"""

from dataclasses import dataclass
from typing import Union

from maasapi.errors import NotValidError


@dataclass(frozen=True, order=True)
class Version:
    """A three-part ``major.minor.patch`` version number."""
    major: int
    minor: int = 0
    patch: int = 0

    @classmethod
    def parse(cls, text: Union[str, "Version"]) -> "Version":
        """Parse ``"2"``, ``"2.0"`` or ``"2.1.9"`` into a Version.

        Raises:
            NotValidError: If the text is not one to three dot-separated
                non-negative integers.
        """
        if isinstance(text, Version):
            return text
        if not isinstance(text, str):
            raise NotValidError(f"version {text!r} is not a string")
        parts = text.strip().split(".")
        if not 1 <= len(parts) <= 3 or not all(p.isascii() and p.isdigit() for p in parts):
            raise NotValidError(f"invalid version {text!r}")
        numbers = [int(p) for p in parts] + [0] * (3 - len(parts))
        return cls(*numbers)

    def __str__(self) -> str:
        return f"{self.major}.{self.minor}.{self.patch}"


VersionLike = Union[str, Version]

TWO_DOT_OH = Version(2, 0, 0)
