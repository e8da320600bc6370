"""File storage reader."""

from typing import Any, Dict, List
from urllib.parse import urlsplit

from pydantic import field_validator

from maasapi._internal.checker import String, WireModel, check_fields, wire
from maasapi._internal.registry import ReaderRegistry
from maasapi._internal.schemas.common import read_list, read_one
from maasapi.resources.file import File
from maasapi.version import TWO_DOT_OH, Version, VersionLike


class FileV20(WireModel):
    """v2.0 file schema."""
    resource_uri: String = wire("resource_uri")
    filename: String = wire("Filename")
    anon_resource_uri: String = wire("anon_resource_uri")
    content: String = wire("Content", "")

    @field_validator("anon_resource_uri")
    @classmethod
    def _parses_as_url(cls, value: str) -> str:
        try:
            urlsplit(value)
        except ValueError as exc:
            raise ValueError(f"invalid URL {value!r}: {exc}") from exc
        return value


def file_2_0(source: Dict[str, Any], version: Version) -> File:
    valid = check_fields(FileV20, source, "file 2.0")
    return File(
        resource_uri=valid.resource_uri,
        filename=valid.filename,
        anonymous_uri=valid.anon_resource_uri,
        content=valid.content,
    )


FILE_READERS: ReaderRegistry[File] = ReaderRegistry("file", {TWO_DOT_OH: file_2_0})


def read_files(version: VersionLike, source: Any) -> List[File]:
    return read_list(FILE_READERS, version, source)


def read_file(version: VersionLike, source: Any) -> File:
    return read_one(FILE_READERS, version, source)
