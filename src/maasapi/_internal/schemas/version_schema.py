"""Reader for the server's ``version`` endpoint."""

from typing import Any, Set

from maasapi._internal.checker import StringList, WireModel, check_fields, check_map, wire


class VersionInfoV20(WireModel):
    """v2.0 version info schema."""
    capabilities: StringList = wire("Capabilities")


def read_version_info(source: Any) -> Set[str]:
    """Return the capability names advertised by the server.

    The version endpoint predates reader versioning, so there is a single
    shape and no version argument.
    """
    valid = check_fields(VersionInfoV20, check_map(source, "version response"), "version response")
    return set(valid.capabilities)
