"""Structural checks and coercing field types for decoded JSON.

Wire schemas are pydantic models built from the field types below. The
types are strict about shape (a list field rejects a scalar) but accept
the inconsistent encodings MAAS uses for numbers (int, float or numeric
string). Unknown keys are ignored so newer servers can add fields.

A field with a default gets that default both when the key is missing
and when the server sends ``null``; a field without one fails on either.
"""

import json
from typing import Annotated, Any, Dict, List, Optional, Type, TypeVar

from pydantic import (
    AliasChoices,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    StrictBool,
    StrictStr,
    ValidationError,
    model_validator,
)

from maasapi.errors import DeserializationError


def describe(value: Any) -> str:
    """Render a decoded JSON value as ``kind(value)`` for error messages."""
    if value is None:
        return "nothing"
    if isinstance(value, bool):
        return f"bool({'true' if value else 'false'})"
    if isinstance(value, int):
        return f"int({value})"
    if isinstance(value, float):
        return f"float64({value!r})"
    if isinstance(value, str):
        return f"string({json.dumps(value, ensure_ascii=False)})"
    if isinstance(value, list):
        return f"list(len={len(value)})"
    if isinstance(value, dict):
        return f"map(len={len(value)})"
    return type(value).__name__


def _force_int(value: Any) -> int:
    if isinstance(value, bool):
        raise ValueError(f"expected number, got {describe(value)}")
    if isinstance(value, int):
        return value
    try:
        if isinstance(value, float):
            return int(value)
        if isinstance(value, str):
            text = value.strip()
            try:
                return int(text)
            except ValueError:
                return int(float(text))
    except (ValueError, OverflowError):
        pass
    raise ValueError(f"expected number, got {describe(value)}")


def _force_uint(value: Any) -> int:
    number = _force_int(value)
    if number < 0:
        raise ValueError(f"expected unsigned number, got {describe(value)}")
    return number


def _null_as_empty_list(value: Any) -> Any:
    return [] if value is None else value


ForceInt = Annotated[int, BeforeValidator(_force_int)]
ForceUint = Annotated[int, BeforeValidator(_force_uint)]
String = StrictStr
Bool = StrictBool
StringList = List[StrictStr]
# Required key whose value may be null; null reads as an empty list.
NullableStringList = Annotated[List[StrictStr], BeforeValidator(_null_as_empty_list)]
StringMap = Dict[str, Any]
MapList = List[Dict[str, Any]]
OptionalMap = Optional[Dict[str, Any]]


def wire(key: str, default: Any = ...) -> Any:
    """Declare a field read from wire key ``key`` or its lowercase spelling."""
    lower = key.lower()
    alias = AliasChoices(key, lower) if lower != key else key
    return Field(default, validation_alias=alias)


def _field_keys(name: str, field: Any) -> List[str]:
    alias = field.validation_alias
    if alias is None:
        return [name]
    if isinstance(alias, AliasChoices):
        return [choice for choice in alias.choices if isinstance(choice, str)]
    return [alias]


class WireModel(BaseModel):
    """Base for wire-shape schemas."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _null_takes_default(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        dropped = set()
        for name, field in cls.model_fields.items():
            if field.is_required():
                continue
            for key in _field_keys(name, field):
                if key in data and data[key] is None:
                    dropped.add(key)
        if not dropped:
            return data
        return {key: value for key, value in data.items() if key not in dropped}


M = TypeVar("M", bound=BaseModel)


def format_validation_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into ``field: problem`` clauses."""
    problems = []
    for error in exc.errors():
        location = ".".join(str(part) for part in error["loc"]) or "value"
        if error["type"] == "missing":
            problems.append(f"{location}: missing required field")
        elif error["type"] == "value_error":
            problems.append(f"{location}: {error['ctx']['error']}")
        else:
            message = error["msg"][0].lower() + error["msg"][1:]
            problems.append(f"{location}: {message}, got {describe(error.get('input'))}")
    return "; ".join(problems)


def check_fields(schema: Type[M], source: Dict[str, Any], context: str) -> M:
    """Validate ``source`` against a wire schema.

    Args:
        schema: WireModel subclass declaring the expected fields
        source: Decoded JSON object
        context: Type and version label, e.g. ``"machine 2.0"``

    Raises:
        DeserializationError: Naming every offending field.
    """
    try:
        return schema.model_validate(source)
    except ValidationError as exc:
        raise DeserializationError(
            f"{context} schema check failed: {format_validation_error(exc)}"
        ) from exc


def check_list(source: Any, type_name: str) -> List[Dict[str, Any]]:
    """Base check for list endpoints: a list of JSON objects."""
    if not isinstance(source, list):
        raise DeserializationError(
            f"{type_name} base schema check failed: expected list, got {describe(source)}"
        )
    for index, item in enumerate(source):
        if not isinstance(item, dict):
            raise DeserializationError(
                f"{type_name} base schema check failed: [{index}]: expected map, got {describe(item)}"
            )
    return source


def check_map(source: Any, type_name: str) -> Dict[str, Any]:
    """Base check for single-resource endpoints: one JSON object."""
    if not isinstance(source, dict):
        raise DeserializationError(
            f"{type_name} base schema check failed: expected map, got {describe(source)}"
        )
    return source
