"""\
Wire kinds used by the entity models.

The api is loose about very little, so neither are we: an integer field
rejects strings, floats and booleans instead of coercing them, and a
timestamp must be an ISO-8601 string carrying its utc offset.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Annotated
from typing import Any

from pydantic import PlainSerializer
from pydantic import PlainValidator
from pydantic import ValidationInfo
from pydantic_core import PydanticCustomError

from osu_types.logging import Ansi
from osu_types.logging import log

__all__ = (
    "Integer",
    "Float",
    "String",
    "Boolean",
    "Timestamp",
    "JsonValue",
    "CursorValue",
    "Cursor",
    "CursorString",
    "OpenEnum",
    "Unknown",
    "json_kind",
)


def json_kind(value: Any) -> str:
    """Name the json kind of a decoded value, as used in error messages."""
    if value is None:
        return "null"
    if isinstance(value, bool):
        return "boolean"
    if isinstance(value, int):
        return "integer"
    if isinstance(value, float):
        return "float"
    if isinstance(value, str):
        return "string"
    if isinstance(value, (list, tuple)):
        return "array"
    if isinstance(value, dict):
        return "object"
    return type(value).__name__


def type_mismatch(expected: str, value: Any) -> PydanticCustomError:
    return PydanticCustomError(
        "type_mismatch",
        "Input should be {expected}, got {actual}",
        {"expected": expected, "actual": json_kind(value)},
    )


def _validate_integer(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise type_mismatch("integer", value)
    return value


def _validate_float(value: Any) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise type_mismatch("float", value)
    return float(value)


def _validate_string(value: Any) -> str:
    if not isinstance(value, str):
        raise type_mismatch("string", value)
    return value


def _validate_boolean(value: Any) -> bool:
    if not isinstance(value, bool):
        raise type_mismatch("boolean", value)
    return value


def _malformed_timestamp(value: str) -> PydanticCustomError:
    return PydanticCustomError(
        "malformed_timestamp",
        "Input is not an ISO-8601 timestamp: {value}",
        {"value": value},
    )


def _validate_timestamp(value: Any) -> datetime:
    if isinstance(value, datetime):
        if value.tzinfo is None:
            raise _malformed_timestamp(str(value))
        return value
    if not isinstance(value, str):
        raise type_mismatch("timestamp", value)

    try:
        parsed = datetime.fromisoformat(value)
    except ValueError:
        raise _malformed_timestamp(value) from None

    # the utc offset is mandatory, bare dates and local times included
    if parsed.tzinfo is None:
        raise _malformed_timestamp(value)
    return parsed


def _serialize_timestamp(value: datetime) -> str:
    return value.isoformat()


def _validate_cursor_value(value: Any) -> str | int:
    if isinstance(value, bool) or not isinstance(value, (str, int)):
        raise type_mismatch("string or integer", value)
    return value


def _validate_cursor_string(value: Any) -> dict[str, str | int] | str:
    if isinstance(value, str):
        return value
    if not isinstance(value, dict):
        raise type_mismatch("object or string", value)

    for item in value.values():
        _validate_cursor_value(item)
    return value


Integer = Annotated[int, PlainValidator(_validate_integer)]
Float = Annotated[float, PlainValidator(_validate_float)]
String = Annotated[str, PlainValidator(_validate_string)]
Boolean = Annotated[bool, PlainValidator(_validate_boolean)]

# decoded to an aware datetime, encoded back with isoformat()
Timestamp = Annotated[
    datetime,
    PlainValidator(_validate_timestamp),
    PlainSerializer(_serialize_timestamp, return_type=str, when_used="json"),
]

# fields the api documents as `unknown` or `object`; kept exactly as received
JsonValue = Any

CursorValue = Annotated[str | int, PlainValidator(_validate_cursor_value)]

# echoed back verbatim as the query parameters of the next request
Cursor = dict[str, CursorValue]

# same as `Cursor`, though some listings send it as one opaque token
CursorString = Annotated[
    dict[str, str | int] | str,
    PlainValidator(_validate_cursor_string),
]


@dataclass(frozen=True)
class Unknown:
    """An enum value the api sent that this version doesn't know about."""

    enum: type[Enum]
    value: str | int

    def __str__(self) -> str:
        return str(self.value)


def _serialize_enum(value: Enum | Unknown) -> str | int:
    return value.value


class OpenEnum:
    """\
    `OpenEnum[SomeEnum]` annotates a field holding either a member of
    `SomeEnum` or an `Unknown` marker carrying the raw wire value.

    Unknown values never fail decoding; the api adds new values over time.
    """

    def __class_getitem__(cls, enum_cls: type[Enum]) -> Any:
        def validate(value: Any, info: ValidationInfo) -> Enum | Unknown:
            if isinstance(value, (enum_cls, Unknown)):
                return value
            if isinstance(value, bool) or not isinstance(value, (str, int)):
                raise type_mismatch(f"{enum_cls.__name__} value", value)

            try:
                return enum_cls(value)
            except ValueError:
                log(
                    f"Unknown {enum_cls.__name__} value {value!r} "
                    f"in field {info.field_name!r}.",
                    Ansi.LYELLOW,
                )
                return Unknown(enum_cls, value)

        return Annotated[
            enum_cls | Unknown,
            PlainValidator(validate),
            PlainSerializer(_serialize_enum),
        ]
