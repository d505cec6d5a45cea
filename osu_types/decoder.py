"""\
Decoding of raw api payloads into entity models, and back.

`decode` validates an untyped json value against an entity's field
contract and either returns an immutable model or raises `DecodeError`
carrying structured issues with the path of every offending value, e.g.
`beatmapset.beatmaps[2].difficulty_rating`.

Unknown enum values never fail a decode; they're captured as `Unknown`
markers which `unknown_variants` can list afterwards.
"""
from __future__ import annotations

from collections.abc import Mapping
from collections.abc import Sequence
from typing import Any
from typing import Literal
from typing import TypeVar

import pydantic
from pydantic import ConfigDict
from pydantic import ValidationError
from pydantic_core import ErrorDetails

import osu_types.settings
from osu_types.errors import ArrayElementFailure
from osu_types.errors import DecodeError
from osu_types.errors import DecodeIssue
from osu_types.errors import MalformedTimestamp
from osu_types.errors import MissingField
from osu_types.errors import TypeMismatch
from osu_types.errors import UnknownVariant
from osu_types.models import BaseModel
from osu_types.models.beatmaps import Beatmap
from osu_types.models.beatmaps import BeatmapExtended
from osu_types.models.beatmaps import Beatmapset
from osu_types.models.beatmaps import BeatmapsetExtended
from osu_types.models.fields import Unknown
from osu_types.models.fields import json_kind
from osu_types.models.users import User
from osu_types.models.users import UserExtended

__all__ = (
    "EXTENDED_VARIANTS",
    "DecodeOptions",
    "decode",
    "decode_many",
    "encode",
    "narrow",
    "widen",
    "unknown_variants",
    "format_path",
)

T = TypeVar("T", bound=BaseModel)

Variant = Literal["base", "extended"]

Loc = tuple[int | str, ...]

# base entity -> the superset returned by more detailed endpoints
EXTENDED_VARIANTS: dict[type[BaseModel], type[BaseModel]] = {
    Beatmap: BeatmapExtended,
    Beatmapset: BeatmapsetExtended,
    User: UserExtended,
}

# pydantic's own error types for a value of the wrong container kind
CONTAINER_ERROR_KINDS = {
    "model_type": "object",
    "model_attributes_type": "object",
    "dict_type": "object",
    "list_type": "array",
    "tuple_type": "array",
    "iterable_type": "array",
}


class DecodeOptions(pydantic.BaseModel):
    model_config = ConfigDict(frozen=True)

    # optional fields failing validation are dropped instead of failing
    lenient: bool = False
    # report every issue instead of stopping at the first one
    collect_errors: bool = False

    @classmethod
    def resolve(
        cls,
        lenient: bool | None = None,
        collect_errors: bool | None = None,
    ) -> DecodeOptions:
        """Fill unset options from the process-wide settings."""
        return cls(
            lenient=(
                osu_types.settings.DECODE_LENIENT if lenient is None else lenient
            ),
            collect_errors=(
                osu_types.settings.DECODE_COLLECT_ERRORS
                if collect_errors is None
                else collect_errors
            ),
        )


def format_path(loc: Sequence[int | str]) -> str:
    path = ""
    for part in loc:
        if isinstance(part, int):
            path += f"[{part}]"
        elif path:
            path += f".{part}"
        else:
            path = str(part)
    return path


def _leaf_issue(loc: Loc, error: ErrorDetails) -> DecodeIssue:
    path = format_path(loc)
    error_type = error["type"]
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        return MissingField(path, str(loc[-1]))
    if error_type == "type_mismatch":
        return TypeMismatch(path, ctx["expected"], ctx["actual"])
    if error_type == "malformed_timestamp":
        return MalformedTimestamp(path, ctx["value"])
    if error_type in CONTAINER_ERROR_KINDS:
        return TypeMismatch(
            path,
            CONTAINER_ERROR_KINDS[error_type],
            json_kind(error["input"]),
        )

    return TypeMismatch(path, error_type, json_kind(error["input"]))


def _issue_from_loc(loc: Loc, start: int, error: ErrorDetails) -> DecodeIssue:
    # every array index on the path becomes one level of ArrayElementFailure
    for i in range(start, len(loc)):
        index = loc[i]
        if isinstance(index, int):
            return ArrayElementFailure(
                format_path(loc[:i]),
                index,
                _issue_from_loc(loc, i + 1, error),
            )

    return _leaf_issue(loc, error)


def _translate(exc: ValidationError, prefix: Loc = ()) -> list[DecodeIssue]:
    return [
        _issue_from_loc(prefix + tuple(error["loc"]), 0, error)
        for error in exc.errors()
    ]


def _resolve_variant(model: type[T], variant: Variant | None) -> type[T]:
    if variant is None:
        return model

    for base, extended in EXTENDED_VARIANTS.items():
        if model is base or model is extended:
            return base if variant == "base" else extended  # type: ignore[return-value]

    if variant == "base":
        return model

    raise ValueError(f"{model.__name__} has no extended variant.")


def _validate(
    model: type[T],
    payload: Any,
    options: DecodeOptions,
    prefix: Loc = (),
) -> T:
    if not isinstance(payload, Mapping):
        issue = _issue_from_loc(
            prefix,
            0,
            {
                "type": "model_type",
                "loc": (),
                "msg": "",
                "input": payload,
            },
        )
        raise DecodeError(model.__name__, [issue])

    try:
        return model.model_validate(
            dict(payload),
            context={"lenient": options.lenient},
            by_alias=True,
            by_name=False,
        )
    except ValidationError as exc:
        issues = _translate(exc, prefix)
        if not options.collect_errors:
            issues = issues[:1]
        raise DecodeError(model.__name__, issues) from None


def decode(
    model: type[T],
    payload: Any,
    *,
    variant: Variant | None = None,
    lenient: bool | None = None,
    collect_errors: bool | None = None,
) -> T:
    """\
    Decode a json object into an instance of `model`.

    `variant` picks between the base and extended shape of entities that
    have both (e.g. `decode(User, data, variant="extended")` returns a
    `UserExtended`).
    """
    target = _resolve_variant(model, variant)
    options = DecodeOptions.resolve(lenient, collect_errors)
    return _validate(target, payload, options)


def decode_many(
    model: type[T],
    payload: Any,
    *,
    variant: Variant | None = None,
    lenient: bool | None = None,
    collect_errors: bool | None = None,
) -> list[T]:
    """\
    Decode a json array of objects element by element.

    Stops at the first failing element unless errors are being collected.
    """
    target = _resolve_variant(model, variant)
    options = DecodeOptions.resolve(lenient, collect_errors)
    name = f"list[{target.__name__}]"

    if not isinstance(payload, list):
        raise DecodeError(name, [TypeMismatch("", "array", json_kind(payload))])

    values: list[T] = []
    issues: list[DecodeIssue] = []

    for index, item in enumerate(payload):
        try:
            values.append(_validate(target, item, options, prefix=(index,)))
        except DecodeError as exc:
            if not options.collect_errors:
                raise DecodeError(name, exc.issues) from None
            issues.extend(exc.issues)

    if issues:
        raise DecodeError(name, issues)

    return values


def encode(value: BaseModel | Sequence[BaseModel]) -> Any:
    """\
    Turn a model (or a list of them) back into its json form.

    Only keys present on the value are written: a field that was absent
    on the wire stays absent and an explicit null stays null. Unrecognised
    keys kept from decoding are written back untouched.
    """
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json", by_alias=True, exclude_unset=True)
    if isinstance(value, Sequence) and not isinstance(value, (str, bytes)):
        return [encode(item) for item in value]

    raise TypeError(f"Cannot encode {type(value).__name__}.")


def narrow(value: T) -> BaseModel:
    """Convert an extended entity to its base variant, losing no keys."""
    for base, extended in EXTENDED_VARIANTS.items():
        if type(value) is extended:
            return decode(base, encode(value))
    return value


def widen(value: BaseModel, *, lenient: bool | None = None) -> BaseModel:
    """\
    Convert a base entity to its extended variant.

    The extended fields must have been kept on the base value (as
    unrecognised keys); `DecodeError` is raised otherwise.
    """
    extended = EXTENDED_VARIANTS.get(type(value))
    if extended is None:
        return value
    return decode(extended, encode(value), lenient=lenient)


def unknown_variants(value: Any, _loc: Loc = ()) -> list[UnknownVariant]:
    """List every enum value in a decoded tree that wasn't recognised."""
    found: list[UnknownVariant] = []

    if isinstance(value, Unknown):
        found.append(
            UnknownVariant(format_path(_loc), value.enum.__name__, value.value),
        )
    elif isinstance(value, BaseModel):
        for name, field in type(value).model_fields.items():
            key = field.alias or name
            found.extend(unknown_variants(getattr(value, name), _loc + (key,)))
    elif isinstance(value, (list, tuple)):
        for index, item in enumerate(value):
            found.extend(unknown_variants(item, _loc + (index,)))
    elif isinstance(value, dict):
        for key, item in value.items():
            found.extend(unknown_variants(item, _loc + (key,)))

    return found
