from __future__ import annotations

from collections.abc import Mapping
from enum import Enum
from typing import Any
from typing import TypeVar

from pydantic import BaseModel as _pydantic_BaseModel
from pydantic import ConfigDict
from pydantic import ModelWrapValidatorHandler
from pydantic import ValidationError
from pydantic import ValidationInfo
from pydantic import model_validator

from osu_types.logging import Ansi
from osu_types.logging import log

T = TypeVar("T", bound="BaseModel")


class Presence(Enum):
    ABSENT = "absent"
    NULL = "null"
    VALUE = "value"


class BaseModel(_pydantic_BaseModel):
    """\
    Base for every api entity.

    Instances are immutable. Keys the model doesn't declare are kept in
    `model_extra` and written back out by `encode`, so a payload survives a
    decode/encode cycle even when the api has grown new fields.
    """

    model_config = ConfigDict(
        extra="allow",
        frozen=True,
        # python code may construct by attribute name; decoding only
        # accepts wire keys, see `decoder._validate`
        validate_by_alias=True,
        validate_by_name=True,
        protected_namespaces=(),
    )

    @classmethod
    def from_mapping(cls: type[T], mapping: Mapping[str, Any]) -> T:
        from osu_types.decoder import decode

        return decode(cls, mapping)

    def to_json(self) -> dict[str, Any]:
        from osu_types.decoder import encode

        return encode(self)

    def presence(self, field: str) -> Presence:
        """Whether `field` was absent, explicitly null, or set on the wire."""
        if field not in type(self).model_fields:
            raise AttributeError(f"{type(self).__name__} has no field {field!r}")

        if field not in self.model_fields_set:
            return Presence.ABSENT
        if getattr(self, field) is None:
            return Presence.NULL
        return Presence.VALUE

    @model_validator(mode="wrap")
    @classmethod
    def drop_invalid_optionals(
        cls,
        data: Any,
        handler: ModelWrapValidatorHandler[Any],
        info: ValidationInfo,
    ) -> Any:
        # lenient decoding: an optional field that fails validation is
        # treated as absent, a failing required field still fails.
        lenient = bool(info.context and info.context.get("lenient"))
        if not lenient or not isinstance(data, dict):
            return handler(data)

        optional_keys = set()
        for name, field in cls.model_fields.items():
            if not field.is_required():
                optional_keys.add(name)
                if field.alias is not None:
                    optional_keys.add(field.alias)

        while True:
            try:
                return handler(data)
            except ValidationError as exc:
                failed_keys = {
                    error["loc"][0] if error["loc"] else None
                    for error in exc.errors()
                }
                if not failed_keys <= optional_keys or not failed_keys & data.keys():
                    raise

                log(
                    f"Dropping invalid optional fields of {cls.__name__}: "
                    f"{', '.join(sorted(map(str, failed_keys)))}.",
                    Ansi.LYELLOW,
                )
                data = {k: v for k, v in data.items() if k not in failed_keys}
