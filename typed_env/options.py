"""Option records for the parsers.

Callers may pass a model instance, a mapping holding only the fields they care
about, or nothing; fields left out keep their defaults.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, TypeVar

from pydantic import BaseModel, ConfigDict, Field


class ArrayOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    # Split literally, never as a regex.
    delimiter: str = Field(default=",", min_length=1)
    parse_number: bool = False


class NullOptions(BaseModel):
    model_config = ConfigDict(frozen=True, extra="forbid")

    allow_undefined: bool = False


_OptionsT = TypeVar("_OptionsT", bound=BaseModel)


def resolve_options(options: _OptionsT | Mapping[str, Any] | None, model: type[_OptionsT]) -> _OptionsT:
    if options is None:
        return model()
    if isinstance(options, model):
        return options
    if isinstance(options, Mapping):
        return model.model_validate(dict(options))
    raise TypeError(f"options must be {model.__name__}, a mapping or None")
