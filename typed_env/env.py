from __future__ import annotations

import os
from collections.abc import Mapping
from typing import Any

from typed_env.errors import EnvParseError
from typed_env.options import ArrayOptions, NullOptions
from typed_env.parsers import MISSING, Number, parse_array, parse_boolean, parse_null, parse_number, parse_string


def _lookup(name: str, environ: Mapping[str, str] | None) -> str | None:
    if environ is None:
        environ = os.environ
    return environ.get(name)


def _named(e: EnvParseError, name: str) -> EnvParseError:
    e.name = name
    e.args = (f"{name}: {e}",)
    return e


def env_bool(name: str, *, environ: Mapping[str, str] | None = None) -> bool:
    return parse_boolean(_lookup(name, environ))


def env_str(name: str, fallback: str | None = MISSING, *, environ: Mapping[str, str] | None = None) -> str | None:
    try:
        return parse_string(_lookup(name, environ), fallback)
    except EnvParseError as e:
        raise _named(e, name) from None


def env_number(
    name: str, fallback: Number | None = MISSING, *, environ: Mapping[str, str] | None = None
) -> Number | None:
    try:
        return parse_number(_lookup(name, environ), fallback)
    except EnvParseError as e:
        raise _named(e, name) from None


def env_array(
    name: str,
    options: ArrayOptions | Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> list[str] | list[Number]:
    try:
        return parse_array(_lookup(name, environ), options)
    except EnvParseError as e:
        raise _named(e, name) from None


def env_null(
    name: str,
    options: NullOptions | Mapping[str, Any] | None = None,
    *,
    environ: Mapping[str, str] | None = None,
) -> None:
    try:
        return parse_null(_lookup(name, environ), options)
    except EnvParseError as e:
        raise _named(e, name) from None
