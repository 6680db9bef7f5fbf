"""Typed parsers for raw environment variable values.

Every parser takes the raw value as ``str | None`` where ``None`` means the
variable is not set. Parsers that need a default take an optional ``fallback``;
passing ``fallback=None`` is different from not passing it at all.
"""

from __future__ import annotations

import logging
import math
import re
from collections.abc import Mapping
from typing import Any

from typed_env.errors import (
    AbsentNullDisallowedError,
    MissingWithoutFallbackError,
    UnparsableNullError,
    UnparsableNumberError,
)
from typed_env.options import ArrayOptions, NullOptions, resolve_options

logger = logging.getLogger(__name__)


class _Missing:
    __slots__ = ()

    def __repr__(self) -> str:
        return "<missing>"


MISSING: Any = _Missing()

_TRUTHY = {"true", "1"}

_INT_RE = re.compile(r"[+-]?[0-9]+")
_NUMBER_RE = re.compile(r"[+-]?(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?")
_INFINITY_RE = re.compile(r"([+-]?)Infinity")
# str.strip() keeps the byte order mark.
_TRIM_RE = re.compile(r"\A[\s\ufeff]+|[\s\ufeff]+\Z")

Number = int | float


def _trim(value: str) -> str:
    return _TRIM_RE.sub("", value)


def parse_boolean(value: str | None) -> bool:
    """Return True for "true" / "1" (any case, surrounding blanks ignored), else False.

    >>> parse_boolean("True"), parse_boolean(" 1 "), parse_boolean("0"), parse_boolean(None)
    (True, True, False, False)
    """

    if value is None:
        return False
    return _trim(value).lower() in _TRUTHY


def parse_string(value: str | None, fallback: str | None = MISSING) -> str | None:
    """Trim a present value; otherwise return ``fallback`` untouched.

    Raises:
        MissingWithoutFallbackError: value is None and no fallback was given.
    """

    if value is not None:
        return _trim(value)
    if fallback is MISSING:
        raise MissingWithoutFallbackError()
    logger.debug("string value missing, using fallback %r", fallback)
    return fallback


def _to_number(value: str) -> Number | None:
    text = _trim(value)
    if not text:
        return None
    if _INT_RE.fullmatch(text):
        return int(text)
    if _NUMBER_RE.fullmatch(text):
        return float(text)
    m = _INFINITY_RE.fullmatch(text)
    if m:
        return -math.inf if m.group(1) == "-" else math.inf
    return None


def parse_number(value: str | None, fallback: Number | None = MISSING) -> Number | None:
    """Convert decimal or scientific notation text to ``int`` / ``float``.

    Integer literals come back as ``int``. Empty or blank text is not a number.
    When conversion fails the fallback is returned as-is, even if it is None.

    Raises:
        MissingWithoutFallbackError: value is None and no fallback was given.
        UnparsableNumberError: value is not a number and no fallback was given.
    """

    parsed = None if value is None else _to_number(value)
    if parsed is not None:
        return parsed

    if fallback is MISSING:
        if value is None:
            raise MissingWithoutFallbackError()
        raise UnparsableNumberError(value)
    logger.debug("number value %r not usable, using fallback %r", value, fallback)
    return fallback


def parse_array(
    value: str | None,
    options: ArrayOptions | Mapping[str, Any] | None = None,
) -> list[str] | list[Number]:
    """Split ``value`` on a literal delimiter and parse every element.

    Elements are parsed without a fallback, so one bad element fails the whole
    call. A trailing delimiter yields a trailing empty element.

    >>> parse_array("a;b;c", {"delimiter": ";"})
    ['a', 'b', 'c']
    >>> parse_array("1,2,3", ArrayOptions(parse_number=True))
    [1, 2, 3]
    >>> parse_array(None)
    []
    """

    if value is None:
        return []

    opts = resolve_options(options, ArrayOptions)
    parts = value.split(opts.delimiter)
    if opts.parse_number:
        return [parse_number(part) for part in parts]  # type: ignore[misc]
    return [parse_string(part) for part in parts]  # type: ignore[misc]


def parse_null(value: str | None, options: NullOptions | Mapping[str, Any] | None = None) -> None:
    """Accept the "null" token (any case); absent input only with ``allow_undefined``.

    Raises:
        UnparsableNullError: value is present but not "null".
        AbsentNullDisallowedError: value is None and ``allow_undefined`` is off.
    """

    opts = resolve_options(options, NullOptions)
    if value is None:
        if not opts.allow_undefined:
            raise AbsentNullDisallowedError()
        return None

    if _trim(value).lower() != "null":
        raise UnparsableNullError(value)
    return None
