from __future__ import annotations

from typed_env.states import ParseErrorKind


class EnvParseError(ValueError):
    kind: ParseErrorKind

    def __init__(self, message: str, *, name: str | None = None) -> None:
        super().__init__(message)
        self.name = name


class MissingWithoutFallbackError(EnvParseError):
    kind = ParseErrorKind.MISSING_WITHOUT_FALLBACK

    def __init__(self, message: str = "undefined input without a fallback", *, name: str | None = None) -> None:
        super().__init__(message, name=name)


class UnparsableNumberError(EnvParseError):
    kind = ParseErrorKind.UNPARSABLE_NUMBER

    def __init__(self, value: str, *, name: str | None = None) -> None:
        super().__init__(f"cannot parse {value!r} as a number", name=name)
        self.value = value


class UnparsableNullError(EnvParseError):
    kind = ParseErrorKind.UNPARSABLE_NULL

    def __init__(self, value: str, *, name: str | None = None) -> None:
        super().__init__(f"{value!r} is not null", name=name)
        self.value = value


class AbsentNullDisallowedError(EnvParseError):
    kind = ParseErrorKind.ABSENT_NULL_DISALLOWED

    def __init__(self, message: str = "undefined input is not allowed", *, name: str | None = None) -> None:
        super().__init__(message, name=name)


class MissingRequiredVariablesError(EnvParseError):
    kind = ParseErrorKind.MISSING_REQUIRED_VARIABLES

    def __init__(self, missing: list[str]) -> None:
        super().__init__(f"missing required env variables [{', '.join(missing)}]")
        self.missing = list(missing)
