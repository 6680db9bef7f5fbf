from __future__ import annotations

from enum import StrEnum


class ParseErrorKind(StrEnum):
    MISSING_WITHOUT_FALLBACK = "missing_without_fallback"
    UNPARSABLE_NUMBER = "unparsable_number"
    UNPARSABLE_NULL = "unparsable_null"
    ABSENT_NULL_DISALLOWED = "absent_null_disallowed"
    MISSING_REQUIRED_VARIABLES = "missing_required_variables"
