from __future__ import annotations

import pytest

from typed_env.errors import MissingRequiredVariablesError
from typed_env.required import mandatory_variables
from typed_env.states import ParseErrorKind


def test_mandatory_variables_reports_missing_names() -> None:
    with pytest.raises(MissingRequiredVariablesError) as ei:
        mandatory_variables(["A", "B"], {"A": "1"})
    assert ei.value.missing == ["B"]
    assert ei.value.kind == ParseErrorKind.MISSING_REQUIRED_VARIABLES
    assert str(ei.value) == "missing required env variables [B]"


def test_mandatory_variables_keeps_required_order() -> None:
    with pytest.raises(MissingRequiredVariablesError) as ei:
        mandatory_variables(["Z", "A", "M", "B"], {"A"})
    assert ei.value.missing == ["Z", "M", "B"]
    assert "[Z, M, B]" in str(ei.value)


def test_mandatory_variables_passes_when_all_present() -> None:
    assert mandatory_variables(["A"], {"A": "x"}) is None
    assert mandatory_variables([], {}) is None
    # Presence only; the value itself is never looked at.
    assert mandatory_variables(["EMPTY"], {"EMPTY": ""}) is None


def test_mandatory_variables_does_not_mutate_source() -> None:
    source = {"A": "1"}
    with pytest.raises(MissingRequiredVariablesError):
        mandatory_variables(["A", "B"], source)
    assert source == {"A": "1"}


def test_mandatory_variables_defaults_to_os_environ(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("TYPED_ENV_TEST_PRESENT", "yes")
    monkeypatch.delenv("TYPED_ENV_TEST_ABSENT", raising=False)

    mandatory_variables(["TYPED_ENV_TEST_PRESENT"])
    with pytest.raises(MissingRequiredVariablesError) as ei:
        mandatory_variables(["TYPED_ENV_TEST_PRESENT", "TYPED_ENV_TEST_ABSENT"])
    assert ei.value.missing == ["TYPED_ENV_TEST_ABSENT"]
