"""Tests for the field eligibility policy."""

import pytest

from adifsub.fields import (
    DEFAULT_POLICY,
    DEFAULT_UNICODE_FIELDS,
    FieldPolicy,
    is_eligible,
)


class TestDefaultPolicy:
    """Tests for the default allow-list."""

    @pytest.mark.parametrize("field", DEFAULT_UNICODE_FIELDS)
    def test_listed_fields_eligible(self, field: str) -> None:
        assert is_eligible(field)

    def test_case_insensitive(self) -> None:
        assert is_eligible("comment")
        assert is_eligible("My_Sig_Info")

    @pytest.mark.parametrize("field", ["FREQ", "CALL", "QSO_DATE", "", "COMMENTS", "COMM"])
    def test_unlisted_fields_ineligible(self, field: str) -> None:
        assert not is_eligible(field)

    def test_no_wildcards(self) -> None:
        assert not is_eligible("MY_*")
        assert not is_eligible("APP_LOGGER_COMMENT")

    def test_size(self) -> None:
        assert len(DEFAULT_POLICY) == 19


class TestFieldPolicy:
    """Tests for FieldPolicy."""

    def test_names_normalized(self) -> None:
        policy = FieldPolicy([" qth ", "Name", ""])
        assert policy.fields == ["NAME", "QTH"]

    def test_contains(self) -> None:
        policy = FieldPolicy(["QTH"])
        assert "qth" in policy
        assert "NAME" not in policy
        assert 42 not in policy

    def test_extend_returns_new_policy(self) -> None:
        policy = FieldPolicy(["QTH"])
        extended = policy.extend(["APP_X_NOTE"])
        assert extended.is_eligible("app_x_note")
        assert not policy.is_eligible("APP_X_NOTE")

    def test_equality(self) -> None:
        assert FieldPolicy(["qth", "name"]) == FieldPolicy(["NAME", "QTH"])
        assert FieldPolicy(["QTH"]) != FieldPolicy(["NAME"])
        assert hash(FieldPolicy(["qth"])) == hash(FieldPolicy(["QTH"]))

    def test_empty_policy(self) -> None:
        policy = FieldPolicy([])
        assert not policy.is_eligible("COMMENT")
        assert len(policy) == 0

    def test_is_eligible_with_policy(self) -> None:
        assert is_eligible("FREQ", FieldPolicy(["FREQ"]))
        assert not is_eligible("COMMENT", FieldPolicy(["FREQ"]))
